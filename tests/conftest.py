"""Pytest configuration and shared fixtures."""

import pytest
from flask import Flask

from config import IconConfig
from icons.api import configure_icons

ARROW_RIGHT = '<svg xmlns="http://www.w3.org/2000/svg" fill="none"><path d="M4 12h16"/></svg>'  # noqa: E501
GITHUB = '<!-- GitHub mark -->\n<svg xmlns="http://www.w3.org/2000/svg"><path d="M12 0"/></svg>'  # noqa: E501


@pytest.fixture
def icons_dir(tmp_path):
    """Provide an icons directory with a wordpress and a social set."""
    wordpress = tmp_path / "wordpress"
    wordpress.mkdir()
    (wordpress / "arrow-right.svg").write_text(ARROW_RIGHT, encoding="utf-8")

    social = tmp_path / "social"
    social.mkdir()
    (social / "github.svg").write_text(GITHUB, encoding="utf-8")
    # not an svg, should be ignored
    (social / "README.md").write_text("# social icons", encoding="utf-8")

    return tmp_path


@pytest.fixture
def icon_config(icons_dir):
    """Provide an icon config pointing at the temporary icon sets."""
    return IconConfig.from_mapping(
        {"wordpress": "wordpress", "social": "social"}, icons_dir
    )


@pytest.fixture
def make_app():
    """Factory fixture for creating a Flask app serving a given icon config."""

    def _make(config):
        app = Flask(__name__)
        app.config["TESTING"] = True
        configure_icons(app, config)
        return app

    return _make


@pytest.fixture
def client(make_app, icon_config):
    """Provide a test client for an app serving the temporary icon sets."""
    return make_app(icon_config).test_client()
