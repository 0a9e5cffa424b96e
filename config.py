import json
import os
from dataclasses import dataclass, field
from pathlib import Path


class ConfigError(ValueError):
    """Raised when the icon configuration is unusable"""


# icon sets shipped with the theme, relative to ICONS_DIR
default_icon_sets = {
    "wordpress": "wordpress",
    "social": "social",
}

# the only set whose markup gets recoloured
wordpress_set = "wordpress"

# rest namespace, routes are served from /<namespace>/v1/icons/
default_namespace = "blockify"


@dataclass(frozen=True)
class IconConfig:
    """Icon sets to serve and how to serve them"""

    sets: dict[str, Path] = field(default_factory=dict)
    namespace: str = default_namespace
    cache: bool = False

    @classmethod
    def from_mapping(
        cls, sets: dict[str, str | Path], base_dir: str | Path = ".", **kwargs: object
    ) -> "IconConfig":
        """Build a config from set name -> directory, resolving relative dirs"""
        base = Path(base_dir)
        resolved = {}
        for name, directory in sets.items():
            if not isinstance(name, str) or not isinstance(directory, (str, Path)):
                raise ConfigError(f"Invalid icon set entry: {name!r} -> {directory!r}")
            path = Path(directory)
            resolved[name] = path if path.is_absolute() else base / path
        return cls(sets=resolved, **kwargs)  # type: ignore[arg-type]

    @classmethod
    def from_env(cls) -> "IconConfig":
        """Build a config from environment variables (falls back to defaults)"""
        base_dir = os.getenv("ICONS_DIR", "static/icons")

        raw_sets = os.getenv("ICON_SETS")
        if raw_sets:
            try:
                sets = json.loads(raw_sets)
            except json.JSONDecodeError as error:
                raise ConfigError("ICON_SETS must be a JSON object") from error
            if not isinstance(sets, dict):
                raise ConfigError("ICON_SETS must be a JSON object")
        else:
            sets = default_icon_sets

        namespace = os.getenv("ICON_NAMESPACE", default_namespace).strip("/")
        if not namespace:
            raise ConfigError("ICON_NAMESPACE cannot be empty")

        return cls.from_mapping(
            sets,
            base_dir,
            namespace=namespace,
            cache=os.getenv("ICON_CACHE") == "1",
        )
