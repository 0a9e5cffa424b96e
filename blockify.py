import logging
import os
from json import load
from pathlib import Path

from dotenv import load_dotenv
from flasgger import Swagger
from flask import Flask, Response, jsonify, redirect
from werkzeug.exceptions import HTTPException

from config import ConfigError, IconConfig
from icons.api import configure_icons

# if .env file exists, load it
if Path(".env").exists():
    load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

try:
    icon_config = IconConfig.from_env()
except ConfigError as error:
    raise SystemExit(f"Invalid icon configuration: {error}") from error

# initialise flask app
app = Flask(__name__)

# attach icon store and add icon routes
configure_icons(app, icon_config)
logger.info(
    f"Serving {len(icon_config.sets)} icon sets at /{icon_config.namespace}/v1/icons/"
)

# setup Swagger
with (Path(__file__).parent / "swagger.json").open("r") as f:
    swagger = Swagger(app, template=load(f))


@app.route("/")
@app.route("/api/")
@app.route("/docs/")
def redirect_to_docs() -> Response:
    """Redirect to the Swagger documentation"""
    return redirect("/apidocs/")


@app.errorhandler(HTTPException)
def http_error(error: HTTPException) -> tuple[Response, int]:
    """Return http errors as json"""
    return jsonify({"error": error.description}), error.code or 500
