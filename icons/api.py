from flask import Blueprint, Flask, Response, current_app, jsonify, request

from config import IconConfig
from icons.utils import (
    IconQuery,
    IconStore,
    get_icon,
    get_icon_set,
    get_icon_set_names,
)

# bind endpoints to /<namespace>/v1/icons/...
icons_api_bp = Blueprint("icons_api", __name__)


def configure_icons(app: Flask, config: IconConfig) -> None:
    """attach icon config and store to the app, and add the icon routes"""
    app.extensions["icons"] = IconStore(config)
    app.register_blueprint(icons_api_bp, url_prefix=f"/{config.namespace}/v1/icons")


def get_store() -> IconStore:
    return current_app.extensions["icons"]


@icons_api_bp.route("/", methods=["GET"])
def get_icons() -> tuple[Response, int]:
    """Get icon sets, a single set, or a single icon
    ---
    security: []
    parameters:
      - name: set
        in: query
        type: string
        required: false
        description: Name of the icon set to return
      - name: icon
        in: query
        type: string
        required: false
        description: Name of the icon to return (requires set)
      - name: sets
        in: query
        type: string
        required: false
        description: If present (and not 0/false), only return the set names
    responses:
        200:
            description: >
                The SVG markup of one icon (set and icon), a mapping of icon
                name to markup (set), a list of set names (sets), or every set
                with its icons (no parameters)
            schema:
                $ref: '#/definitions/IconData'
        404:
            description: Icon set or icon not found
            schema:
                $ref: '#/definitions/Error'
    """

    query = IconQuery.from_args(request.args)
    icon_data = get_store().get()

    if query.set:
        icons = get_icon_set(icon_data, query.set)
        if icons is None:
            return jsonify({"error": "Icon set not found"}), 404

        if query.icon:
            icon = get_icon(icon_data, query.set, query.icon)
            if icon is None:
                return jsonify({"error": "Icon not found"}), 404
            return jsonify(icon), 200

        return jsonify(icons), 200

    if query.sets:
        return jsonify(get_icon_set_names(icon_data)), 200

    return jsonify(icon_data), 200
