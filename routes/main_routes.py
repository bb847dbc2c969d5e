from flask import Blueprint, current_app, redirect, url_for

from explorer.render import render_page, render_settings
from routes.file_routes import HTML_HEADERS

main_bp = Blueprint('main', __name__)


@main_bp.route("/")
def index():
    return redirect(url_for("files.browse"), code=307)


@main_bp.route("/settings/")
def settings():
    """Show the effective configuration"""
    config = current_app.config
    assets = config["ASSETS"]
    rows = [
        ("Root directory", config["FILES_ROOT"]),
        ("Confined to root", "yes" if config["CONFINE_TO_ROOT"] else "no"),
        ("Max file size (bytes)", config["MAX_READ_BYTES"]),
    ]
    rows.extend(assets.items())
    html = render_page(render_settings(rows), assets, config["TITLE"])
    return html, 200, HTML_HEADERS
