import logging

from flask import Blueprint, current_app

from explorer.errors import ExplorerError
from explorer.render import render_page, render_view
from explorer.views import select_view

logger = logging.getLogger(__name__)

files_bp = Blueprint('files', __name__)

HTML_HEADERS = {"Content-Type": "text/html; charset=utf-8"}


@files_bp.route("/files/", defaults={"subpath": ""})
@files_bp.route("/files/<path:subpath>")
def browse(subpath):
    """List a directory or show a file below the browsing root"""
    config = current_app.config

    try:
        view = select_view(subpath, config["FILES_ROOT"], confine=config["CONFINE_TO_ROOT"])
    except ExplorerError as e:
        logger.info(f"404 for /files/{subpath}: {e}")
        return "Not Found", 404, HTML_HEADERS

    content = render_view(view, config["MAX_READ_BYTES"])
    return render_page(content, config["ASSETS"], config["TITLE"]), 200, HTML_HEADERS
