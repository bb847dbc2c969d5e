import os
from flask import Flask

from explorer.assets import AssetConfig
from explorer.listing import DEFAULT_MAX_READ_BYTES
from explorer.render import DEFAULT_TITLE
from routes.main_routes import main_bp
from routes.file_routes import files_bp


def create_app(config=None):
    """Create and configure the Flask application"""
    app = Flask(__name__)

    app.config["FILES_ROOT"] = os.getcwd()
    app.config["CONFINE_TO_ROOT"] = True
    app.config["MAX_READ_BYTES"] = DEFAULT_MAX_READ_BYTES
    app.config["ASSETS"] = AssetConfig()
    app.config["TITLE"] = DEFAULT_TITLE

    # Apply configuration if provided
    if config:
        app.config.update(config)

    app.config["FILES_ROOT"] = os.path.abspath(app.config["FILES_ROOT"])

    # Register blueprints
    app.register_blueprint(main_bp)
    app.register_blueprint(files_bp)

    return app
