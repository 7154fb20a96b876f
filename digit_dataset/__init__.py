from flask import Flask, jsonify

from digit_dataset.config import DatasetConfig
from digit_dataset.dataset import init_dataset_dirs
from digit_dataset.errors import DatasetError


def create_app(config=None):
    if config is None:
        config = DatasetConfig.default()

    # The static directory is served from the URL root (/draw.html)
    app = Flask(__name__, static_folder=str(config.static_root), static_url_path="")
    app.config["DATASET_CONFIG"] = config
    app.config["MAX_CONTENT_LENGTH"] = config.max_content_length

    init_dataset_dirs(config)

    @app.errorhandler(DatasetError)
    def handle_dataset_error(error):
        return jsonify(error.to_dict()), error.status_code

    # Blueprint registration
    from .routes.api import api_bp
    app.register_blueprint(api_bp)

    from .routes.ui import ui_bp
    app.register_blueprint(ui_bp)

    return app
