from flask import Blueprint
from digit_dataset.controllers.ui_controller import show_draw

ui_bp = Blueprint("ui", __name__)
ui_bp.add_url_rule("/", view_func=show_draw)
