from flask import Blueprint
from digit_dataset.controllers.api_controller import image_count, save_image

api_bp = Blueprint("api", __name__)

# -----------------------------
# Per-digit image counts
# -----------------------------
api_bp.add_url_rule("/image-count", view_func=image_count, methods=["GET"])

# -----------------------------
# Save a drawn digit
# -----------------------------
api_bp.add_url_rule("/save-image", view_func=save_image, methods=["POST"])
