from flask import jsonify, request

from digit_dataset.config import get_dataset_config
from digit_dataset.dataset import count_images
from digit_dataset.services import image_service


def image_count():
    summary = count_images(get_dataset_config())
    return jsonify({"success": True, **summary})


def save_image():
    data = request.get_json(force=True)
    # A JSON body that is not an object carries no fields
    if not isinstance(data, dict):
        data = {}

    saved = image_service.save_image(
        get_dataset_config(),
        data.get("digit"),
        data.get("imageData"),
    )
    return jsonify({"success": True, **saved})
