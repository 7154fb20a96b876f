# Decoding and persistence of drawn digit images
import base64
import logging
import re
import time

from digit_dataset.errors import MissingFieldError, OutOfRangeError, WriteError

logger = logging.getLogger(__name__)

DATA_URI_PREFIX = "data:image/png;base64,"
# Leading zeros are allowed, but only one significant digit can be in range
DIGIT_LITERAL = re.compile(r"[+-]?0*[0-9]")
NON_BASE64 = re.compile(r"[^A-Za-z0-9+/]")


def current_millis():
    return time.time_ns() // 1_000_000


def parse_digit(value):
    """Coerce a request label to an int in 0-9.

    JSON integers and strings holding an integer literal are accepted.
    """
    if isinstance(value, bool):
        raise OutOfRangeError()
    if isinstance(value, int):
        digit = value
    elif isinstance(value, str) and DIGIT_LITERAL.fullmatch(value.strip()):
        digit = int(value.strip())
    else:
        raise OutOfRangeError()

    if digit < 0 or digit > 9:
        raise OutOfRangeError()
    return digit


def strip_data_uri(image_data):
    if image_data.startswith(DATA_URI_PREFIX):
        return image_data[len(DATA_URI_PREFIX):]
    return image_data


def decode_image_data(image_data):
    # Lenient like a browser-side decoder: stop at padding, skip unknown
    # characters, decode whatever complete bytes remain
    if not isinstance(image_data, str):
        raise TypeError("imageData must be a string")
    data = strip_data_uri(image_data).replace("-", "+").replace("_", "/")
    data = NON_BASE64.sub("", data.split("=", 1)[0])
    if len(data) % 4 == 1:
        data = data[:-1]
    data += "=" * (-len(data) % 4)
    return base64.b64decode(data)


def build_filename(config, timestamp=None):
    if timestamp is None:
        timestamp = current_millis()
    return f"{timestamp}{config.image_extension}"


def save_image(config, digit, image_data):
    # Same-millisecond saves to one digit share a filename; the later one wins
    if digit is None or not image_data:
        raise MissingFieldError()
    digit = parse_digit(digit)

    filename = build_filename(config)
    image_bytes = decode_image_data(image_data)
    filepath = config.digit_dir(digit) / filename
    relative_path = f"{config.dataset_root.name}/{digit}/{filename}"

    try:
        with open(filepath, "wb") as f:
            f.write(image_bytes)
    except OSError as e:
        logger.exception("Error saving file: %s", filepath)
        raise WriteError() from e

    logger.info("✓ Saved: %s", relative_path)
    return {"filename": filename, "path": relative_path}
