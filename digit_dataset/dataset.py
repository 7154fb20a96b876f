import os

from digit_dataset.config import DIGITS


def init_dataset_dirs(config):
    for digit in DIGITS:
        digit_dir = config.digit_dir(digit)
        if not os.path.exists(digit_dir):
            os.makedirs(digit_dir, exist_ok=True)


def count_images(config):
    # Missing digit directories count as zero; listing errors propagate
    by_digit = {}
    total = 0
    for digit in DIGITS:
        digit_dir = config.digit_dir(digit)
        if os.path.exists(digit_dir):
            files = [
                filename for filename in os.listdir(digit_dir)
                if filename.endswith(config.image_extension)
            ]
            by_digit[str(digit)] = len(files)
            total += len(files)
        else:
            by_digit[str(digit)] = 0

    return {"total": total, "byDigit": by_digit}
