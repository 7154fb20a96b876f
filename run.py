from digit_dataset import create_app
import sys
import logging
from digit_dataset.config import DatasetConfig
from digit_dataset.dataset import count_images

BANNER = """
========================================
  Digit Dataset Creator Server
========================================
  Server running at: http://localhost:{port}

  Instructions:
  1. Open http://localhost:{port}/draw.html
  2. Select digit (0-9)
  3. Draw the digit
  4. Click "Save to Dataset"

  Images saved to: {root}/[digit]/[timestamp].png
========================================
"""


def print_counts(config):
    summary = count_images(config)
    for digit, count in summary["byDigit"].items():
        print(f"  {digit}: {count}")
    print(f"  total: {summary['total']}")


def main(argv, config=None):
    if config is None:
        config = DatasetConfig.default()
    app = create_app(config)

    if len(argv) > 1 and argv[1] == "count":
        print_counts(config)
        return

    print(BANNER.format(port=config.port, root=config.dataset_root.name))
    app.run(host=config.host, port=config.port)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main(sys.argv)
