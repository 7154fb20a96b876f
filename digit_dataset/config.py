from dataclasses import dataclass
from pathlib import Path

from flask import current_app

PROJECT_DIR = Path(__file__).resolve().parent.parent
PACKAGE_DIR = Path(__file__).resolve().parent

DIGITS = range(10)
DEFAULT_PORT = 3000
MAX_UPLOAD_BYTES = 10 * 1024 * 1024


@dataclass(frozen=True)
class DatasetConfig:
    """Paths and server settings handed to every handler through app.config."""

    dataset_root: Path
    static_root: Path = PACKAGE_DIR / "static"
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    max_content_length: int = MAX_UPLOAD_BYTES
    image_extension: str = ".png"

    @classmethod
    def default(cls):
        return cls(dataset_root=PROJECT_DIR / "dataset")

    def digit_dir(self, digit):
        return self.dataset_root / str(digit)


def get_dataset_config():
    return current_app.config["DATASET_CONFIG"]
