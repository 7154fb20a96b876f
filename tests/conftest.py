"""Shared fixtures for dataset server tests."""

from __future__ import annotations

import base64

import pytest
from flask import Flask
from flask.testing import FlaskClient

from digit_dataset import create_app
from digit_dataset.config import DatasetConfig

# 1x1 transparent PNG
PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


@pytest.fixture
def png_base64() -> str:
    """Base64 text of a tiny valid PNG."""
    return PNG_BASE64


@pytest.fixture
def png_bytes() -> bytes:
    """Decoded bytes of the tiny PNG."""
    return base64.b64decode(PNG_BASE64)


@pytest.fixture
def config(tmp_path) -> DatasetConfig:
    """Config rooted in a per-test dataset directory."""
    return DatasetConfig(dataset_root=tmp_path / "dataset")


@pytest.fixture
def app(config: DatasetConfig) -> Flask:
    """Application built against the temporary dataset root."""
    flask_app = create_app(config)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Flask test client for the application."""
    return app.test_client()
