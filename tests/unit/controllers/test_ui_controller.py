"""Tests for the drawing page and static asset serving."""

from __future__ import annotations


def test_root_serves_draw_page(client) -> None:
    """GET / should return the drawing UI."""
    response = client.get("/")

    assert response.status_code == 200
    assert b"/save-image" in response.data


def test_static_draw_page_is_served_from_url_root(client) -> None:
    """Static files should be reachable without a /static prefix."""
    response = client.get("/draw.html")

    assert response.status_code == 200
    assert response.mimetype == "text/html"


def test_unknown_static_file_returns_404(client) -> None:
    """Missing assets should fall back to the default 404."""
    assert client.get("/missing.js").status_code == 404
