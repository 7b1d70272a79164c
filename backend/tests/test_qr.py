"""Tests for view links and QR image URLs."""
from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

from infusesecret.config import Settings
from infusesecret.services.qr import ShareLinks, build_qr_url, build_view_url


def test_view_url():
    assert build_view_url("http://localhost:3000", "abc") == "http://localhost:3000/#/view/abc"


def test_view_url_tolerates_trailing_slash():
    assert build_view_url("https://x.example.com/", "abc") == "https://x.example.com/#/view/abc"


def test_qr_url_encodes_view_link():
    url = build_qr_url(
        "https://api.qrserver.com/v1/create-qr-code/",
        "http://localhost:3000/#/view/abc",
    )
    assert url == (
        "https://api.qrserver.com/v1/create-qr-code/"
        "?size=300x300&data=http%3A%2F%2Flocalhost%3A3000%2F%23%2Fview%2Fabc"
    )


def test_qr_url_round_trips_through_query_parsing():
    url = build_qr_url("https://qr.example.com/render", "https://s.example.com/#/view/x?y=1", size=120)
    parts = urlsplit(url)
    query = parse_qs(parts.query)
    assert parts.fragment == ""
    assert query["size"] == ["120x120"]
    assert query["data"] == ["https://s.example.com/#/view/x?y=1"]


def test_share_links_from_settings():
    settings = Settings(
        _env_file=None,
        frontend_url="https://secret.example.com",
        qr_service_url="https://qr.example.com/render",
        qr_size=200,
    )
    links = ShareLinks(settings)
    assert links.view_url("abc") == "https://secret.example.com/#/view/abc"
    assert links.qr_url("abc").startswith("https://qr.example.com/render?size=200x200&data=")
