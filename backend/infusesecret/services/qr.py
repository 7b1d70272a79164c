"""Share links for a message: the view URL and the QR image that encodes it.

QR rendering is delegated to an external image endpoint; we only build its URL.
"""

from __future__ import annotations

from urllib.parse import urlencode

from infusesecret.config import Settings


def build_view_url(frontend_url: str, message_id: str) -> str:
    return f"{frontend_url.rstrip('/')}/#/view/{message_id}"


def build_qr_url(qr_service_url: str, data: str, size: int = 300) -> str:
    query = urlencode({"size": f"{size}x{size}", "data": data})
    return f"{qr_service_url}?{query}"


class ShareLinks:
    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def view_url(self, message_id: str) -> str:
        return build_view_url(self._settings.frontend_url, message_id)

    def qr_url(self, message_id: str) -> str:
        return build_qr_url(
            self._settings.qr_service_url,
            self.view_url(message_id),
            size=self._settings.qr_size,
        )
