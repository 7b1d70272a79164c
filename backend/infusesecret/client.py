"""HTTP client for the InfuseSecret API.

Used by the reveal flow to report scans and by the command-line scripts.
Error responses are raised as the same error classes the service uses.
"""
from __future__ import annotations

import logging
from typing import Any

import httpx

from infusesecret.config import Settings
from infusesecret.errors import (
    AuthorizationError,
    InfuseSecretError,
    InternalError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_ERRORS: dict[int, type[InfuseSecretError]] = {
    400: ValidationError,
    403: AuthorizationError,
    404: NotFoundError,
}


class InfuseSecretClient:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> InfuseSecretClient:
        return cls(settings.api_url, timeout=settings.client_timeout_seconds)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> InfuseSecretClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        response = self._client.request(method, path, **kwargs)
        try:
            body = response.json()
        except ValueError:
            body = None

        if response.is_success:
            if body is None:
                raise InternalError("Invalid response from API")
            return body

        detail = body.get("error") if isinstance(body, dict) else None
        error_cls = _STATUS_ERRORS.get(response.status_code, InternalError)
        raise error_cls(detail)

    def create_message(
        self,
        message: str,
        theme: str,
        photo_url: str | None = None,
        quote: str | None = None,
    ) -> dict[str, Any]:
        return self._request(
            "POST",
            "/messages",
            json={
                "message": message,
                "theme": theme,
                "photo_url": photo_url,
                "quote": quote,
            },
        )

    def get_message(self, message_id: str) -> dict[str, Any]:
        return self._request("GET", f"/messages/{message_id}")

    def get_message_for_edit(self, edit_key: str) -> dict[str, Any]:
        return self._request("GET", f"/messages/edit/{edit_key}")

    def update_message(
        self,
        message_id: str,
        edit_key: str,
        message: str,
        photo_url: str | None = None,
        quote: str | None = None,
    ) -> dict[str, Any]:
        return self._request(
            "PUT",
            f"/messages/{message_id}",
            json={
                "message": message,
                "photo_url": photo_url,
                "quote": quote,
                "editKey": edit_key,
            },
        )

    def delete_message(self, message_id: str, edit_key: str) -> dict[str, Any]:
        # httpx.Client.delete() takes no body
        return self._request(
            "DELETE", f"/messages/{message_id}", json={"editKey": edit_key}
        )

    def record_scan(self, message_id: str) -> dict[str, Any]:
        return self._request("PATCH", f"/messages/{message_id}/scan")

    def list_recent(self, limit: int = 100) -> list[dict[str, Any]]:
        return self._request("GET", "/admin/messages", params={"limit": limit})
