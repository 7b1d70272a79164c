from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from hmac import compare_digest

from infusesecret.errors import (
    AuthorizationError,
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from infusesecret.models.message import Message, MessageRead, MessageSummary, utc_now
from infusesecret.services.qr import ShareLinks
from infusesecret.services.store import MessageStore
from infusesecret.themes import Theme

logger = logging.getLogger(__name__)

ID_BYTES = 8  # 16 hex chars
EDIT_KEY_BYTES = 16  # 32 hex chars
PREVIEW_LENGTH = 50
MAX_LIST_LIMIT = 100
CREATE_ATTEMPTS = 2  # first try plus one retry on identifier collision


def generate_id() -> str:
    return secrets.token_hex(ID_BYTES)


def generate_edit_key() -> str:
    return secrets.token_hex(EDIT_KEY_BYTES)


@dataclass(frozen=True, slots=True)
class CreatedMessage:
    id: str
    edit_key: str
    view_url: str
    qr_url: str


def _clean_text(text: str | None) -> str:
    if not isinstance(text, str) or not text.strip():
        raise ValidationError("Message is required")
    return text.strip()


def _optional(value: str | None) -> str | None:
    # Empty strings from form fields are stored as NULL
    return value or None


class MessageService:
    """Create, read, edit and delete messages.

    The public id is what a QR code carries; the edit key is handed to the
    creator once and is the only credential for mutating the message.
    Reads never return the edit key.
    """

    def __init__(self, store: MessageStore, links: ShareLinks) -> None:
        self._store = store
        self._links = links

    def create(
        self,
        text: str | None,
        theme: str | None,
        photo_url: str | None = None,
        quote: str | None = None,
    ) -> CreatedMessage:
        body = _clean_text(text)
        parsed_theme = Theme.parse(theme)
        if parsed_theme is None:
            raise ValidationError("Invalid theme")

        for attempt in range(1, CREATE_ATTEMPTS + 1):
            record = Message(
                id=generate_id(),
                edit_key=generate_edit_key(),
                message=body,
                theme=parsed_theme.value,
                photo_url=_optional(photo_url),
                quote=_optional(quote),
            )
            try:
                stored = self._store.insert(record)
            except ConflictError:
                logger.warning(
                    "Identifier collision creating message (attempt %d/%d)",
                    attempt,
                    CREATE_ATTEMPTS,
                )
                continue
            logger.info("Created message %s (theme=%s)", stored.id, stored.theme)
            return CreatedMessage(
                id=stored.id,
                edit_key=stored.edit_key,
                view_url=self._links.view_url(stored.id),
                qr_url=self._links.qr_url(stored.id),
            )

        raise InternalError("Failed to create message")

    def get_by_id(self, message_id: str) -> MessageRead:
        record = self._store.get(message_id)
        if record is None:
            raise NotFoundError("Message not found")
        return MessageRead.model_validate(record)

    def get_by_edit_key(self, edit_key: str) -> MessageRead:
        record = self._store.get_by_edit_key(edit_key)
        if record is None:
            raise NotFoundError("Invalid edit key")
        return MessageRead.model_validate(record)

    def update(
        self,
        message_id: str,
        edit_key: str | None,
        text: str | None,
        photo_url: str | None = None,
        quote: str | None = None,
    ) -> MessageRead:
        """Overwrite text, photo and quote. The theme is fixed at creation."""
        body = _clean_text(text)
        if not edit_key:
            raise ValidationError("Edit key is required")

        record = self._authorize(
            message_id, edit_key, "Invalid edit key or message not found"
        )
        record.message = body
        record.photo_url = _optional(photo_url)
        record.quote = _optional(quote)
        record.updated_at = utc_now()
        stored = self._store.save(record)
        logger.info("Updated message %s", message_id)
        return MessageRead.model_validate(stored)

    def delete(self, message_id: str, edit_key: str | None) -> None:
        if not edit_key:
            raise ValidationError("Edit key is required")

        record = self._authorize(message_id, edit_key, "Invalid edit key")
        self._store.delete(record)
        logger.info("Deleted message %s", message_id)

    def increment_scan(self, message_id: str) -> bool:
        """Count one unlock. Unknown ids are ignored; returns whether a row changed."""
        found = self._store.increment_scan(message_id)
        if not found:
            logger.debug("Scan for unknown message %s ignored", message_id)
        return found

    def list_recent(self, limit: int = MAX_LIST_LIMIT) -> list[MessageSummary]:
        limit = max(1, min(MAX_LIST_LIMIT, limit))
        return [
            MessageSummary(
                id=m.id,
                message_preview=m.message[:PREVIEW_LENGTH],
                theme=m.theme,
                scan_count=m.scan_count,
                created_at=m.created_at,
            )
            for m in self._store.list_recent(limit)
        ]

    def _authorize(self, message_id: str, edit_key: str, failure: str) -> Message:
        record = self._store.get(message_id)
        # Unknown id and wrong key are indistinguishable to the caller
        if record is None or not compare_digest(
            record.edit_key.encode("utf-8"), edit_key.encode("utf-8")
        ):
            raise AuthorizationError(failure)
        return record
