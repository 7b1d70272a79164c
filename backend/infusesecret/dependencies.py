"""FastAPI dependency injection for the message service."""

from __future__ import annotations

from fastapi import Depends
from sqlmodel import Session

from infusesecret.config import get_settings
from infusesecret.db import get_session
from infusesecret.services.messages import MessageService
from infusesecret.services.qr import ShareLinks
from infusesecret.services.store import MessageStore


def get_message_service(
    session: Session = Depends(get_session),
) -> MessageService:
    """Construct MessageService over a request-scoped store."""
    return MessageService(
        store=MessageStore(session),
        links=ShareLinks(get_settings()),
    )
