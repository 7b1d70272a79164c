from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from infusesecret.dependencies import get_message_service
from infusesecret.models.message import MessageSummary
from infusesecret.services.messages import MAX_LIST_LIMIT, MessageService

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/messages", response_model=list[MessageSummary])
def list_messages(
    limit: int = Query(MAX_LIST_LIMIT, description="Clamped to 1..100"),
    service: MessageService = Depends(get_message_service),
) -> list[MessageSummary]:
    """Newest messages first, text truncated to a preview."""
    return service.list_recent(limit)
