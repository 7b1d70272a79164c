"""Message router: create, view, edit, delete and scan counting."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from infusesecret.dependencies import get_message_service
from infusesecret.models.message import (
    ActionResult,
    MessageCreate,
    MessageCreated,
    MessageDelete,
    MessageRead,
    MessageUpdate,
)
from infusesecret.services.messages import MessageService

router = APIRouter(prefix="/api/messages", tags=["messages"])


@router.post("", response_model=MessageCreated, status_code=201)
def create_message(
    body: MessageCreate,
    service: MessageService = Depends(get_message_service),
) -> MessageCreated:
    created = service.create(
        body.message,
        body.theme,
        photo_url=body.photo_url,
        quote=body.quote,
    )
    return MessageCreated(
        id=created.id,
        edit_key=created.edit_key,
        view_url=created.view_url,
        qr_url=created.qr_url,
    )


@router.get("/edit/{edit_key}", response_model=MessageRead)
def get_message_for_edit(
    edit_key: str,
    service: MessageService = Depends(get_message_service),
) -> MessageRead:
    return service.get_by_edit_key(edit_key)


@router.get("/{message_id}", response_model=MessageRead)
def get_message(
    message_id: str,
    service: MessageService = Depends(get_message_service),
) -> MessageRead:
    return service.get_by_id(message_id)


@router.put("/{message_id}", response_model=ActionResult)
def update_message(
    message_id: str,
    body: MessageUpdate,
    service: MessageService = Depends(get_message_service),
) -> ActionResult:
    service.update(
        message_id,
        body.edit_key,
        body.message,
        photo_url=body.photo_url,
        quote=body.quote,
    )
    return ActionResult(message="Message updated successfully")


@router.patch(
    "/{message_id}/scan", response_model=ActionResult, response_model_exclude_none=True
)
def record_scan(
    message_id: str,
    service: MessageService = Depends(get_message_service),
) -> ActionResult:
    """Count an unlock. Always succeeds for the caller, even for unknown ids."""
    service.increment_scan(message_id)
    return ActionResult()


@router.delete("/{message_id}", response_model=ActionResult)
def delete_message(
    message_id: str,
    body: MessageDelete | None = None,
    service: MessageService = Depends(get_message_service),
) -> ActionResult:
    service.delete(message_id, body.edit_key if body else None)
    return ActionResult(message="Message deleted successfully")
