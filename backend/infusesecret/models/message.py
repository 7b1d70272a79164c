"""Message model: the secret message behind a QR code."""
from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from sqlalchemy import CheckConstraint, Column, Text
from sqlmodel import Field, SQLModel

from infusesecret.themes import THEME_VALUES


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


_THEME_CHECK = "theme IN ({})".format(", ".join(f"'{v}'" for v in THEME_VALUES))


class Message(SQLModel, table=True):
    __tablename__ = "messages"
    __table_args__ = (
        CheckConstraint(_THEME_CHECK, name="ck_messages_theme"),
    )

    id: str = Field(primary_key=True, max_length=255)  # public, shared via QR
    edit_key: str = Field(unique=True, index=True, max_length=255)  # secret
    message: str = Field(sa_column=Column(Text, nullable=False))
    theme: str = Field(max_length=20)
    photo_url: str | None = Field(default=None, max_length=500)
    quote: str | None = Field(default=None, max_length=255)
    scan_count: int = Field(default=0)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)


# --- Pydantic request/response schemas ---


class MessageCreate(BaseModel):
    # Presence and content are checked by MessageService so the API can
    # answer with its own messages ("Message is required", "Invalid theme").
    message: str | None = None
    theme: str | None = None
    photo_url: str | None = None
    quote: str | None = None


class MessageUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str | None = None
    photo_url: str | None = None
    quote: str | None = None
    edit_key: str | None = PydanticField(default=None, alias="editKey")


class MessageDelete(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    edit_key: str | None = PydanticField(default=None, alias="editKey")


class MessageRead(BaseModel):
    """Public view of a message. Never carries the edit key."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    message: str
    theme: str
    photo_url: str | None
    quote: str | None
    scan_count: int
    created_at: datetime
    updated_at: datetime


class MessageCreated(BaseModel):
    """Returned once, at creation: the only time the edit key is disclosed."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    id: str
    edit_key: str = PydanticField(alias="editKey")
    view_url: str = PydanticField(alias="viewUrl")
    qr_url: str = PydanticField(alias="qrUrl")
    message: str = "Message created successfully"


class MessageSummary(BaseModel):
    """Row of the admin listing."""

    id: str
    message_preview: str
    theme: str
    scan_count: int
    created_at: datetime


class ActionResult(BaseModel):
    success: bool = True
    message: str | None = None
