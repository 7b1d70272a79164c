"""Message store: single-record CRUD over the ``messages`` table.

Every operation commits (or rolls back) on its own; there are no
multi-record transactions. Uniqueness violations surface as
``ConflictError``, any other database failure as ``InternalError``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, col, select

from infusesecret.errors import ConflictError, InternalError
from infusesecret.models.message import Message

logger = logging.getLogger(__name__)


class MessageStore:
    def __init__(self, session: Session) -> None:
        self._session = session

    @contextmanager
    def _unit(self, action: str) -> Iterator[None]:
        try:
            yield
        except IntegrityError as exc:
            self._session.rollback()
            raise ConflictError() from exc
        except SQLAlchemyError as exc:
            self._session.rollback()
            logger.exception("Message store failed to %s", action)
            raise InternalError() from exc

    def insert(self, message: Message) -> Message:
        with self._unit("insert message"):
            self._session.add(message)
            self._session.commit()
            self._session.refresh(message)
        return message

    def get(self, message_id: str) -> Message | None:
        with self._unit("load message"):
            return self._session.get(Message, message_id)

    def get_by_edit_key(self, edit_key: str) -> Message | None:
        with self._unit("load message by edit key"):
            return self._session.exec(
                select(Message).where(Message.edit_key == edit_key)
            ).first()

    def save(self, message: Message) -> Message:
        with self._unit("save message"):
            self._session.add(message)
            self._session.commit()
            self._session.refresh(message)
        return message

    def delete(self, message: Message) -> None:
        with self._unit("delete message"):
            self._session.delete(message)
            self._session.commit()

    def increment_scan(self, message_id: str) -> bool:
        """Add one to ``scan_count`` in a single UPDATE; False if no such row."""
        with self._unit("increment scan count"):
            result = self._session.execute(
                update(Message)
                .where(col(Message.id) == message_id)
                .values(scan_count=col(Message.scan_count) + 1)
            )
            self._session.commit()
        return result.rowcount > 0

    def list_recent(self, limit: int) -> list[Message]:
        with self._unit("list messages"):
            return list(
                self._session.exec(
                    select(Message)
                    .order_by(col(Message.created_at).desc())
                    .limit(limit)
                ).all()
            )
