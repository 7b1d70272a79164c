"""Reveal flow for a viewing session.

A recipient sees a locked screen and must click it ``CLICK_THRESHOLD`` times.
The click that reaches the threshold reports a scan to the API
(fire-and-forget), starts the falling-icon celebration and unlocks the
content for the rest of the session. Nothing here is persisted; a fresh
page load starts a fresh session.
"""

from __future__ import annotations

import enum
import logging
import random
import threading
from collections.abc import Callable
from dataclasses import dataclass

import httpx

from infusesecret.client import InfuseSecretClient
from infusesecret.errors import InfuseSecretError
from infusesecret.models.message import MessageRead
from infusesecret.themes import ThemeTemplate, template_for

logger = logging.getLogger(__name__)

CLICK_THRESHOLD = 3
PARTICLE_COUNT = 20

ScanNotifier = Callable[[str], None]


class RevealState(str, enum.Enum):
    LOCKED = "locked"
    UNLOCKING = "unlocking"
    UNLOCKED = "unlocked"


@dataclass(frozen=True, slots=True)
class FallingIcon:
    """One particle of the unlock celebration."""

    id: int
    emoji: str
    delay: float  # seconds, [0, 0.5)
    duration: float  # seconds, [2, 4)
    left: float  # percent of viewport width, [0, 100)


def build_celebration(
    template: ThemeTemplate, rng: random.Random, count: int = PARTICLE_COUNT
) -> list[FallingIcon]:
    return [
        FallingIcon(
            id=i,
            emoji=rng.choice(template.emojis),
            delay=rng.random() * 0.5,
            duration=2 + rng.random() * 2,
            left=rng.random() * 100,
        )
        for i in range(count)
    ]


class RevealSession:
    def __init__(
        self,
        message: MessageRead,
        notifier: ScanNotifier,
        rng: random.Random | None = None,
    ) -> None:
        self._message = message
        self._notifier = notifier
        self._rng = rng or random.Random()
        self._template = template_for(message.theme)
        self.state = RevealState.LOCKED
        self.click_count = 0
        self.celebration: list[FallingIcon] = []

    @property
    def template(self) -> ThemeTemplate:
        return self._template

    @property
    def is_unlocked(self) -> bool:
        return self.state is RevealState.UNLOCKED

    @property
    def remaining_clicks(self) -> int:
        return max(0, CLICK_THRESHOLD - self.click_count)

    @property
    def content(self) -> MessageRead | None:
        """The message, once unlocked; None while locked."""
        return self._message if self.is_unlocked else None

    def click(self) -> RevealState:
        if self.state is not RevealState.LOCKED:
            return self.state

        self.click_count += 1
        if self.click_count >= CLICK_THRESHOLD:
            self._unlock()
        return self.state

    def _unlock(self) -> None:
        self.state = RevealState.UNLOCKING
        try:
            self._notifier(self._message.id)
        except Exception:
            logger.warning(
                "Failed to report scan for message %s", self._message.id, exc_info=True
            )
        self.celebration = build_celebration(self._template, self._rng)
        self.state = RevealState.UNLOCKED


class HttpScanNotifier:
    """Reports scans through the API on a daemon thread, without retry.

    Failures are logged and dropped; the caller never waits on the network.
    """

    def __init__(self, client: InfuseSecretClient) -> None:
        self._client = client

    def __call__(self, message_id: str) -> None:
        threading.Thread(
            target=self.send,
            args=(message_id,),
            name=f"scan-{message_id}",
            daemon=True,
        ).start()

    def send(self, message_id: str) -> bool:
        try:
            self._client.record_scan(message_id)
        except (httpx.HTTPError, InfuseSecretError):
            logger.warning("Failed to update scan count for %s", message_id, exc_info=True)
            return False
        return True
