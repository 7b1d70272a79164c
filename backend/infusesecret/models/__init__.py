from __future__ import annotations

from infusesecret.models.message import Message  # noqa: F401
