"""Error taxonomy for the message service.

Each error carries the HTTP status the API answers with. Handlers in
``infusesecret.main`` turn them into ``{"error": message}`` bodies.
"""

from __future__ import annotations


class InfuseSecretError(Exception):
    """Base class for errors raised by the service and store layers."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(InfuseSecretError):
    """Bad or missing input."""

    status_code = 400
    default_message = "Invalid request"


class AuthorizationError(InfuseSecretError):
    """Edit key does not match the stored one for the message."""

    status_code = 403
    default_message = "Invalid edit key"


class NotFoundError(InfuseSecretError):
    status_code = 404
    default_message = "Message not found"


class ConflictError(InfuseSecretError):
    """Identifier collision on insert. Retried by the service, never returned."""

    status_code = 409
    default_message = "Identifier already in use"


class InternalError(InfuseSecretError):
    """Storage or infrastructure failure."""

    status_code = 500
    default_message = "Internal server error"
