"""Custom exception hierarchy for pypavlok."""

from __future__ import annotations

from pypavlok._constants import OUT_OF_BOUNDS_MESSAGE, UNKNOWN_ERROR_MESSAGE


class PavlokError(Exception):
    """Base exception for all pypavlok errors."""


class PavlokConfigError(PavlokError):
    """Invalid or missing configuration."""


class PavlokOutOfBoundsError(PavlokError, ValueError):
    """Intensity outside the range accepted for the command.

    Raised before any request is sent.
    """

    def __init__(self, *, command: str = "", intensity: int | None = None) -> None:
        self.command = command
        self.intensity = intensity
        super().__init__(OUT_OF_BOUNDS_MESSAGE)


class PavlokTransportError(PavlokError):
    """HTTP-level failure (network error, unreadable or unexpected body).

    The underlying exception, when there is one, is kept in ``cause`` and
    the error renders as that exception's message.
    """

    def __init__(
        self,
        cause: BaseException | None = None,
        *,
        status_code: int | None = None,
        url: str = "",
    ) -> None:
        self.cause = cause
        self.status_code = status_code
        self.url = url
        message = str(cause) if cause is not None else ""
        super().__init__(message or UNKNOWN_ERROR_MESSAGE)
