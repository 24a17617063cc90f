"""Domain exceptions for the Jeopardy board editor.

Expected failure modes map to one of these classes. Stream failures are left
as the builtin ``OSError``.
"""

from __future__ import annotations


class JeopardyError(Exception):
    """Base exception for all board editor failures."""


class ValidationError(JeopardyError, ValueError):
    """Raised when a caller supplies invalid input."""


class NoBoardError(JeopardyError):
    """Raised when an operation needs an open board and there is none."""


class PersistenceError(JeopardyError):
    """Base class for board save/load failures."""


class BoardSerializationError(PersistenceError):
    """Raised when a board cannot be encoded for saving."""


class BoardDeserializationError(PersistenceError):
    """Raised when persisted data is malformed or does not match the schema."""


class ObserverError(JeopardyError):
    """Raised after a notification pass in which observers failed."""

    def __init__(self, message: str, failures: list[BaseException] | None = None) -> None:
        super().__init__(message)
        self.failures: list[BaseException] = list(failures or [])


class NotificationLoopError(ObserverError):
    """Raised when observers keep re-queuing notifications without settling."""


class ConfigurationError(JeopardyError):
    """Raised when the environment file or a configured value is unusable."""
