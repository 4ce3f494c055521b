"""Exception hierarchy for callback_timer."""

from __future__ import annotations
from typing import Any, Dict, Optional


class CallbackTimerError(Exception):
    """Base exception for all callback_timer errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidCallbackError(CallbackTimerError, TypeError):
    """Raised when the value handed to wrap() is missing or not callable."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            "Callback not defined",
            details={"received_type": type(value).__name__},
        )
        self.value = value
