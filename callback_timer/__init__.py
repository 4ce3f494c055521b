from .config import LOGGER_NAME, WrapConfig
from .errors import CallbackTimerError, InvalidCallbackError
from .logs import configure_logging
from .settings import Settings
from .timer import timed, wrap

__all__ = [
    "LOGGER_NAME",
    "CallbackTimerError",
    "InvalidCallbackError",
    "Settings",
    "WrapConfig",
    "configure_logging",
    "timed",
    "wrap",
]
