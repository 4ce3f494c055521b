from __future__ import annotations
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Protocol, Sequence, Tuple, Union

from .errors import InvalidCallbackError
from .relative_time import calc

LOGGER_NAME = "callback_timer"

Callback = Callable[..., Any]
Formatter = Callable[[float, float], str]

# Keys accepted by WrapConfig.from_mapping besides the field names themselves.
_ALIASES = {
    "maxTimeWarning": "max_time_warning",
    "useRelativeTime": "use_relative_time",
    "methodName": "method_name",
}


class WarningLogger(Protocol):
    def warning(self, msg: str) -> Any: ...


@dataclass(frozen=True)
class WrapConfig:
    context: Any = None
    logger: WarningLogger = field(default_factory=lambda: logging.getLogger(LOGGER_NAME))
    max_time_warning: float = 0
    use_relative_time: bool = True
    tag: Union[str, Sequence[str], None] = ""
    method_name: Optional[str] = None
    formatter: Formatter = calc
    clock: Callable[[], float] = time.monotonic

    def __post_init__(self) -> None:
        if self.max_time_warning is None:
            object.__setattr__(self, "max_time_warning", 0)
        if self.max_time_warning < 0:
            raise ValueError("max_time_warning must be non-negative")
        object.__setattr__(self, "use_relative_time", bool(self.use_relative_time))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "WrapConfig":
        fields: dict[str, Any] = {}
        for key, value in mapping.items():
            name = _ALIASES.get(key, key)
            if name in fields:
                raise TypeError(f"Duplicate config key for {name!r}: {key!r}")
            fields[name] = value
        return cls(**fields)

    @property
    def tag_text(self) -> str:
        if not self.tag:
            return ""
        if isinstance(self.tag, str):
            return self.tag
        return " ".join(self.tag)


ConfigLike = Union[WrapConfig, Mapping[str, Any], None]


def _coerce(config: Any) -> WrapConfig:
    if isinstance(config, WrapConfig):
        return config
    if config is None or callable(config):
        return WrapConfig()
    if isinstance(config, Mapping):
        return WrapConfig.from_mapping(config)
    raise TypeError(f"Unsupported config type: {type(config).__name__}")


def resolve(config_or_callback: Any, callback: Optional[Callback] = None) -> Tuple[WrapConfig, Callback]:
    """Normalize both call shapes of wrap() into a (config, callback) pair."""
    if callable(callback):
        return _coerce(config_or_callback), callback
    if not callable(config_or_callback):
        raise InvalidCallbackError(config_or_callback)
    return WrapConfig(), config_or_callback
