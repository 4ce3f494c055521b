from __future__ import annotations
import inspect
import logging
from functools import partial, wraps
from typing import Any, Awaitable, Callable, Optional

from .config import LOGGER_NAME, Callback, ConfigLike, WrapConfig, resolve
from .relative_time import format_number

logger = logging.getLogger(LOGGER_NAME)


def _build_message(config: WrapConfig, start: float, now: float) -> str:
    message: list[str] = []
    tag = config.tag_text
    if tag:
        message.append(f"[{tag}] ")
    message.append("Call ")
    if config.method_name:
        message.append(f"({config.method_name}) ")
    message.append("took ")
    if config.max_time_warning:
        message.append(f"longer than {format_number(config.max_time_warning / 1000)} seconds - ")
    if config.use_relative_time:
        message.append(config.formatter(start, now))
    else:
        message.append(f"{format_number(round(now - start, 3))} seconds")
    return "".join(message)


def _warn(target: Any, message: str) -> None:
    # Loggers from `logging` expose warning(); console-style objects may only have warn().
    emit = getattr(target, "warning", None) or target.warn
    emit(message)


def wrap(config_or_callback: ConfigLike | Callback, callback: Optional[Callback] = None) -> Callable[..., Any]:
    """Wrap ``callback`` so that finishing a call logs how long it took.

    Accepts ``wrap(callback)`` or ``wrap(config, callback)``, where ``config`` is a
    :class:`WrapConfig`, a mapping of its fields, or ``None``.

    Elapsed time is measured from the moment ``wrap`` is called, not from each
    invocation, so every call of the returned function reports time since wrapping.

    A coroutine function yields an async wrapper. A plain callable yields a plain
    wrapper, which returns an awaitable when the callback's result is awaitable so
    that logging happens once it settles. Wrappers return ``None``; exceptions from
    the callback propagate and skip logging.
    """
    config, cb = resolve(config_or_callback, callback)
    start = config.clock()
    target = partial(cb, config.context) if config.context is not None else cb
    logger.debug("wrapped %s (max_time_warning=%s)", getattr(cb, "__qualname__", cb), config.max_time_warning)

    def finish() -> None:
        now = config.clock()
        too_slow = (now - start) * 1000 > config.max_time_warning
        if not config.max_time_warning or too_slow:
            _warn(config.logger, _build_message(config, start, now))

    async def settle(result: Awaitable[Any]) -> None:
        await result
        finish()

    if inspect.iscoroutinefunction(cb):
        @wraps(cb)
        async def async_wrapper(*args: Any, **kwargs: Any) -> None:
            await target(*args, **kwargs)
            finish()
        return async_wrapper

    @wraps(cb)
    def wrapper(*args: Any, **kwargs: Any) -> Optional[Awaitable[None]]:
        result = target(*args, **kwargs)
        if inspect.isawaitable(result):
            return settle(result)
        finish()
        return None

    return wrapper


def timed(fn: Optional[Callback] = None, **fields: Any):
    """Decorator form of :func:`wrap`: ``@timed`` or ``@timed(max_time_warning=200)``.

    The clock starts when the function is decorated.
    """
    def deco(func: Callback) -> Callable[..., Any]:
        return wrap(WrapConfig.from_mapping(fields), func)
    if fn is not None:
        return deco(fn)
    return deco
