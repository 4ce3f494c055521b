from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from .config import WrapConfig
from .i18n import available_locales
from .relative_time import for_locale


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_file: Optional[Path]
    locale: str
    max_time_warning: float

    @staticmethod
    def load() -> "Settings":
        # Values already in the environment win over .env
        if os.path.exists(".env"):
            load_dotenv(".env")

        log_level = os.getenv("CALLBACK_TIMER_LOG_LEVEL", "WARNING").strip().upper()
        log_file_raw = os.getenv("CALLBACK_TIMER_LOG_FILE", "").strip()
        log_file = Path(log_file_raw).resolve() if log_file_raw else None
        locale = os.getenv("CALLBACK_TIMER_LOCALE", "en").strip().lower()
        if locale not in available_locales():
            raise RuntimeError(f"CALLBACK_TIMER_LOCALE must be one of {available_locales()}, got {locale!r}")

        raw_threshold = os.getenv("CALLBACK_TIMER_MAX_TIME_WARNING", "0").strip() or "0"
        try:
            max_time_warning = float(raw_threshold)
        except ValueError:
            raise RuntimeError(f"CALLBACK_TIMER_MAX_TIME_WARNING must be a number, got {raw_threshold!r}") from None
        if max_time_warning < 0:
            raise RuntimeError("CALLBACK_TIMER_MAX_TIME_WARNING must be non-negative")

        return Settings(
            log_level=log_level,
            log_file=log_file,
            locale=locale,
            max_time_warning=max_time_warning,
        )

    def wrap_config(self, **overrides: Any) -> WrapConfig:
        fields: dict[str, Any] = {
            "max_time_warning": self.max_time_warning,
            "formatter": for_locale(self.locale),
        }
        fields.update(overrides)
        return WrapConfig.from_mapping(fields)
