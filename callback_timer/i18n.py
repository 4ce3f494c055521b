from __future__ import annotations
from typing import Mapping, Tuple

# Each unit maps to its plural forms: (one, few, many). English only needs two.
UnitForms = Tuple[str, str, str]
Units = Mapping[str, UnitForms]

_catalogs: dict[str, Units] = {
    "en": {
        "day": ("day", "days", "days"),
        "hour": ("hour", "hours", "hours"),
        "minute": ("minute", "minutes", "minutes"),
        "second": ("second", "seconds", "seconds"),
    },
    "ru": {
        "day": ("день", "дня", "дней"),
        "hour": ("час", "часа", "часов"),
        "minute": ("минута", "минуты", "минут"),
        "second": ("секунда", "секунды", "секунд"),
    },
}


def _plural_index(amount: float, locale: str) -> int:
    if amount != int(amount):
        # Fractional amounts take the genitive singular in Russian ("2,5 секунды").
        return 1
    n = abs(int(amount))
    if locale == "ru":
        if n % 10 == 1 and n % 100 != 11:
            return 0
        if 2 <= n % 10 <= 4 and not 12 <= n % 100 <= 14:
            return 1
        return 2
    return 0 if n == 1 else 1


def t(unit: str, locale: str, amount: float = 1) -> str:
    forms = _catalogs.get(locale, {}).get(unit) or _catalogs["en"].get(unit)
    if forms is None:
        return unit
    return forms[_plural_index(amount, locale if locale in _catalogs else "en")]


def available_locales() -> tuple[str, ...]:
    return tuple(_catalogs)
