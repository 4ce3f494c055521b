import pytest

from callback_timer.i18n import available_locales, t
from callback_timer.relative_time import calc, for_locale, format_number


@pytest.mark.parametrize(
    "elapsed, expected",
    [
        (0, "0 seconds"),
        (1, "1 second"),
        (5, "5 seconds"),
        (0.123, "0.12 seconds"),
        (62.5, "1 minute, 2.5 seconds"),
        (3780, "1 hour, 3 minutes"),
        (90061, "1 day, 1 hour, 1 minute, 1 second"),
        (2 * 86400, "2 days"),
        (59.999, "1 minute"),
        (3599.996, "1 hour"),
        (119.999, "2 minutes"),
    ],
)
def test_calc_english(elapsed, expected):
    assert calc(1000.0, 1000.0 + elapsed) == expected


def test_calc_clamps_negative_durations():
    assert calc(10.0, 5.0) == "0 seconds"


@pytest.mark.parametrize(
    "elapsed, expected",
    [
        (1, "1 секунда"),
        (2, "2 секунды"),
        (5, "5 секунд"),
        (11 * 60, "11 минут"),
        (21 * 60, "21 минута"),
        (3 * 3600, "3 часа"),
        (1.5, "1.5 секунды"),
    ],
)
def test_calc_russian(elapsed, expected):
    assert calc(0.0, elapsed, "ru") == expected


def test_unknown_locale_falls_back_to_english():
    assert calc(0.0, 2.0, "de") == "2 seconds"
    assert t("minute", "de", 1) == "minute"


def test_unknown_unit_is_returned_as_is():
    assert t("fortnight", "en", 2) == "fortnight"


def test_available_locales():
    assert set(available_locales()) == {"en", "ru"}


def test_for_locale_binds_locale():
    assert for_locale("ru")(0.0, 5.0) == "5 секунд"


@pytest.mark.parametrize(
    "value, expected",
    [(2.0, "2"), (0, "0"), (0.05, "0.05"), (1.25, "1.25"), (300, "300")],
)
def test_format_number(value, expected):
    assert format_number(value) == expected
