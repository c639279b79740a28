"""Tests for command handlers."""

from datetime import date
from unittest.mock import MagicMock

from yerushalmi_yomi.calculator import DateOutOfRangeError
from yerushalmi_yomi.commands import (
    get_date_messages,
    get_error_message,
    get_info_message,
    get_start_messages,
    get_today_messages,
    parse_date_argument,
)
from yerushalmi_yomi.formatter import format_out_of_range_message
from yerushalmi_yomi.models import DailyDaf, Daf


def _calculator(daily: DailyDaf | None = None, error: Exception | None = None):
    calculator = MagicMock()
    if error is not None:
        calculator.get_daily_daf.side_effect = error
    else:
        calculator.get_daily_daf.return_value = daily
    return calculator


def test_get_start_messages(sample_daily):
    msgs = get_start_messages(_calculator(sample_daily), date(1980, 2, 2))
    assert len(msgs) == 2
    # First is welcome
    assert "ברוכים הבאים" in msgs[0]
    assert "ברכות" in msgs[1]


def test_get_today_messages(sample_daily):
    calculator = _calculator(sample_daily)
    msgs = get_today_messages(calculator, date(1980, 2, 2))
    assert len(msgs) == 1
    # No welcome message
    assert "ברוכים הבאים" not in msgs[0]
    calculator.get_daily_daf.assert_called_once_with(date(1980, 2, 2))


def test_get_today_messages_no_daf(sample_no_daf):
    msgs = get_today_messages(_calculator(sample_no_daf), date(1980, 9, 20))
    assert "אין דף יומי" in msgs[0]


def test_get_today_messages_out_of_range():
    error = DateOutOfRangeError(date(1970, 1, 1))
    msgs = get_today_messages(_calculator(error=error), date(1970, 1, 1))
    assert msgs == [format_out_of_range_message()]


def test_get_today_messages_failure():
    msgs = get_today_messages(_calculator(error=RuntimeError("boom")), date(2026, 1, 1))
    assert msgs == [get_error_message()]


def test_get_start_messages_failure():
    msgs = get_start_messages(_calculator(error=RuntimeError("boom")), date(2026, 1, 1))
    assert len(msgs) == 2
    assert "לא הצלחתי" in msgs[-1]


def test_parse_date_argument():
    assert parse_date_argument("/date 2026-02-16") == date(2026, 2, 16)
    assert parse_date_argument("/date") is None
    assert parse_date_argument("/date tomorrow") is None
    assert parse_date_argument("/date 2026-02-30") is None


def test_get_date_messages():
    daily = DailyDaf(for_date=date(2026, 2, 16), daf=Daf(12, 3))
    calculator = _calculator(daily)
    msgs = get_date_messages(calculator, "/date 2026-02-16")
    assert "עירובין" in msgs[0]
    calculator.get_daily_daf.assert_called_once_with(date(2026, 2, 16))


def test_get_date_messages_bad_date():
    calculator = _calculator()
    msgs = get_date_messages(calculator, "/date soon")
    assert "/date" in msgs[0]
    calculator.get_daily_daf.assert_not_called()


def test_get_date_messages_real_calculator(calculator):
    msgs = get_date_messages(calculator, "/date 1980-02-02")
    assert "ברכות" in msgs[0]
    assert "דף א׳" in msgs[0]


def test_get_info_message():
    assert "ירושלמי" in get_info_message()


def test_get_error_message():
    assert "לא הצלחתי" in get_error_message()
