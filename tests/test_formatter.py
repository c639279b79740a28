"""Tests for message formatting."""

from yerushalmi_yomi.formatter import (
    format_bad_date_message,
    format_daf_message,
    format_daily_message,
    format_error_message,
    format_info_message,
    format_no_daf_message,
    format_out_of_range_message,
    format_welcome_message,
    sefaria_url,
)
from yerushalmi_yomi.models import Daf
from yerushalmi_yomi.shas import EPOCH


def test_sefaria_url():
    assert sefaria_url(Daf(0, 1)) == "https://www.sefaria.org/Jerusalem_Talmud_Berakhot"


def test_format_daf_message():
    msg = format_daf_message(Daf(0, 1), EPOCH)
    assert "ירושלמי יומי" in msg
    assert "02/02/1980" in msg
    assert "ברכות" in msg
    assert "דף א׳" in msg
    assert "Berachos 1" in msg
    assert "דף 1 מתוך 68" in msg
    assert "sefaria.org" in msg


def test_format_daily_message(sample_daily):
    msgs = format_daily_message(sample_daily)
    assert len(msgs) == 1
    assert "ברכות" in msgs[0]


def test_format_no_daf_message(sample_no_daf):
    msg = format_no_daf_message(sample_no_daf)
    assert "20/09/1980" in msg
    assert "יום כיפור" in msg
    assert "אין דף יומי" in msg


def test_format_daily_message_no_daf(sample_no_daf):
    msgs = format_daily_message(sample_no_daf)
    assert len(msgs) == 1
    assert "אין דף יומי" in msgs[0]


def test_format_welcome_message():
    msg = format_welcome_message()
    assert "ירושלמי יומי" in msg
    assert "/unsubscribe" in msg


def test_format_info_message():
    msg = format_info_message()
    assert "ירושלמי" in msg
    assert "/today" in msg
    assert "/date" in msg
    assert "/subscribe" in msg
    assert "02/02/1980" in msg
    assert "sefaria.org" in msg


def test_format_out_of_range_message():
    assert "02/02/1980" in format_out_of_range_message()


def test_format_bad_date_message():
    assert "/date" in format_bad_date_message()


def test_format_error_message():
    msg = format_error_message()
    assert "לא הצלחתי" in msg


def test_message_length(sample_daily, sample_no_daf):
    for daily in (sample_daily, sample_no_daf):
        for msg in format_daily_message(daily):
            assert len(msg) <= 4096
