"""Command logic for Telegram bot.

This module provides the core text message logic used by both:
- bot.py (Application framework handlers)
- poll_commands.py (Stateless GitHub Actions polling)

Returns formatted text messages only.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from .calculator import DateOutOfRangeError, YerushalmiYomiCalculator
from .formatter import (
    format_bad_date_message,
    format_daily_message,
    format_error_message,
    format_info_message,
    format_out_of_range_message,
    format_welcome_message,
)

logger = logging.getLogger(__name__)


def parse_date_argument(text: str) -> date | None:
    """Parse the argument of /date (YYYY-MM-DD). Returns None if invalid."""
    parts = text.split()
    if len(parts) < 2:
        return None
    try:
        return datetime.strptime(parts[1], "%Y-%m-%d").date()
    except ValueError:
        return None


def get_start_messages(
    calculator: YerushalmiYomiCalculator, for_date: date | None = None
) -> list[str]:
    """Get text messages for /start command (welcome + daily content)."""
    return [format_welcome_message(), *get_today_messages(calculator, for_date)]


def get_today_messages(
    calculator: YerushalmiYomiCalculator, for_date: date | None = None
) -> list[str]:
    """Get text messages for /today command (just daily content, no welcome)."""
    if for_date is None:
        for_date = date.today()

    try:
        daily = calculator.get_daily_daf(for_date)
        return format_daily_message(daily)
    except DateOutOfRangeError as e:
        logger.info(f"Out of range request: {e}")
        return [format_out_of_range_message()]
    except Exception as e:
        logger.exception(f"Error calculating daf for {for_date}: {e}")
        return [format_error_message()]


def get_date_messages(calculator: YerushalmiYomiCalculator, text: str) -> list[str]:
    """Get text messages for /date YYYY-MM-DD."""
    for_date = parse_date_argument(text)
    if for_date is None:
        return [format_bad_date_message()]
    return get_today_messages(calculator, for_date)


def get_info_message() -> str:
    """Get message for /info command."""
    return format_info_message()


def get_error_message() -> str:
    """Get generic error message."""
    return format_error_message()
