"""Yerushalmi Yomi - the daily daf of the Talmud Yerushalmi."""

from .calculator import DateOutOfRangeError, YerushalmiYomiCalculator, map_offset_to_page
from .models import CyclePosition, DailyDaf, Daf, HolyDay, Masechta

__all__ = [
    "CyclePosition",
    "DailyDaf",
    "Daf",
    "DateOutOfRangeError",
    "HolyDay",
    "Masechta",
    "YerushalmiYomiCalculator",
    "map_offset_to_page",
]
