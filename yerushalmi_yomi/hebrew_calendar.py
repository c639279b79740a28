"""Hebrew calendar lookups used by the daf calculator.

The calculator only needs a handful of capabilities from a Hebrew
calendar, described by ``HebrewCalendar``. ``PyluachCalendar`` provides
them on top of pyluach; tests can pass any object with the same methods.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

from pyluach import dates

from .models import HolyDay

# pyluach month numbers (1 = Nisan ... 7 = Tishrei)
AV = 5
TISHREI = 7

SHABBOS = 7  # pyluach weekday(): 1 = Sunday ... 7 = Shabbos
SUNDAY = 1


class HebrewCalendar(Protocol):
    """Hebrew calendar capabilities needed by the calculator."""

    def hebrew_year(self, for_date: date) -> int: ...

    def to_civil(self, year: int, month: int, day: int) -> date: ...

    def holy_day(self, for_date: date) -> HolyDay | None: ...


class PyluachCalendar:
    """Hebrew calendar backed by pyluach."""

    def hebrew_year(self, for_date: date) -> int:
        return dates.HebrewDate.from_pydate(for_date).year

    def to_civil(self, year: int, month: int, day: int) -> date:
        return dates.HebrewDate(year, month, day).to_pydate()

    def holy_day(self, for_date: date) -> HolyDay | None:
        """Return Yom Kippur or Tisha B'Av if ``for_date`` is one of them.

        Tisha B'Av is the observed fast, pushed to Sunday 10 Av when
        9 Av falls on Shabbos.
        """
        hd = dates.HebrewDate.from_pydate(for_date)
        if hd.month == TISHREI and hd.day == 10:
            return HolyDay.YOM_KIPPUR
        if hd.month == AV:
            if hd.day == 9 and hd.weekday() != SHABBOS:
                return HolyDay.TISHA_BEAV
            if hd.day == 10 and hd.weekday() == SUNDAY:
                return HolyDay.TISHA_BEAV
        return None

    def hebrew_date_string(self, for_date: date) -> str:
        """Hebrew date for display, e.g. ט״ו שבט תש״מ."""
        return dates.HebrewDate.from_pydate(for_date).hebrew_date_string()


def to_hebrew_numeral(n: int) -> str:
    """Convert an integer (1–999) to Hebrew numerals with geresh/gershayim."""
    hundreds = ["", "ק", "ר", "ש", "ת", "תק", "תר", "תש", "תת", "תתק"]
    tens = ["", "י", "כ", "ל", "מ", "נ", "ס", "ע", "פ", "צ"]
    ones = ["", "א", "ב", "ג", "ד", "ה", "ו", "ז", "ח", "ט"]

    if not 0 < n < 1000:
        raise ValueError(f"Cannot render {n} in Hebrew numerals")

    h = n // 100
    t = (n % 100) // 10
    u = n % 10

    # 15 and 16 are written ט״ו / ט״ז to avoid spelling a divine name
    if t == 1 and u in (5, 6):
        letters = hundreds[h] + "ט" + ones[u + 1]
    else:
        letters = hundreds[h] + tens[t] + ones[u]

    if len(letters) == 1:
        return letters + "׳"
    return letters[:-1] + "״" + letters[-1]
