"""Pytest fixtures for Yerushalmi Yomi tests."""

from datetime import date, timedelta

import pytest

from yerushalmi_yomi.calculator import YerushalmiYomiCalculator
from yerushalmi_yomi.hebrew_calendar import AV, TISHREI
from yerushalmi_yomi.models import DailyDaf, Daf, HolyDay
from yerushalmi_yomi.shas import EPOCH


class FakeCalendar:
    """Calendar where the Hebrew year is the civil year.

    Holy days only exist where a test places them.
    """

    def __init__(self, holy_days: dict[date, HolyDay] | None = None):
        self.holy_days = holy_days or {}

    def hebrew_year(self, for_date: date) -> int:
        return for_date.year

    def to_civil(self, year: int, month: int, day: int) -> date:
        wanted = {(TISHREI, 10): HolyDay.YOM_KIPPUR, (AV, 9): HolyDay.TISHA_BEAV}
        for holy_date, holy_day in self.holy_days.items():
            if holy_date.year == year and wanted.get((month, day)) is holy_day:
                return holy_date
        # Somewhere no query range reaches
        return date.min

    def holy_day(self, for_date: date) -> HolyDay | None:
        return self.holy_days.get(for_date)


@pytest.fixture
def plain_calculator() -> YerushalmiYomiCalculator:
    """Calculator with no holy days at all."""
    return YerushalmiYomiCalculator(FakeCalendar())


@pytest.fixture
def yom_kippur_date() -> date:
    """A made-up Yom Kippur ten days into the first cycle."""
    return EPOCH + timedelta(days=10)


@pytest.fixture
def one_holy_day_calculator(yom_kippur_date: date) -> YerushalmiYomiCalculator:
    """Calculator with a single Yom Kippur in the first cycle."""
    return YerushalmiYomiCalculator(
        FakeCalendar({yom_kippur_date: HolyDay.YOM_KIPPUR})
    )


@pytest.fixture
def calculator() -> YerushalmiYomiCalculator:
    """Calculator backed by the real Hebrew calendar."""
    return YerushalmiYomiCalculator()


@pytest.fixture
def sample_daily() -> DailyDaf:
    """The first daf of the first cycle."""
    return DailyDaf(for_date=EPOCH, daf=Daf(masechta_index=0, page=1))


@pytest.fixture
def sample_no_daf() -> DailyDaf:
    """Yom Kippur 5741."""
    return DailyDaf(
        for_date=date(1980, 9, 20), daf=None, holy_day=HolyDay.YOM_KIPPUR
    )
