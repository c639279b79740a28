"""Daf Yomi Yerushalmi calculation.

The first cycle started on 15 Shevat 5740 (February 2, 1980). Each cycle
covers the 1554 dapim of the Yerushalmi at one daf a day, except that no
daf is learned on Yom Kippur or Tisha B'Av. Those days push the end of
the cycle out without advancing the reading.
"""

import logging
from datetime import date, timedelta

from .hebrew_calendar import AV, TISHREI, HebrewCalendar, PyluachCalendar
from .models import CyclePosition, DailyDaf, Daf
from .shas import EPOCH, MASECHTOS, WHOLE_SHAS_DAFS

logger = logging.getLogger(__name__)


class DateOutOfRangeError(ValueError):
    """Raised for dates before the first Daf Yomi Yerushalmi cycle."""

    def __init__(self, requested: date):
        self.requested = requested
        super().__init__(
            f"{requested} is prior to organized Daf Yomi Yerushalmi cycles "
            f"that started on {EPOCH}"
        )


def map_offset_to_page(offset: int) -> Daf:
    """Map a reading-day offset within a cycle to its daf."""
    if offset < 0:
        raise RuntimeError(f"Negative cycle offset {offset}")

    remainder = offset
    for masechta in MASECHTOS:
        if remainder < masechta.pages:
            return Daf(masechta_index=masechta.index, page=remainder + 1)
        remainder -= masechta.pages

    raise RuntimeError(
        f"Cycle offset {offset} is past the end of shas ({WHOLE_SHAS_DAFS} dapim)"
    )


class YerushalmiYomiCalculator:
    """Calculates the Daf Yomi Yerushalmi for a date."""

    def __init__(self, calendar: HebrewCalendar | None = None):
        self.calendar = calendar or PyluachCalendar()

    def count_special_days(self, start: date, end: date) -> int:
        """Count Yom Kippur and Tisha B'Av dates within [start, end].

        Both ends are inclusive. Tisha B'Av is counted on the day it is
        observed, matching the days ``find_cycle_origin`` reports as having
        no daf.
        """
        start_year = self.calendar.hebrew_year(start)
        end_year = self.calendar.hebrew_year(end)

        special_days = 0
        for year in range(start_year, end_year + 1):
            yom_kippur = self.calendar.to_civil(year, TISHREI, 10)
            tisha_beav = self.calendar.to_civil(year, AV, 9)
            # Nidche: the fast moves to Sunday when 9 Av is Shabbos
            if self.calendar.holy_day(tisha_beav) is None:
                tisha_beav += timedelta(days=1)

            if start <= yom_kippur <= end:
                special_days += 1
            if start <= tisha_beav <= end:
                special_days += 1

        return special_days

    def find_cycle_origin(self, for_date: date) -> CyclePosition | None:
        """Find the cycle containing ``for_date`` and the offset into it.

        Returns None when ``for_date`` has no daf.
        """
        holy_day = self.calendar.holy_day(for_date)
        if holy_day is not None:
            logger.debug(f"No daf on {for_date}: {holy_day.value}")
            return None

        if for_date < EPOCH:
            raise DateOutOfRangeError(for_date)

        cycle_number = 0
        next_cycle = EPOCH
        while True:
            prev_cycle = next_cycle
            cycle_number += 1
            next_cycle = prev_cycle + timedelta(days=WHOLE_SHAS_DAFS)
            # Must be counted after the nominal end is known
            next_cycle += timedelta(
                days=self.count_special_days(prev_cycle, next_cycle)
            )
            if next_cycle > for_date:
                break

        day_number = (for_date - prev_cycle).days
        offset = day_number - self.count_special_days(prev_cycle, for_date)

        logger.debug(
            f"{for_date}: cycle {cycle_number} started {prev_cycle}, "
            f"next starts {next_cycle}, offset {offset}"
        )
        return CyclePosition(
            cycle_number=cycle_number, cycle_start=prev_cycle, offset=offset
        )

    def get_daf(self, for_date: date) -> Daf | None:
        """Return the daf for ``for_date``, or None on Yom Kippur and Tisha B'Av.

        Raises DateOutOfRangeError for dates before February 2, 1980.
        """
        position = self.find_cycle_origin(for_date)
        if position is None:
            return None
        return map_offset_to_page(position.offset)

    def get_daily_daf(self, for_date: date | None = None) -> DailyDaf:
        """Return the day's daf along with the holy day on days without one."""
        if for_date is None:
            for_date = date.today()

        daf = self.get_daf(for_date)
        if daf is None:
            return DailyDaf(
                for_date=for_date,
                daf=None,
                holy_day=self.calendar.holy_day(for_date),
            )
        return DailyDaf(for_date=for_date, daf=daf)
