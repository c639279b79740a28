"""Data models for Yerushalmi Yomi."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class HolyDay(Enum):
    """Holy days on which no daf is learned."""

    YOM_KIPPUR = "Yom Kippur"
    TISHA_BEAV = "Tisha B'Av"

    @property
    def hebrew_name(self) -> str:
        return "יום כיפור" if self is HolyDay.YOM_KIPPUR else "תשעה באב"


@dataclass(frozen=True)
class Masechta:
    """A masechta (tractate) of the Talmud Yerushalmi."""

    index: int  # Position in the cycle, 0 = Berachos
    name: str  # Transliterated name: Berachos, Pe'ah, etc.
    name_he: str  # Hebrew name
    ref_base: str  # Sefaria reference base (e.g. Jerusalem_Talmud_Berakhot)
    pages: int  # Number of dapim in the Vilna edition


@dataclass(frozen=True)
class Daf:
    """A single daf (page reference) of the Yerushalmi."""

    masechta_index: int
    page: int

    def __post_init__(self) -> None:
        """Validate the page number."""
        if self.page < 1:
            raise ValueError(f"Daf page must be positive, got {self.page}")

    @property
    def masechta(self) -> Masechta:
        """The masechta this daf belongs to."""
        from .shas import MASECHTOS

        return MASECHTOS[self.masechta_index]

    @property
    def reference(self) -> str:
        """English reference for display and logs."""
        return f"{self.masechta.name} {self.page}"

    @property
    def hebrew_reference(self) -> str:
        """Hebrew reference for display."""
        from .hebrew_calendar import to_hebrew_numeral

        return f"ירושלמי {self.masechta.name_he} דף {to_hebrew_numeral(self.page)}"


@dataclass(frozen=True)
class CyclePosition:
    """Where a date falls within the Daf Yomi Yerushalmi cycles."""

    cycle_number: int  # 1-based
    cycle_start: date
    offset: int  # Reading days since cycle_start, excluded days removed


@dataclass(frozen=True)
class DailyDaf:
    """The daf assigned to a date, or the holy day that replaces it."""

    for_date: date
    daf: Daf | None
    holy_day: HolyDay | None = None

    def __post_init__(self) -> None:
        """A day has either a daf or a holy day, never both."""
        if (self.daf is None) == (self.holy_day is None):
            raise ValueError("Daily daf must have exactly one of daf or holy_day")

    @property
    def has_daf(self) -> bool:
        return self.daf is not None
