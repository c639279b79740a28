"""Message formatting for Telegram."""

from collections.abc import Callable
from datetime import date

from .hebrew_calendar import PyluachCalendar, to_hebrew_numeral
from .models import DailyDaf, Daf
from .shas import EPOCH

_STATIC_MESSAGES: dict[str, str] = {}

_calendar = PyluachCalendar()


def _get_static_message(key: str, generator: Callable[[], str]) -> str:
    """Get a static message from cache or generate it."""
    if key not in _STATIC_MESSAGES:
        _STATIC_MESSAGES[key] = generator()
    return _STATIC_MESSAGES[key]


def sefaria_url(daf: Daf) -> str:
    """Link to the masechta on Sefaria."""
    return f"https://www.sefaria.org/{daf.masechta.ref_base}"


def format_date_header(for_date: date) -> str:
    """Civil and Hebrew date line."""
    hebrew = _calendar.hebrew_date_string(for_date)
    return f"{for_date.strftime('%d/%m/%Y')} | {hebrew}"


def format_daf_message(daf: Daf, for_date: date) -> str:
    """Format the day's daf."""
    masechta = daf.masechta
    title = (
        f'📖 <a href="{sefaria_url(daf)}"><b>מסכת {masechta.name_he} '
        f"דף {to_hebrew_numeral(daf.page)}</b></a>"
    )
    progress = f"דף {daf.page} מתוך {masechta.pages}"
    return (
        f"<b>📚 ירושלמי יומי</b> | {format_date_header(for_date)}\n\n"
        f"{title}\n"
        f"<i>{masechta.name} {daf.page}</i> · {progress}"
    )


def format_no_daf_message(daily: DailyDaf) -> str:
    """Format the message for Yom Kippur and Tisha B'Av."""
    holy_day = daily.holy_day.hebrew_name if daily.holy_day else ""
    return (
        f"<b>📚 ירושלמי יומי</b> | {format_date_header(daily.for_date)}\n\n"
        f"🕯 היום {holy_day} — אין דף יומי."
    )


def format_daily_message(daily: DailyDaf) -> list[str]:
    """Format daily message as list of messages."""
    if daily.daf is None:
        return [format_no_daf_message(daily)]
    return [format_daf_message(daily.daf, daily.for_date)]


def format_welcome_message() -> str:
    """Get welcome message."""

    def _generate() -> str:
        return """<b>📚 ירושלמי יומי</b>

ברוכים הבאים! כל יום הדף היומי בתלמוד ירושלמי.

✅ נרשמת אוטומטית לקבלת הדף היומי.
לביטול הרשמה: /unsubscribe"""

    return _get_static_message("welcome", _generate)


def format_info_message() -> str:
    """Get combined info message."""

    def _generate() -> str:
        return f"""<b>📚 ירושלמי יומי</b>

<b>דף יומי ירושלמי</b> הוא לימוד דף אחד ביום בתלמוד ירושלמי (דפוס וילנא). המחזור הראשון התחיל בט״ו בשבט תש״מ ({EPOCH.strftime('%d/%m/%Y')}). ביום כיפור ובתשעה באב אין דף.

<b>פקודות:</b>
/today - הדף של היום
/date YYYY-MM-DD - הדף לתאריך אחר
/subscribe - הרשמה לדף היומי
/unsubscribe - ביטול הרשמה
/info - מידע ועזרה

📚 <a href="https://www.sefaria.org/texts/Talmud/Yerushalmi">קרא בספריא</a>"""

    return _get_static_message("info", _generate)


def format_out_of_range_message() -> str:
    """Get message for dates before the first cycle."""

    def _generate() -> str:
        return (
            "התאריך שביקשת הוא לפני תחילת המחזור הראשון "
            f"({EPOCH.strftime('%d/%m/%Y')})."
        )

    return _get_static_message("out_of_range", _generate)


def format_bad_date_message() -> str:
    """Get message for an unparseable /date argument."""

    def _generate() -> str:
        return "לא הבנתי את התאריך. שלח למשל: /date 2026-02-16"

    return _get_static_message("bad_date", _generate)


def format_error_message() -> str:
    """Get error message."""

    def _generate() -> str:
        return "לא הצלחתי לחשב את הדף. נסה שוב בעוד כמה דקות."

    return _get_static_message("error", _generate)
