"""The masechtos of the Talmud Yerushalmi and the cycle constants."""

from datetime import date

from .models import Masechta

# First day of the first Daf Yomi Yerushalmi cycle: 15 Shevat 5740.
EPOCH = date(1980, 2, 2)

# Dapim in the whole Yerushalmi (Vilna edition).
WHOLE_SHAS_DAFS = 1554

# (English, Hebrew, Sefaria title, dapim), in cycle order.
_MASECHTOS_DATA: list[tuple[str, str, str, int]] = [
    # Zeraim
    ("Berachos", "ברכות", "Berakhot", 68),
    ("Pe'ah", "פאה", "Peah", 37),
    ("Demai", "דמאי", "Demai", 34),
    ("Kilayim", "כלאים", "Kilayim", 44),
    ("Shevi'is", "שביעית", "Sheviit", 31),
    ("Terumos", "תרומות", "Terumot", 59),
    ("Ma'asros", "מעשרות", "Maasrot", 26),
    ("Ma'aser Sheni", "מעשר שני", "Maaser_Sheni", 33),
    ("Chalah", "חלה", "Challah", 28),
    ("Orlah", "ערלה", "Orlah", 20),
    ("Bikurim", "ביכורים", "Bikkurim", 13),
    # Moed
    ("Shabbos", "שבת", "Shabbat", 92),
    ("Eruvin", "עירובין", "Eruvin", 65),
    ("Pesachim", "פסחים", "Pesachim", 71),
    ("Beitzah", "ביצה", "Beitzah", 22),
    ("Rosh Hashanah", "ראש השנה", "Rosh_Hashanah", 22),
    ("Yoma", "יומא", "Yoma", 42),
    ("Sukah", "סוכה", "Sukkah", 26),
    ("Ta'anis", "תענית", "Taanit", 26),
    ("Shekalim", "שקלים", "Shekalim", 33),
    ("Megilah", "מגילה", "Megillah", 34),
    ("Chagigah", "חגיגה", "Chagigah", 22),
    ("Moed Katan", "מועד קטן", "Moed_Katan", 19),
    # Nashim
    ("Yevamos", "יבמות", "Yevamot", 85),
    ("Kesuvos", "כתובות", "Ketubot", 72),
    ("Sotah", "סוטה", "Sotah", 47),
    ("Nedarim", "נדרים", "Nedarim", 40),
    ("Nazir", "נזיר", "Nazir", 47),
    ("Gitin", "גיטין", "Gittin", 54),
    ("Kidushin", "קידושין", "Kiddushin", 48),
    # Nezikin
    ("Bava Kama", "בבא קמא", "Bava_Kamma", 44),
    ("Bava Metzia", "בבא מציעא", "Bava_Metzia", 37),
    ("Bava Basra", "בבא בתרא", "Bava_Batra", 34),
    ("Shevuos", "שבועות", "Shevuot", 44),
    ("Makos", "מכות", "Makkot", 9),
    ("Sanhedrin", "סנהדרין", "Sanhedrin", 57),
    ("Avodah Zarah", "עבודה זרה", "Avodah_Zarah", 37),
    ("Horayos", "הוריות", "Horayot", 19),
    # Taharos
    ("Nidah", "נדה", "Niddah", 13),
]

MASECHTOS: tuple[Masechta, ...] = tuple(
    Masechta(
        index=i,
        name=name,
        name_he=name_he,
        ref_base=f"Jerusalem_Talmud_{sefaria}",
        pages=pages,
    )
    for i, (name, name_he, sefaria, pages) in enumerate(_MASECHTOS_DATA)
)


def _check_table() -> None:
    """Fail fast if the table does not cover exactly one cycle."""
    total = sum(m.pages for m in MASECHTOS)
    if total != WHOLE_SHAS_DAFS:
        raise RuntimeError(
            f"Masechta table has {total} dapim, expected {WHOLE_SHAS_DAFS}"
        )


_check_table()
