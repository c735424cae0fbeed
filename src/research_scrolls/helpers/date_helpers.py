"""Date normalization helpers for upstream publication dates."""

import re
from datetime import date

_MONTHS: dict[str, str] = {
    "jan": "01",
    "feb": "02",
    "mar": "03",
    "apr": "04",
    "may": "05",
    "jun": "06",
    "jul": "07",
    "aug": "08",
    "sep": "09",
    "oct": "10",
    "nov": "11",
    "dec": "12",
}

# "2023", "2023 Jun", "2023 Jun 5" (PubMed esummary pubdate)
_PUBDATE_RE = re.compile(r"(\d{4})(?: ([A-Za-z]{3}))?(?: (\d{1,2}))?")


def get_month_number(month_abbr: str) -> str:
    """Map a three-letter month abbreviation to "01".."12"; unknown input gives "01"."""
    return _MONTHS.get(month_abbr.strip().lower(), "01")


def today_iso() -> str:
    return date.today().isoformat()


def normalize_pubdate(raw: str) -> str:
    """Convert a "YYYY[ Mon[ D]]" date to YYYY-MM-DD.

    Returns `raw` unchanged when it does not start with a year.
    """
    match = _PUBDATE_RE.match(raw.strip())
    if not match:
        return raw
    year, month, day = match.groups()
    month_number = get_month_number(month) if month else "01"
    return f"{year}-{month_number}-{(day or '1').zfill(2)}"


def build_iso_date(year: str | None, month: str | None, day: str | None) -> str:
    """Assemble YYYY-MM-DD from separate parts; month may be numeric or "Jan" style.

    Returns "" without a year.
    """
    if not year:
        return ""
    if not month:
        month_number = "01"
    elif month.isdigit():
        month_number = month.zfill(2)
    else:
        month_number = get_month_number(month[:3])
    day_part = day.zfill(2) if day and day.isdigit() else "01"
    return f"{year}-{month_number}-{day_part}"
