"""
Tolerant parsing of the number and date cells typed by hand into the sheet.

Both parsers are best effort: they never raise. Numbers fall back to 0 and
dates fall back to None, which callers treat as "no date".
"""
import re
from datetime import datetime
from typing import Any, Optional

from dateutil import parser as dateparser

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_DATE_SEPARATORS = re.compile(r"[/\-\s:]+")
_LEADING_INT = re.compile(r"^[+-]?\d+")

# two unrelated fill-in dates; a part that differs between them was not in the cell
_FILL_A = datetime(2001, 1, 1)
_FILL_B = datetime(2002, 2, 2)


def parse_number(value: Any) -> float:
    """Parse amounts like "1,23,456.78", "₹ 50,000" or "50,000-" into a float"""
    if not value:
        return 0.0
    cleaned = _NON_NUMERIC.sub("", str(value))
    try:
        return float(cleaned)
    except ValueError:
        return 0.0


def _to_int(part: str) -> Optional[int]:
    match = _LEADING_INT.match(part.strip())
    return int(match.group()) if match else None


def _direct_parse(text: str) -> Optional[datetime]:
    if not any(ch.isdigit() for ch in text):
        return None
    try:
        parsed = dateparser.parse(text, default=_FILL_A)
        check = dateparser.parse(text, default=_FILL_B)
    except (ValueError, OverflowError):
        return None
    if (parsed.year, parsed.month, parsed.day) != (check.year, check.month, check.day):
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def parse_date(value: Any) -> Optional[datetime]:
    """Parse "Booking Date", "Date of Agreement" and similar cells.

    Tries a generic date-time parse first, then falls back to splitting on
    ``/``, ``-``, whitespace or ``:`` and guessing the component order:

    * ``YYYY-MM-DD`` when the first part is a four digit year
    * ``DD/MM/YYYY`` when the first part is greater than 12
    * ``MM/DD/YYYY`` otherwise

    The day/month guess is a convention, not a certainty, for days <= 12.
    """
    if not value:
        return None

    clean = str(value).strip()
    if not clean:
        return None

    direct = _direct_parse(clean)
    if direct is not None:
        return direct

    parts = _DATE_SEPARATORS.split(clean)
    if len(parts) < 3:
        return None

    a, b, c = (p.strip() for p in parts[:3])
    first, second, third = _to_int(a), _to_int(b), _to_int(c)

    if len(a) == 4 and a.isdigit() and int(a) > 1900:
        year, month, day = first, second, third
    elif len(c) == 4 and c.isdigit() and 1900 < int(c) < 3000:
        if first is not None and first > 12:
            day, month = first, second
        else:
            month, day = first, second
        year = third
    else:
        if first is not None and first > 12:
            day, month = first, second
        else:
            month, day = first, second
        year = third

    if not day or not month or not year or year < 1000:
        return None

    iso = f"{year:04d}-{month:02d}-{day:02d}T00:00:00"
    try:
        return datetime.fromisoformat(iso)
    except ValueError:
        return None
