"""Date handling for the ``date``, ``mindate`` and ``maxdate`` rules.

``date`` rules carry a format written with single-letter tokens::

    Y  four-digit year          y  two-digit year (70-99 → 19xx, else 20xx)
    m  month, zero-padded       n  month, unpadded
    d  day, zero-padded         j  day, unpadded
    M  short month name (Jun)   F  full month name (June)
    D  short weekday (Tue)      l  full weekday (Tuesday)
    S  ordinal suffix (st/nd/rd/th)
    H  hour 00-23               G  hour 0-23
    h  hour 01-12               g  hour 1-12
    i  minutes                  s  seconds
    A  AM/PM                    a  am/pm

A backslash escapes the next character; any other character is literal.

A value matches a format when parsing it and formatting the result again
gives back the exact same string. That rejects impossible calendar dates
(``2020-02-30``) as well as width mismatches (``2020-1-1`` for ``Y-m-d``).
"""

import contextlib
import re
from collections.abc import Iterable
from datetime import UTC, datetime

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# token -> (regex group, component it sets)
_TOKENS: dict[str, tuple[str, str | None]] = {
    "Y": (r"[0-9]{4}", "year"),
    "y": (r"[0-9]{2}", "year2"),
    "m": (r"[0-9]{1,2}", "month"),
    "n": (r"[0-9]{1,2}", "month"),
    "d": (r"[0-9]{1,2}", "day"),
    "j": (r"[0-9]{1,2}", "day"),
    "M": (r"[A-Za-z]{3}", "month_abbr"),
    "F": (r"[A-Za-z]+", "month_name"),
    "D": (r"[A-Za-z]{3}", None),
    "l": (r"[A-Za-z]+", None),
    "S": (r"st|nd|rd|th", None),
    "H": (r"[0-9]{1,2}", "hour"),
    "G": (r"[0-9]{1,2}", "hour"),
    "h": (r"[0-9]{1,2}", "hour12"),
    "g": (r"[0-9]{1,2}", "hour12"),
    "i": (r"[0-9]{2}", "minute"),
    "s": (r"[0-9]{2}", "second"),
    "A": (r"AM|PM", "meridiem"),
    "a": (r"am|pm", "meridiem"),
}


def _tokenize(fmt: str) -> list[tuple[bool, str]]:
    """Split *fmt* into ``(is_token, text)`` pieces."""
    pieces: list[tuple[bool, str]] = []
    escaped = False
    for char in fmt:
        if escaped:
            pieces.append((False, char))
            escaped = False
        elif char == "\\":
            escaped = True
        else:
            pieces.append((char in _TOKENS, char))
    return pieces


def _ordinal_suffix(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def _format_token(token: str, moment: datetime) -> str:
    match token:
        case "Y":
            return f"{moment.year:04d}"
        case "y":
            return f"{moment.year % 100:02d}"
        case "m":
            return f"{moment.month:02d}"
        case "n":
            return str(moment.month)
        case "d":
            return f"{moment.day:02d}"
        case "j":
            return str(moment.day)
        case "M":
            return _MONTHS[moment.month - 1][:3]
        case "F":
            return _MONTHS[moment.month - 1]
        case "D":
            return _WEEKDAYS[moment.weekday()][:3]
        case "l":
            return _WEEKDAYS[moment.weekday()]
        case "S":
            return _ordinal_suffix(moment.day)
        case "H":
            return f"{moment.hour:02d}"
        case "G":
            return str(moment.hour)
        case "h":
            return f"{(moment.hour % 12) or 12:02d}"
        case "g":
            return str((moment.hour % 12) or 12)
        case "i":
            return f"{moment.minute:02d}"
        case "s":
            return f"{moment.second:02d}"
        case "A":
            return "PM" if moment.hour >= 12 else "AM"
        case "a":
            return "pm" if moment.hour >= 12 else "am"
    msg = f"Unsupported date token {token!r}"
    raise ValueError(msg)


def format_date(moment: datetime, fmt: str) -> str:
    """Render *moment* with a token format (see module docstring)."""
    return "".join(
        _format_token(text, moment) if is_token else text for is_token, text in _tokenize(fmt)
    )


def _month_from_name(name: str) -> int | None:
    lowered = name.lower()
    for index, month in enumerate(_MONTHS, start=1):
        if lowered in (month.lower(), month[:3].lower()):
            return index
    return None


def _expand_year(short: int) -> int:
    # 70-99 -> 19xx, 00-69 -> 20xx
    return 1900 + short if short >= 70 else 2000 + short


def parse_date(value: str, fmt: str) -> datetime | None:
    """Parse *value* with a token format, or return ``None``.

    Components missing from the format default to the current year and
    to the first month/day, midnight.
    """
    pattern_parts: list[str] = []
    groups: list[str | None] = []
    for is_token, text in _tokenize(fmt):
        if is_token:
            regex, component = _TOKENS[text]
            pattern_parts.append(f"({regex})")
            groups.append(component)
        else:
            pattern_parts.append(re.escape(text))

    match = re.fullmatch("".join(pattern_parts), value)
    if match is None:
        return None

    parts: dict[str, str] = {}
    for component, text in zip(groups, match.groups(), strict=True):
        if component is not None:
            parts[component] = text

    year = datetime.now().year
    if "year" in parts:
        year = int(parts["year"])
    elif "year2" in parts:
        year = _expand_year(int(parts["year2"]))

    month = 1
    if "month" in parts:
        month = int(parts["month"])
    elif "month_abbr" in parts or "month_name" in parts:
        found = _month_from_name(parts.get("month_abbr") or parts["month_name"])
        if found is None:
            return None
        month = found

    hour = int(parts.get("hour", 0))
    if "hour12" in parts:
        hour = int(parts["hour12"])
        if not 1 <= hour <= 12:
            return None
        hour %= 12
        if parts.get("meridiem", "").lower() == "pm":
            hour += 12

    try:
        return datetime(
            year,
            month,
            int(parts.get("day", 1)),
            hour,
            int(parts.get("minute", 0)),
            int(parts.get("second", 0)),
        )
    except ValueError:
        return None


def matches_format(value: str, fmt: str) -> bool:
    """True if *value* survives an exact parse → format round trip."""
    moment = parse_date(value, fmt)
    if moment is None:
        return False
    return format_date(moment, fmt) == value


def parse_any(value: str, formats: Iterable[str]) -> datetime | None:
    """Parse a free-form date string with the first ``strptime`` format that fits.

    Values carrying a UTC offset are converted to naive UTC. Two-digit
    years (``%y``) use the same 70 pivot as the ``y`` token.
    """
    text = value.strip()
    if any(char.isdigit() and not char.isascii() for char in text):
        return None
    with contextlib.suppress(ValueError):
        moment = datetime.fromisoformat(text)
        if moment.tzinfo is not None:
            moment = moment.astimezone(UTC).replace(tzinfo=None)
        return moment
    for fmt in formats:
        try:
            moment = datetime.strptime(text, fmt)
        except ValueError:
            continue
        if "%y" in fmt:
            moment = moment.replace(year=_expand_year(moment.year % 100))
        return moment
    return None
