from __future__ import annotations

import datetime
import logging
import re
from email.utils import parsedate_to_datetime
from functools import lru_cache
from typing import Optional

from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)

_UTC = datetime.timezone.utc

_RE_WHITESPACE = re.compile(r"\s+")
_RE_FEB29 = re.compile(r"(\d{4})-02-29")
_RE_HOUR24 = re.compile(r"(\d{4}-\d{2}-\d{2})[T ]24:(\d{2}):(\d{2})")
_RE_ISO_TZ_NO_COLON = re.compile(r"([+-]\d{2})(\d{2})$")
_RE_ISO_TZ_HOUR_ONLY = re.compile(r"([+-]\d{2})$")
_RE_ISO_FRACTION = re.compile(r"\.(\d{7,})(?=(?:[+-]\d{2}:?\d{2}|Z|$))", re.IGNORECASE)
_RE_RFC822 = re.compile(
    r"(?:\w{3},\s+)?(\d{1,2})\s+(\w{3})\s+(\d{4})\s+(\d{2}):(\d{2}):(\d{2})\s+([+-]\d{4}|[A-Z]{2,5})"
)
_MONTHS_RFC822: dict[str, int] = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

# Offsets in seconds for zone names that show up in pubDate values.
_custom_tzinfos: dict[str, int] = {
    "UTC": 0,
    "UT": 0,
    "GMT": 0,
    "Z": 0,
    "WET": 0,
    "WEST": 3600,
    "BST": 3600,
    "CET": 3600,
    "CEST": 7200,
    "EET": 7200,
    "EEST": 10800,
    "MSK": 10800,
    "IST": 19800,
    "PST": -28800,
    "PDT": -25200,
    "MST": -25200,
    "MDT": -21600,
    "CST": -21600,
    "CDT": -18000,
    "EST": -18000,
    "EDT": -14400,
    "AKST": -32400,
    "AKDT": -28800,
    "HST": -36000,
    "AEST": 36000,
    "AEDT": 39600,
    "ACST": 34200,
    "ACDT": 37800,
    "AWST": 28800,
    "NZST": 43200,
    "NZDT": 46800,
    "JST": 32400,
    "KST": 32400,
    "SGT": 28800,
}


def _ensure_utc(dt: datetime.datetime) -> Optional[datetime.datetime]:
    """Return a timezone-aware datetime normalized to UTC."""
    try:
        return dt.replace(tzinfo=_UTC) if dt.tzinfo is None else dt.astimezone(_UTC)
    except (ValueError, OverflowError):
        return None


def _parse_rfc822(value: str) -> Optional[datetime.datetime]:
    """RFC-822 dates via a regex, bypassing the slower generic parsers."""
    m = _RE_RFC822.match(value)
    if not m:
        return None
    day, mon_str, year, hour, minute, second, tz = m.groups()
    month = _MONTHS_RFC822.get(mon_str.lower())
    if month is None:
        return None
    if tz[0] in "+-":
        offset = (int(tz[1:3]) * 3600 + int(tz[3:5]) * 60) * (1 if tz[0] == "+" else -1)
    else:
        offset = _custom_tzinfos.get(tz)
        if offset is None:
            return None
    if not (-86400 < offset < 86400):
        return None
    try:
        base = datetime.datetime(int(year), month, int(day))
    except ValueError:
        return None
    # Hour 24 rolls over to midnight of the next day.
    dt = base + datetime.timedelta(
        hours=int(hour), minutes=int(minute), seconds=int(second)
    )
    dt = dt.replace(tzinfo=datetime.timezone(datetime.timedelta(seconds=offset)))
    return _ensure_utc(dt)


def _parse_rfc2822(value: str) -> Optional[datetime.datetime]:
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return None
    if parsed is None:
        return None
    return _ensure_utc(parsed)


def _normalize_iso_datetime_string(value: str) -> str:
    """Coerce flexible ISO-8601 inputs into a form datetime.fromisoformat can parse."""
    cleaned = value.strip()

    upper_cleaned = cleaned.upper()
    for suffix in (" UTC", " GMT", " Z"):
        if upper_cleaned.endswith(suffix):
            cleaned = cleaned[: -len(suffix)].rstrip() + "+00:00"
            break

    if cleaned.endswith(("Z", "z")):
        cleaned = cleaned[:-1] + "+00:00"

    if (
        " " in cleaned
        and "T" not in cleaned[:11]
        and len(cleaned) >= 10
        and cleaned[4] == "-"
    ):
        date_part, rest = cleaned.split(" ", 1)
        if rest and rest[0].isdigit():
            cleaned = f"{date_part}T{rest}"

    match = _RE_ISO_TZ_NO_COLON.search(cleaned)
    if match and "T" in cleaned:
        cleaned = cleaned[:-5] + f"{match.group(1)}:{match.group(2)}"
    else:
        match = _RE_ISO_TZ_HOUR_ONLY.search(cleaned)
        if match and "T" in cleaned:
            cleaned = cleaned[:-3] + f"{match.group(1)}:00"

    cleaned = _RE_ISO_FRACTION.sub(lambda m: "." + m.group(1)[:6], cleaned, count=1)
    return cleaned


def _repair_iso(candidate: str) -> str:
    # Feb 29 in a non-leap year
    if "-02-29" in candidate:
        year_match = _RE_FEB29.match(candidate)
        if year_match:
            year = int(year_match.group(1))
            if not ((year % 4 == 0 and year % 100 != 0) or (year % 400 == 0)):
                candidate = candidate.replace(f"{year}-02-29", f"{year}-02-28")

    if "T24:" in candidate or " 24:" in candidate:
        m24 = _RE_HOUR24.search(candidate)
        if m24:
            try:
                base = datetime.date.fromisoformat(m24.group(1))
            except ValueError:
                return candidate
            next_day = base + datetime.timedelta(days=1)
            candidate = (
                candidate[: m24.start()]
                + f"{next_day}T00:{m24.group(2)}:{m24.group(3)}"
                + candidate[m24.end() :]
            )
    return candidate


def _parse_iso8601(value: str) -> Optional[datetime.datetime]:
    if not (len(value) >= 10 and value[4] == "-" and value[0:4].isdigit()):
        return None
    try:
        dt = datetime.datetime.fromisoformat(
            _normalize_iso_datetime_string(_repair_iso(value))
        )
    except ValueError:
        return None
    return _ensure_utc(dt)


def _tzinfos(name: str, offset: Optional[int]) -> Optional[datetime.tzinfo]:
    seconds = _custom_tzinfos.get(name) if offset is None else offset
    if seconds is None:
        return None
    return datetime.timezone(datetime.timedelta(seconds=seconds))


# dateutil fills missing date parts from ``default``; parsing against two
# different defaults exposes values that do not name a full calendar date.
_DATEUTIL_DEFAULTS = (datetime.datetime(2000, 1, 1), datetime.datetime(2001, 2, 2))


def _parse_dateutil(value: str) -> Optional[datetime.datetime]:
    try:
        first, second = (
            dateutil_parser.parse(
                value, default=default, tzinfos=_tzinfos, ignoretz=False
            )
            for default in _DATEUTIL_DEFAULTS
        )
    except (ValueError, TypeError, OverflowError):
        return None
    if first != second:
        return None
    return _ensure_utc(first)


@lru_cache(maxsize=8192)
def parse_date(date_str: Optional[str]) -> Optional[datetime.datetime]:
    """Parse a feed date into a UTC datetime.

    RFC-2822 (RSS ``pubDate``) is tried first, then ISO-8601 (Atom
    ``updated``, RDF ``dc:date``), then dateutil's generic parser.

    Args:
        date_str: Date string in any common format

    Returns:
        Timezone-aware UTC datetime, or None when parsing fails
    """
    if not date_str:
        return None

    candidate = date_str.strip()
    if not candidate:
        return None
    candidate = _RE_WHITESPACE.sub(" ", candidate)

    for strategy in (_parse_rfc822, _parse_rfc2822, _parse_iso8601, _parse_dateutil):
        dt = strategy(candidate)
        if dt is not None:
            return dt

    logger.debug("Unparseable date: %r", date_str)
    return None
