"""Reference-layout time formatting.

A layout is written as the reference instant ``Mon Jan 2 15:04:05 MST 2006``
would look: ``"15:04"`` prints hour and minute, ``"Monday, January 2"``
prints weekday, month and day. Each recognised piece of the reference time is
substituted with the matching field of the instant being formatted. Anything
else in the layout is copied through literally, so a malformed layout still
formats, it just prints more literal text.

Recognised tokens:

=============  ======================================
``January``    full month name
``Jan``        abbreviated month name
``Monday``     full weekday name
``Mon``        abbreviated weekday name
``1 01``       month, zero padded
``2 02 _2``    day of month, zero or space padded
``002 __2``    day of year, zero or space padded
``15``         hour, 24h clock
``3 03``       hour, 12h clock
``4 04``       minute
``5 05``       second
``2006 06``    four and two digit year
``PM pm``      AM/PM marker
``MST``        zone abbreviation
``-0700``      numeric offset (also ``-07``, ``-07:00``, ``-070000``,
               ``-07:00:00``; a ``Z`` prefix prints ``Z`` for UTC)
``.000 .999``  fractional seconds, fixed or trimmed (``,`` also works)
=============  ======================================

``Jan`` and ``Mon`` only match when the next character is not a lowercase
letter. Names are always English. ``%`` has no special meaning and is copied
through like any other literal.
"""
from __future__ import annotations

from datetime import datetime, timedelta
from functools import lru_cache

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

_ZONE_TOKENS = ("-070000", "-07:00:00", "-0700", "-07:00", "-07")

def _starts_lower(s: str, i: int) -> bool:
    return i < len(s) and "a" <= s[i] <= "z"

def _match(layout: str, i: int) -> str | None:
    """Return the reference token starting at ``layout[i]``, if any."""
    rest = layout[i:]
    c = rest[0]
    if c == "J":
        if rest.startswith("January"):
            return "January"
        if rest.startswith("Jan") and not _starts_lower(layout, i + 3):
            return "Jan"
    elif c == "M":
        if rest.startswith("Monday"):
            return "Monday"
        if rest.startswith("Mon") and not _starts_lower(layout, i + 3):
            return "Mon"
        if rest.startswith("MST"):
            return "MST"
    elif c == "0":
        if len(rest) >= 2 and "1" <= rest[1] <= "6":
            return rest[:2]
        if rest.startswith("002"):
            return "002"
    elif c == "1":
        return "15" if rest.startswith("15") else "1"
    elif c == "2":
        return "2006" if rest.startswith("2006") else "2"
    elif c == "_":
        # "_2006" is a literal underscore followed by the year.
        if rest.startswith("_2") and not rest.startswith("_2006"):
            return "_2"
        if rest.startswith("__2"):
            return "__2"
    elif c in "345":
        return c
    elif c == "P":
        if rest.startswith("PM"):
            return "PM"
    elif c == "p":
        if rest.startswith("pm"):
            return "pm"
    elif c in "-Z":
        for tok in _ZONE_TOKENS:
            tok = c + tok[1:]
            if rest.startswith(tok):
                return tok
    elif c in ".,":
        if len(rest) >= 2 and rest[1] in "09":
            j = 1
            while j < len(rest) and rest[j] == rest[1]:
                j += 1
            if not (j < len(rest) and rest[j].isdigit()):
                return rest[:j]
    return None

@lru_cache(maxsize=64)
def compile_layout(layout: str) -> tuple[tuple[bool, str], ...]:
    """Split a layout into ``(is_token, text)`` parts."""
    parts: list[tuple[bool, str]] = []
    literal: list[str] = []
    i = 0
    while i < len(layout):
        tok = _match(layout, i)
        if tok is None:
            literal.append(layout[i])
            i += 1
            continue
        if literal:
            parts.append((False, "".join(literal)))
            literal = []
        parts.append((True, tok))
        i += len(tok)
    if literal:
        parts.append((False, "".join(literal)))
    return tuple(parts)

def _offset(dt: datetime, tok: str) -> str:
    offset = dt.utcoffset() or timedelta(0)
    seconds = int(offset.total_seconds())
    if tok[0] == "Z" and seconds == 0:
        return "Z"
    sign = "-" if seconds < 0 else "+"
    seconds = abs(seconds)
    hh, mm, ss = seconds // 3600, seconds // 60 % 60, seconds % 60
    body = tok[1:]
    if body == "07":
        return f"{sign}{hh:02d}"
    if body == "0700":
        return f"{sign}{hh:02d}{mm:02d}"
    if body == "07:00":
        return f"{sign}{hh:02d}:{mm:02d}"
    if body == "070000":
        return f"{sign}{hh:02d}{mm:02d}{ss:02d}"
    return f"{sign}{hh:02d}:{mm:02d}:{ss:02d}"

def _fraction(dt: datetime, tok: str) -> str:
    sep, kind, digits = tok[0], tok[1], len(tok) - 1
    nanos = f"{dt.microsecond * 1000:09d}"[:digits]
    if kind == "9":
        nanos = nanos.rstrip("0")
        if not nanos:
            return ""
    return sep + nanos

def _hour12(dt: datetime) -> int:
    return dt.hour % 12 or 12

def _format_token(dt: datetime, tok: str) -> str:
    if tok == "January":
        return MONTHS[dt.month - 1]
    if tok == "Jan":
        return MONTHS[dt.month - 1][:3]
    if tok == "Monday":
        return WEEKDAYS[dt.weekday()]
    if tok == "Mon":
        return WEEKDAYS[dt.weekday()][:3]
    if tok == "MST":
        name = dt.tzname()
        return name if name else _offset(dt, "-0700")
    if tok[0] in "-Z":
        return _offset(dt, tok)
    if tok[0] in ".,":
        return _fraction(dt, tok)
    if tok in ("PM", "pm"):
        marker = "PM" if dt.hour >= 12 else "AM"
        return marker if tok == "PM" else marker.lower()

    yday = dt.timetuple().tm_yday
    values = {
        "1": str(dt.month),
        "01": f"{dt.month:02d}",
        "2": str(dt.day),
        "02": f"{dt.day:02d}",
        "_2": f"{dt.day:>2}",
        "002": f"{yday:03d}",
        "__2": f"{yday:>3}",
        "15": f"{dt.hour:02d}",
        "3": str(_hour12(dt)),
        "03": f"{_hour12(dt):02d}",
        "4": str(dt.minute),
        "04": f"{dt.minute:02d}",
        "5": str(dt.second),
        "05": f"{dt.second:02d}",
        "2006": f"{dt.year:04d}",
        "06": f"{dt.year % 100:02d}",
    }
    return values[tok]

def format_time(dt: datetime, layout: str) -> str:
    return "".join(
        _format_token(dt, text) if is_token else text
        for is_token, text in compile_layout(layout)
    )
