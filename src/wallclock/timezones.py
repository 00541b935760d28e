from __future__ import annotations

from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import tz

from .errors import TimezoneError

LOCAL = "Local"

def load_location(name: str) -> tzinfo | None:
    """Resolve a timezone name once, at setup.

    An empty name means no override: renders use the ambient local zone.
    ``"Local"`` is the system zone; anything else must be an IANA name.
    """
    if not name:
        return None
    if name == LOCAL:
        return tz.tzlocal()
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise TimezoneError(name, e) from e
