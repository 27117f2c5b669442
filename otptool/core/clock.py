from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import ConfigError


TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
UNIX_EPOCH = "1970-01-01 00:00:00 UTC"

_UTC_NAMES = {"UTC", "GMT", "Z", "UT"}


def _zone(name: str) -> Optional[tzinfo]:
    if name.upper() in _UTC_NAMES:
        return timezone.utc
    if name[:1] in "+-":
        try:
            return datetime.strptime(name, "%z").tzinfo
        except ValueError:
            return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return None


def parse_time(text: str) -> int:
    """Parse ``YYYY-MM-DD HH:MM:SS TZ`` into Unix seconds.

    The zone may be UTC/GMT/Z, a numeric offset such as ``+0900`` or
    ``-05:00``, or an IANA name such as ``Asia/Tokyo``. A missing zone
    means UTC.
    """

    parts = text.strip().split()
    if len(parts) not in (2, 3):
        raise ConfigError(f"cannot parse time {text!r}, expected 'YYYY-MM-DD HH:MM:SS TZ'", context={"time": text})
    try:
        naive = datetime.strptime(" ".join(parts[:2]), TIME_FORMAT)
    except ValueError as e:
        raise ConfigError(f"cannot parse time {text!r}: {e}", context={"time": text}) from e

    zone: Optional[tzinfo] = timezone.utc
    if len(parts) == 3:
        zone = _zone(parts[2])
        if zone is None:
            raise ConfigError(f"unknown time zone {parts[2]!r}", context={"time": text})
    return int(naive.replace(tzinfo=zone).timestamp())


def format_time(seconds: int) -> str:
    moment = datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(seconds=seconds)
    return moment.strftime(TIME_FORMAT) + " UTC"


def utc_now() -> int:
    return int(time.time())
