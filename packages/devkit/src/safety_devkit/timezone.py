from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "Asia/Kolkata"


def now_local(zone_name: str = DEFAULT_TIMEZONE) -> datetime:
    return datetime.now(ZoneInfo(zone_name))
