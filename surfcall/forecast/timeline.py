# ABOUTME: Helpers for working with forecast timelines handed over by the forecast collaborator
# ABOUTME: Windows a timeline to the horizon and picks the reading that counts as "now"

from datetime import datetime, timedelta
from typing import Optional, Sequence
from zoneinfo import ZoneInfo

from surfcall.config import Config
from surfcall.forecast.models import Reading


def local_zone(tz_name: Optional[str] = None) -> ZoneInfo:
    """Timezone used for calendar-day decisions (defaults to Config.LOCAL_TIMEZONE)."""
    return ZoneInfo(tz_name or Config.LOCAL_TIMEZONE)


def to_local(moment: datetime, tz: ZoneInfo) -> datetime:
    """Convert an aware datetime to `tz`; naive datetimes are taken as already local."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz)
    return moment.astimezone(tz)


def within_horizon(
    timeline: Sequence[Reading],
    now: datetime,
    hours: int = None,
    tz: Optional[ZoneInfo] = None
) -> list[Reading]:
    """
    Return the points between an hour ago and `hours` ahead of now.

    The input timeline is never modified; a new list is returned.

    Args:
        timeline: Readings ascending by timestamp
        now: Reference instant
        hours: Horizon length (default Config.FORECAST_HORIZON_HOURS)
        tz: Zone for naive timestamps (default Config.LOCAL_TIMEZONE)

    Returns:
        Readings inside the window, in their original order
    """
    hours = hours if hours is not None else Config.FORECAST_HORIZON_HOURS
    tz = tz or local_zone()
    now = to_local(now, tz)
    start = now - timedelta(minutes=Config.CURRENT_CONDITIONS_MAX_AGE_MINUTES)
    end = now + timedelta(hours=hours)
    return [
        point for point in timeline
        if start <= to_local(point.timestamp, tz) <= end
    ]


def select_current_reading(
    timeline: Sequence[Reading],
    now: datetime,
    max_age: timedelta = None,
    tz: Optional[ZoneInfo] = None
) -> Optional[Reading]:
    """
    Pick the reading that represents current conditions.

    Only past points count: current conditions reflect what IS happening,
    not what will. The most recent point at or before `now` wins, as long
    as it is no older than `max_age` (default one hour). Naive timestamps
    and a naive `now` are read as wall time in `tz`.

    Returns:
        The most recent valid point, or None when nothing is recent enough
    """
    if max_age is None:
        max_age = timedelta(minutes=Config.CURRENT_CONDITIONS_MAX_AGE_MINUTES)
    tz = tz or local_zone()
    now = to_local(now, tz)
    cutoff = now - max_age

    current = None
    current_moment = None
    for point in timeline:
        moment = to_local(point.timestamp, tz)
        if cutoff <= moment <= now:
            if current is None or moment > current_moment:
                current = point
                current_moment = moment
    return current
