# ABOUTME: Scans a multi-day forecast timeline for the next session that fits a user's thresholds
# ABOUTME: Picks each future day's best reading, searches chronologically, and tags the chosen day

import math
from collections import OrderedDict
from datetime import date, datetime
from typing import Optional, Sequence
from zoneinfo import ZoneInfo

from surfcall.forecast.models import Reading, effective_height, effective_score
from surfcall.forecast.timeline import local_zone, to_local
from surfcall.scoring.formatters import height_label
from surfcall.scoring.models import NextSession
from surfcall.scoring.preferences import OFFSHORE_WIND_TYPES, wind_matches_pref
from surfcall.debug import debug_log

OFFSHORE_WINDOW = "OFFSHORE WINDOW"
CROSS_WINDS = "CROSS WINDS"
MEETS_YOUR_MIN = "MEETS YOUR MIN"
FIRING_TAG = "FIRING"
CLEAN_TAG = "CLEAN"


def best_reading_per_day(
    timeline: Sequence[Reading],
    today: date,
    tz: ZoneInfo
) -> "OrderedDict[date, Reading]":
    """
    Group readings by local calendar day and keep each day's top-scoring point.

    Today and earlier days are dropped. Ties go to the earlier reading.
    Readings missing height or score stay in, scored through the shared defaults.
    """
    best: dict[date, Reading] = {}
    for point in timeline:
        day = to_local(point.timestamp, tz).date()
        if day <= today:
            continue
        current = best.get(day)
        if current is None or effective_score(point) > effective_score(current):
            best[day] = point
    return OrderedDict(sorted(best.items()))


def display_score(reading: Reading) -> int:
    """Score clamped to 0-100 and rounded half-up, as shown on a session card."""
    clamped = max(0.0, min(100.0, effective_score(reading)))
    return int(math.floor(clamped + 0.5))


def session_tags(reading: Reading, min_height: float) -> list[str]:
    """Short labels for a session card: wind tag, then threshold tag, then score tag."""
    tags = []

    wind_type = (reading.wind_type or "").lower()
    if wind_type in OFFSHORE_WIND_TYPES:
        tags.append(OFFSHORE_WINDOW)
    elif wind_type == "cross":
        tags.append(CROSS_WINDS)

    if effective_height(reading) >= min_height:
        tags.append(MEETS_YOUR_MIN)

    score = display_score(reading)
    if score >= 76:
        tags.append(FIRING_TAG)
    elif score >= 60:
        tags.append(CLEAN_TAG)

    return tags


def find_next_best_session(
    timeline: Sequence[Reading],
    min_height: float,
    wind_pref: str,
    now: datetime,
    tz: Optional[ZoneInfo] = None
) -> Optional[NextSession]:
    """
    Find the next day worth surfing for a user.

    The first future day whose best reading meets the height minimum and
    wind preference wins. If no day does, fall back to the day with the
    single highest score in the forecast.

    Args:
        timeline: Readings ascending by timestamp (not modified)
        min_height: User's minimum wave height in feet
        wind_pref: User's free-text wind preference
        now: Reference instant; its local date is "today" and is skipped
        tz: Timezone for calendar days (default Config.LOCAL_TIMEZONE)

    Returns:
        NextSession, or None when there are no future days
    """
    tz = tz or local_zone()
    today = to_local(now, tz).date()
    days = best_reading_per_day(timeline, today, tz)
    if not days:
        return None

    chosen = None
    for day, point in days.items():
        if effective_height(point) >= min_height and wind_matches_pref(point.wind_type, wind_pref):
            chosen = (day, point)
            debug_log(f"First matching day: {day.isoformat()}", "SESSIONS")
            break

    if chosen is None:
        # max() keeps the first of equal scores, i.e. the earliest day
        chosen = max(days.items(), key=lambda item: effective_score(item[1]))
        debug_log(f"No day matches, best overall: {chosen[0].isoformat()}", "SESSIONS")

    day, point = chosen
    return NextSession(
        day=day.strftime("%A"),
        wave_label=height_label(effective_height(point)),
        wind_type=point.wind_type or "N/A",
        period=point.dominant_swell_period_s,
        score=display_score(point),
        tags=session_tags(point, min_height),
    )

