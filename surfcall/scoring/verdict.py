# ABOUTME: Personalized go / marginal / standby verdict for a user's current conditions
# ABOUTME: Applies height, quality and wind checks in a fixed order and explains the call

import logging
import math
from typing import Optional

from surfcall.forecast.models import Reading, UserPreference, effective_height, effective_score
from surfcall.scoring.models import NextSession, Verdict
from surfcall.scoring.preferences import wind_matches_pref
from surfcall.debug import debug_log

log = logging.getLogger(__name__)


def _fmt(value: float) -> str:
    """3.0 -> "3", 2.5 -> "2.5" """
    return f"{value:g}"


def personalized_verdict(
    reading: Reading,
    prefs: UserPreference,
    next_session: Optional[NextSession]
) -> Verdict:
    """
    Decide whether this user should paddle out now.

    Guards run in order and the first hit wins:
    1. Too small, better day ahead  -> standby, points at that day
    2. Too small, nothing ahead     -> standby
    3. Score under the user's bar   -> marginal, quotes both numbers
    4. Wind not what they like      -> marginal
    5. Otherwise                    -> go

    A reading that is both too small and wrong-wind reports the height,
    never the wind.

    Args:
        reading: Current conditions
        prefs: User thresholds
        next_session: Result of the timeline scan, or None

    Returns:
        Verdict with status and text
    """
    height = effective_height(reading)
    score = effective_score(reading)

    if height < prefs.min_wave_height_ft:
        if next_session is not None:
            debug_log(f"Standby: {height}ft < {prefs.min_wave_height_ft}ft, next {next_session.day}", "VERDICT")
            return Verdict(
                text=(
                    f"Not today. Below your {_fmt(prefs.min_wave_height_ft)}ft minimum. "
                    f"{next_session.day} looks better: {next_session.wave_label}."
                ),
                status="standby",
            )
        debug_log(f"Standby: {height}ft < {prefs.min_wave_height_ft}ft, nothing ahead", "VERDICT")
        return Verdict(
            text=(
                f"Not your day. Below your {_fmt(prefs.min_wave_height_ft)}ft minimum "
                f"and nothing in the forecast beats it yet."
            ),
            status="standby",
        )

    if score < prefs.min_quality_score:
        return Verdict(
            text=(
                f"Waves are there, but quality is {math.floor(score)} "
                f"against your {_fmt(prefs.min_quality_score)} minimum."
            ),
            status="marginal",
        )

    if not wind_matches_pref(reading.wind_type, prefs.wind_preference):
        return Verdict(
            text=(
                f"Waves are there, but the wind ({reading.wind_type or 'unknown'}) "
                f"isn't your call. You asked for {prefs.wind_preference.upper()}."
            ),
            status="marginal",
        )

    log.info(f"Go verdict for {prefs.home_break}: {height}ft, score {score}")
    return Verdict(text="Go surf. Size, quality and wind all line up with your settings.", status="go")
