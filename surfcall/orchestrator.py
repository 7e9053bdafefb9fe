# ABOUTME: Condition evaluator coordinating tiers, verdicts, local intel and the timeline scan
# ABOUTME: Turns one reading, a forecast timeline and a user's preferences into a ConditionReport

import logging
from datetime import datetime
from typing import Optional, Sequence

from surfcall.config import Config
from surfcall.forecast.models import Reading, UserPreference, effective_score
from surfcall.forecast.timeline import local_zone, select_current_reading, to_local, within_horizon
from surfcall.scoring.intel import local_intel
from surfcall.scoring.models import ConditionReport
from surfcall.scoring.sessions import find_next_best_session
from surfcall.scoring.tiers import objective_tier, tier_color
from surfcall.scoring.verdict import personalized_verdict
from surfcall.debug import debug_log

log = logging.getLogger(__name__)


class ConditionEvaluator:
    """Orchestrates the scoring components to build a report for one user and spot"""

    def __init__(self, tz_name: Optional[str] = None, horizon_hours: Optional[int] = None):
        self.tz = local_zone(tz_name)
        self.horizon_hours = horizon_hours if horizon_hours is not None else Config.FORECAST_HORIZON_HOURS

    def _now(self, now: Optional[datetime]) -> datetime:
        return now if now is not None else datetime.now(self.tz)

    def evaluate(
        self,
        reading: Reading,
        timeline: Sequence[Reading],
        prefs: UserPreference,
        now: Optional[datetime] = None
    ) -> ConditionReport:
        """
        Build the full report for current conditions.

        Args:
            reading: Current conditions at the user's home break
            timeline: Forecast readings ascending by timestamp (not modified)
            prefs: User thresholds
            now: Reference instant; pass one in tests for reproducible output

        Returns:
            ConditionReport with tier, verdict, intel, next session and tags
        """
        now = self._now(now)
        today = to_local(now, self.tz).date()

        window = within_horizon(timeline, now, self.horizon_hours, tz=self.tz)
        next_session = find_next_best_session(
            window,
            min_height=prefs.min_wave_height_ft,
            wind_pref=prefs.wind_preference,
            now=now,
            tz=self.tz,
        )

        score = effective_score(reading)
        tier = objective_tier(score)
        verdict = personalized_verdict(reading, prefs, next_session)
        intel = local_intel(score, reading, prefs.home_break, today)

        debug_log(
            f"{prefs.home_break}: tier={tier} verdict={verdict.status} "
            f"next={next_session.day if next_session else None}",
            "EVALUATOR",
        )

        return ConditionReport(
            tier=tier,
            tier_color=tier_color(tier),
            verdict=verdict,
            intel=intel,
            next_session=next_session,
            tags=list(next_session.tags) if next_session else [],
        )

    def evaluate_timeline(
        self,
        timeline: Sequence[Reading],
        prefs: UserPreference,
        now: Optional[datetime] = None
    ) -> Optional[ConditionReport]:
        """
        Build a report when only the timeline is available.

        Current conditions are the most recent past point within the
        configured max age.

        Returns:
            ConditionReport, or None when the timeline has no current point
        """
        now = self._now(now)
        reading = select_current_reading(timeline, now, tz=self.tz)
        if reading is None:
            log.warning(f"No current reading for {prefs.home_break} at {now.isoformat()}")
            return None
        return self.evaluate(reading, timeline, prefs, now)
