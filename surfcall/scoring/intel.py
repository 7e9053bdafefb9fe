# ABOUTME: Local intel commentary chosen from an ordered, first-match-wins rule table
# ABOUTME: Global overrides run first, then tier-specific rules keyed by the objective tier

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional

from surfcall.forecast.models import Reading, effective_height
from surfcall.forecast.spots import SpotProfile, get_spot_profile
from surfcall.forecast.timeline import local_zone
from surfcall.scoring.formatters import height_label, to_cardinal
from surfcall.scoring.preferences import OFFSHORE_WIND_TYPES
from surfcall.scoring.tiers import (
    ALL_TIME, DONT_BOTHER, FIRING, GO_SURF, WORTH_A_LOOK, objective_tier,
)
from surfcall.debug import debug_log

log = logging.getLogger(__name__)

WINTER_MONTHS = {12, 1, 2}


@dataclass
class IntelContext:
    """Everything a rule predicate may look at"""
    score: float
    reading: Reading
    height: float
    spot: Optional[SpotProfile]
    today: date

    @property
    def period(self) -> Optional[float]:
        return self.reading.dominant_swell_period_s

    @property
    def swell_dir(self) -> Optional[float]:
        return self.reading.dominant_swell_direction_deg

    @property
    def wind_dir(self) -> Optional[float]:
        return self.reading.wind_direction_deg

    @property
    def wind_type(self) -> str:
        return (self.reading.wind_type or "").lower()

    @property
    def tide(self) -> str:
        return (self.reading.tide_phase or "").lower()

    @property
    def is_winter(self) -> bool:
        return self.today.month in WINTER_MONTHS

    @property
    def is_weekend(self) -> bool:
        return self.today.weekday() >= 5

    def is_spot(self, key: str) -> bool:
        return self.spot is not None and self.spot.key == key

    def template_values(self) -> dict:
        return {
            "period": self.period or 0,
            "height_label": height_label(self.height),
            "swell_cardinal": to_cardinal(self.swell_dir),
            "wind_speed": self.reading.wind_speed_mph,
            "break_name": self.spot.name if self.spot else "your break",
        }


@dataclass(frozen=True)
class IntelRule:
    """One row of the rule table: when `applies` is true, show `message`"""
    name: str
    applies: Callable[[IntelContext], bool]
    message: str

    def render(self, ctx: IntelContext) -> str:
        return self.message.format(**ctx.template_values())


def _between(value: Optional[float], low: float, high: float, include_high: bool = True) -> bool:
    if value is None:
        return False
    return low <= value <= high if include_high else low <= value < high


def _has_underlying_groundswell(ctx: IntelContext) -> bool:
    # Organized secondary train: big enough to ride, long enough to have shape
    height = ctx.reading.secondary_swell_height_ft
    period = ctx.reading.secondary_swell_period_s
    return height is not None and height >= 1.5 and period is not None and period >= 8


# Checked on every reading, before any tier rule
GLOBAL_RULES = [
    IntelRule(
        "canyon_groundswell",
        lambda ctx: ctx.period is not None and ctx.period >= 12,
        "Long-period groundswell ({period:.0f}s). The Hudson Canyon focuses this energy, "
        "so sets will break bigger than the buoy height suggests.",
    ),
    IntelRule(
        "wnw_favors_bight",
        lambda ctx: _between(ctx.wind_dir, 285, 315) and ctx.spot is not None and ctx.spot.sheltered_bight,
        "WNW wind favors {break_name}. Sitting deep in the bight, it grooms this break "
        "better than anywhere else on the stretch.",
    ),
    IntelRule(
        "hurricane_crowds",
        lambda ctx: ctx.score >= 70 and ctx.height >= 6,
        "Hurricane swell energy. Every charger on the island will be out, so hit the "
        "side streets and leave the main jetties to the pack.",
    ),
]

TIER_RULES = {
    ALL_TIME: [
        IntelRule(
            "all_time_rarity",
            lambda ctx: True,
            "This happens a handful of days a year. Drop everything.",
        ),
    ],
    FIRING: [
        IntelRule(
            "firing_crowd_warning",
            lambda ctx: ctx.height >= 5 and (not ctx.is_winter or ctx.is_weekend),
            "Firing at {height_label}. Expect a packed lineup at the jetties; "
            "go at first light or spread out down the beach.",
        ),
        IntelRule(
            "firing_rare_alignment",
            lambda ctx: True,
            "Rare alignment of swell, wind and tide. Don't overthink it.",
        ),
    ],
    GO_SURF: [
        IntelRule(
            "lido_southeast_swell",
            lambda ctx: _between(ctx.swell_dir, 110, 175) and ctx.is_spot("lido"),
            "{swell_cardinal} swell is lined up for Lido. The Jones Inlet shoal bends it "
            "straight into the lineup.",
        ),
        IntelRule(
            "long_beach_southeast_swell",
            lambda ctx: _between(ctx.swell_dir, 110, 175) and ctx.is_spot("long-beach"),
            "{swell_cardinal} swell is hitting the Long Beach groins at a good angle. "
            "The sandbars by the jetties will have the best shape.",
        ),
        IntelRule(
            "offshore_rising_tide",
            lambda ctx: ctx.wind_type in OFFSHORE_WIND_TYPES and ctx.tide == "rising",
            "Offshore wind on a rising tide. The push should add size through the session.",
        ),
        IntelRule(
            "go_surf_clean",
            lambda ctx: True,
            "Wind and period are holding it together. Clean enough to go.",
        ),
    ],
    WORTH_A_LOOK: [
        IntelRule(
            "cross_wind_with_size",
            lambda ctx: ctx.wind_type == "cross" and ctx.height >= 2,
            "Cross-shore wind but there's size. Find a jetty that blocks it.",
        ),
        IntelRule(
            "east_wrap",
            lambda ctx: _between(ctx.swell_dir, 90, 105, include_high=False),
            "East swell wrapping in. Only the east-facing corners will catch much of it.",
        ),
        IntelRule(
            "underlying_groundswell",
            _has_underlying_groundswell,
            "There's an organized groundswell under the chop. Wait for the sets.",
        ),
        IntelRule(
            "northeast_wind_small",
            lambda ctx: _between(ctx.wind_dir, 22.5, 67.5, include_high=False) and ctx.height < 3,
            "Light NE wind on a small day. Check it early before it turns.",
        ),
        IntelRule(
            "falling_tide",
            lambda ctx: ctx.tide == "falling",
            "Falling tide should wake the sandbars up. Watch it toward low.",
        ),
        IntelRule(
            "cross_wind",
            lambda ctx: ctx.wind_type == "cross",
            "Cross-shore texture. Surfable, not pretty.",
        ),
    ],
    DONT_BOTHER: [
        IntelRule(
            "strong_onshore",
            lambda ctx: ctx.wind_type == "onshore" and ctx.reading.wind_speed_mph > 7,
            "Onshore at {wind_speed:.0f}mph. It's a washing machine out there.",
        ),
        IntelRule(
            "cross_wind_falling_tide",
            lambda ctx: ctx.wind_type == "cross" and ctx.tide == "falling",
            "Cross wind on a draining tide. It gets worse before it gets better.",
        ),
        IntelRule(
            "short_period_small",
            lambda ctx: ctx.period is not None and ctx.period < 7 and ctx.height < 3,
            "Short-period wind swell. Small slop with no push behind it.",
        ),
        IntelRule(
            "high_tide_swamped",
            lambda ctx: ctx.tide == "high" and ctx.spot is not None and ctx.spot.tide_sensitive,
            "High tide swamps the {break_name} sandbars. Wait for it to drain.",
        ),
        IntelRule(
            "blocked_west_swell",
            lambda ctx: _between(ctx.swell_dir, 247.5, 330, include_high=False),
            "{swell_cardinal} swell is blocked by the land. Nothing gets in.",
        ),
        IntelRule(
            "too_small",
            lambda ctx: True,
            "Too small to bother. Save it for the next swell.",
        ),
    ],
}

def _build_context(
    score: float,
    reading: Reading,
    home_break: Optional[str],
    today: Optional[date]
) -> IntelContext:
    if today is None:
        today = datetime.now(local_zone()).date()
    spot = get_spot_profile(home_break)
    if home_break and spot is None:
        log.warning(f"Unknown home break {home_break!r}, skipping spot-specific intel")
    return IntelContext(
        score=score,
        reading=reading,
        height=effective_height(reading),
        spot=spot,
        today=today,
    )


def _first_match(ctx: IntelContext) -> Optional[IntelRule]:
    for rule in GLOBAL_RULES + TIER_RULES[objective_tier(ctx.score)]:
        if rule.applies(ctx):
            debug_log(f"Intel rule matched: {rule.name}", "INTEL")
            return rule
    debug_log(f"No intel rule matched for score {ctx.score}", "INTEL")
    return None


def match_intel_rule(
    score: float,
    reading: Reading,
    home_break: Optional[str],
    today: Optional[date] = None
) -> Optional[IntelRule]:
    """
    Find the first rule that applies: global overrides, then the score's tier.

    Args:
        score: 0-100 quality score
        reading: Current conditions
        home_break: Spot key or name; unknown spots skip the spot-specific rules
        today: Local date for the weekend/winter checks (default: today in Config.LOCAL_TIMEZONE)

    Returns:
        The matching IntelRule, or None when nothing applies
    """
    return _first_match(_build_context(score, reading, home_break, today))


def local_intel(
    score: float,
    reading: Reading,
    home_break: Optional[str],
    today: Optional[date] = None
) -> Optional[str]:
    """
    Pick one sentence of local commentary for the conditions.

    None is a normal answer: it means there is nothing worth saying,
    not that something went wrong.
    """
    ctx = _build_context(score, reading, home_break, today)
    rule = _first_match(ctx)
    return rule.render(ctx) if rule else None
