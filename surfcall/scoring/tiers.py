# ABOUTME: Objective quality tiers for 0-100 condition scores
# ABOUTME: Maps a raw score to one of five ordered tiers plus its badge color, ignoring user preferences

from typing import Optional

ALL_TIME = "ALL-TIME"
FIRING = "FIRING"
GO_SURF = "GO SURF"
WORTH_A_LOOK = "WORTH A LOOK"
DONT_BOTHER = "DON'T BOTHER"

# Lower bounds are inclusive: 91 is ALL-TIME, 90.99 is FIRING
TIER_THRESHOLDS = [
    (91, ALL_TIME),
    (76, FIRING),
    (60, GO_SURF),
    (40, WORTH_A_LOOK),
]

# Worst to best
TIER_ORDER = [DONT_BOTHER, WORTH_A_LOOK, GO_SURF, FIRING, ALL_TIME]

TIER_COLORS = {
    ALL_TIME: "bg-emerald-600",
    FIRING: "bg-green-600",
    GO_SURF: "bg-lime-500",
    WORTH_A_LOOK: "bg-yellow-500",
    DONT_BOTHER: "bg-red-500",
}


def objective_tier(score: Optional[float]) -> str:
    """Classify a 0-100 score; missing scores count as 0."""
    value = score if score is not None else 0
    for threshold, tier in TIER_THRESHOLDS:
        if value >= threshold:
            return tier
    return DONT_BOTHER


def tier_color(tier: str) -> str:
    """Badge background class for a tier."""
    return TIER_COLORS[tier]


def tier_rank(tier: str) -> int:
    """Position of a tier from DON'T BOTHER (0) to ALL-TIME (4)."""
    return TIER_ORDER.index(tier)
