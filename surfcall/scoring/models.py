# ABOUTME: Data models for verdicts, next-session picks and the aggregated condition report
# ABOUTME: Provides structured, validated engine output for the presentation layer

from dataclasses import asdict, dataclass, field
from typing import Optional

VERDICT_STATUSES = ("go", "marginal", "standby")


@dataclass
class Verdict:
    """Personalized go / marginal / standby call"""
    text: str
    status: str  # "go", "marginal" or "standby"

    def __post_init__(self):
        if self.status not in VERDICT_STATUSES:
            raise ValueError(f"Status must be one of {VERDICT_STATUSES}, got {self.status!r}")


@dataclass
class NextSession:
    """Best upcoming day for a user"""
    day: str          # Weekday name, e.g. "Saturday"
    wave_label: str   # e.g. "3-4FT"
    wind_type: str
    period: Optional[float]
    score: int        # 0-100
    tags: list[str] = field(default_factory=list)

    def __post_init__(self):
        if not 0 <= self.score <= 100:
            raise ValueError(f"Score must be 0-100, got {self.score}")


@dataclass
class ConditionReport:
    """Everything the engine says about one spot for one user"""
    tier: str
    tier_color: str
    verdict: Verdict
    intel: Optional[str] = None
    next_session: Optional[NextSession] = None
    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Plain dict for JSON responses; missing intel/session stay None."""
        return asdict(self)
