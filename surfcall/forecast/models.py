# ABOUTME: Data models for forecast readings and user surf preferences
# ABOUTME: Parses collaborator payloads and centralizes effective height and score fallbacks

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Optional

from surfcall.config import Config
from surfcall.forecast.spots import classify_wind_type

log = logging.getLogger(__name__)


def _to_float(value: Any) -> Optional[float]:
    """Coerce numbers and numeric strings (database decimals) to float, else None."""
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        log.warning(f"Ignoring non-numeric forecast value: {value!r}")
        return None


def _to_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        # fromisoformat only accepts the trailing Z from 3.11 on
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value)
    return None


@dataclass
class Reading:
    """One forecast sample for a spot, current or on the timeline"""
    timestamp: datetime
    breaking_wave_height_ft: Optional[float] = None
    dominant_swell_height_ft: Optional[float] = None
    dominant_swell_period_s: Optional[float] = None
    dominant_swell_direction_deg: Optional[float] = None  # Direction swell comes FROM
    wind_speed_mph: float = 0.0
    wind_direction_deg: Optional[float] = None
    wind_type: Optional[str] = None    # offshore, side-offshore, cross, onshore
    tide_phase: Optional[str] = None   # rising, falling, high, low
    quality_score: Optional[float] = None
    probability_score: Optional[float] = None
    # Underlying swell train, when the model resolves one
    secondary_swell_height_ft: Optional[float] = None
    secondary_swell_period_s: Optional[float] = None
    secondary_swell_direction_deg: Optional[float] = None

    def __str__(self) -> str:
        return (
            f"{self.timestamp.isoformat()}: {effective_height(self):.1f}ft "
            f"@ {self.dominant_swell_period_s}s, "
            f"wind {self.wind_type or 'n/a'} {self.wind_speed_mph:.0f}mph, "
            f"score {effective_score(self):.0f}"
        )

    @classmethod
    def from_dict(cls, payload: dict) -> Optional["Reading"]:
        """
        Build a Reading from the forecast collaborator's camelCase payload.

        Missing or non-numeric values become None so the shared fallbacks
        apply downstream. A payload without a usable timestamp cannot be
        placed on a timeline and yields None.

        Args:
            payload: Dict with keys like "forecastTimestamp", "breakingWaveHeightFt"

        Returns:
            Reading, or None when the timestamp is missing or unparseable
        """
        try:
            timestamp = _to_datetime(payload.get("forecastTimestamp", payload.get("timestamp")))
        except (TypeError, ValueError) as e:
            log.error(f"Forecast payload timestamp parsing failed: {e} - Payload: {payload}")
            return None

        if timestamp is None:
            log.error(f"Forecast payload has no timestamp - Payload: {payload}")
            return None

        wind_direction = _to_float(payload.get("windDirectionDeg"))
        wind_type = payload.get("windType") or classify_wind_type(wind_direction)
        tide_phase = payload.get("tidePhase")

        return cls(
            timestamp=timestamp,
            breaking_wave_height_ft=_to_float(payload.get("breakingWaveHeightFt")),
            dominant_swell_height_ft=_to_float(payload.get("dominantSwellHeightFt")),
            dominant_swell_period_s=_to_float(payload.get("dominantSwellPeriodS")),
            dominant_swell_direction_deg=_to_float(payload.get("dominantSwellDirectionDeg")),
            wind_speed_mph=_to_float(payload.get("windSpeedMph")) or 0.0,
            wind_direction_deg=wind_direction,
            wind_type=wind_type.lower() if wind_type else None,
            tide_phase=tide_phase.lower() if tide_phase else None,
            quality_score=_to_float(payload.get("qualityScore")),
            probability_score=_to_float(payload.get("probabilityScore")),
            secondary_swell_height_ft=_to_float(payload.get("secondarySwellHeightFt")),
            secondary_swell_period_s=_to_float(payload.get("secondarySwellPeriodS")),
            secondary_swell_direction_deg=_to_float(payload.get("secondarySwellDirectionDeg")),
        )


@dataclass
class UserPreference:
    """A user's stored surf thresholds"""
    home_break: str
    min_wave_height_ft: float
    wind_preference: str        # Free text: "OFFSHORE", "OFFSHORE, WNW", "ANY"
    min_quality_score: float    # 0-100, verdict only

    @classmethod
    def from_dict(cls, payload: dict) -> "UserPreference":
        """Build preferences from a profile payload, filling unset fields with defaults."""
        min_height = _to_float(payload.get("minWaveHeightFt"))
        min_quality = _to_float(payload.get("minQualityScore"))
        return cls(
            home_break=payload.get("homeBreak") or Config.DEFAULT_HOME_BREAK,
            min_wave_height_ft=min_height if min_height is not None else Config.DEFAULT_MIN_WAVE_HEIGHT_FT,
            wind_preference=payload.get("windPreference") or Config.DEFAULT_WIND_PREFERENCE,
            min_quality_score=min_quality if min_quality is not None else Config.DEFAULT_MIN_QUALITY_SCORE,
        )


def effective_height(reading: Reading) -> float:
    """Breaking height if present, else dominant swell height, else the 1.5ft default."""
    if reading.breaking_wave_height_ft is not None:
        return reading.breaking_wave_height_ft
    if reading.dominant_swell_height_ft is not None:
        return reading.dominant_swell_height_ft
    return Config.DEFAULT_HEIGHT_FT


def effective_score(reading: Reading) -> float:
    """Quality score if present, else probability score, else 0."""
    if reading.quality_score is not None:
        return reading.quality_score
    if reading.probability_score is not None:
        return reading.probability_score
    return 0.0


def parse_timeline(payloads: Iterable[dict]) -> list[Reading]:
    """
    Parse a list of collaborator payloads into a timeline.

    Entries without a usable timestamp are skipped (and logged); entries
    missing height or score are kept and fall back to the shared defaults.
    """
    timeline = []
    skipped = 0
    for payload in payloads:
        reading = Reading.from_dict(payload)
        if reading is None:
            skipped += 1
            continue
        timeline.append(reading)

    if skipped:
        log.warning(f"Skipped {skipped} timeline entries without a usable timestamp")
    return timeline
