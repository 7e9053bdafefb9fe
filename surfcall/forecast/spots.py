# ABOUTME: Spot profiles for the western Long Island breaks and wind-type classification
# ABOUTME: Resolves home-break identifiers and labels wind bearings relative to the south-facing shore

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SpotProfile:
    """Static characteristics of a surf spot"""
    key: str
    name: str
    sheltered_bight: bool = False  # Sits deep in the NY Bight shadow
    tide_sensitive: bool = False   # Sandbars shut down on a full high tide


SPOT_PROFILES = {
    "lido": SpotProfile(
        key="lido",
        name="Lido Beach",
    ),
    "long-beach": SpotProfile(
        key="long-beach",
        name="Long Beach",
        tide_sensitive=True,
    ),
    "rockaway": SpotProfile(
        key="rockaway",
        name="Rockaway Beach",
        sheltered_bight=True,
    ),
}

_NAME_TO_KEY = {profile.name.lower(): key for key, profile in SPOT_PROFILES.items()}


def get_spot_profile(identifier: Optional[str]) -> Optional[SpotProfile]:
    """
    Look up a spot by profile key ("lido") or display name ("Lido Beach").

    Args:
        identifier: Key or name, case-insensitive

    Returns:
        SpotProfile, or None for unknown or missing spots
    """
    if not identifier:
        return None
    normalized = identifier.strip().lower()
    if normalized in SPOT_PROFILES:
        return SPOT_PROFILES[normalized]
    key = _NAME_TO_KEY.get(normalized)
    return SPOT_PROFILES.get(key) if key else None


def classify_wind_type(wind_direction_deg: Optional[float]) -> Optional[str]:
    """
    Label a wind bearing for Long Island's south-facing beaches.

    North (315-45) = offshore, South (135-225) = onshore,
    WNW (295-315) = side-offshore, everything else = cross.
    """
    if wind_direction_deg is None:
        return None

    deg = wind_direction_deg % 360
    if deg >= 315 or deg <= 45:
        return "offshore"
    if 135 <= deg <= 225:
        return "onshore"
    if 295 <= deg < 315:
        return "side-offshore"
    return "cross"
