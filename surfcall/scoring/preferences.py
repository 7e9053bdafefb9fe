# ABOUTME: Matches a reading's wind type against a user's free-text wind preference
# ABOUTME: Handles the OFFSHORE and ANY/ALL keywords before falling back to substring matching

from typing import Optional

OFFSHORE_WIND_TYPES = {"offshore", "side-offshore"}


def wind_matches_pref(wind_type: Optional[str], preference: Optional[str]) -> bool:
    """
    Check whether a wind type satisfies a user's wind preference.

    Order matters: "offshore" and "any"/"all" are resolved before the
    generic substring comparison, so "OFFSHORE, WNW" never degrades to a
    partial match on its offshore clause.

    Args:
        wind_type: Reading's wind type ("offshore", "cross", ...) or None
        preference: Free text such as "OFFSHORE", "OFFSHORE, WNW" or "ANY"

    Returns:
        True if the wind suits the preference. Missing wind data never matches.
    """
    if not wind_type:
        return False

    wind = wind_type.lower()
    pref = (preference or "").lower()

    if "offshore" in pref:
        return wind in OFFSHORE_WIND_TYPES

    if "any" in pref or "all" in pref:
        return True

    return pref in wind or wind in pref
