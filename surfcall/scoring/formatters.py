# ABOUTME: Compass and wave-height formatters shared by verdicts, intel and session cards
# ABOUTME: Converts degrees to 16-point compass labels and feet to fixed height bands

import math
from typing import Optional

COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]

# (upper bound exclusive, label), checked in order
HEIGHT_BANDS = [
    (0.5, "FLAT"),
    (1.0, "1FT"),
    (2.0, "1-2FT"),
    (3.0, "2-3FT"),
    (4.0, "3-4FT"),
    (5.0, "4-5FT"),
    (6.0, "4-6FT"),
    (7.0, "4-6FT+"),
    (8.0, "5-7FT"),
    (10.0, "6-8FT"),
    (12.0, "6-10FT"),
    (15.0, "8-12FT"),
]


def to_cardinal(deg: Optional[float]) -> str:
    """
    Convert a bearing to a 16-point compass label.

    Missing bearings return "S". That is a display default, not a reading;
    never treat it as real data.
    """
    if deg is None:
        return "S"
    # Half-up rounding so 11.25 lands on NNE; round() would bank to even
    index = int(math.floor(deg / 22.5 + 0.5)) % 16
    return COMPASS_POINTS[index]


def height_label(ft: Optional[float]) -> str:
    """Render a wave height (feet) as one of the fixed display bands, e.g. "3-4FT"."""
    if ft is None:
        return "FLAT"
    for upper, label in HEIGHT_BANDS:
        if ft < upper:
            return label
    return "10-15FT"
