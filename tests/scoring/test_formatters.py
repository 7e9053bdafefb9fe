# ABOUTME: Tests for compass and wave-height formatters
# ABOUTME: Validates 16-point compass rounding and the fixed height bands

from surfcall.scoring.formatters import height_label, to_cardinal


def test_cardinal_points_on_the_axes():
    """Exact bearings map to their compass point"""
    assert to_cardinal(0) == "N"
    assert to_cardinal(90) == "E"
    assert to_cardinal(180) == "S"
    assert to_cardinal(225) == "SW"
    assert to_cardinal(292.5) == "WNW"


def test_cardinal_rounds_half_up():
    """11.25 sits halfway between N and NNE and rounds up like Math.round"""
    assert to_cardinal(11.25) == "NNE"
    assert to_cardinal(11.2) == "N"


def test_cardinal_wraps_past_north():
    """Bearings just under 360 wrap back to N"""
    assert to_cardinal(359) == "N"
    assert to_cardinal(350) == "N"
    assert to_cardinal(340) == "NNW"


def test_cardinal_missing_bearing_defaults_to_south():
    """No bearing renders the documented S default"""
    assert to_cardinal(None) == "S"


def test_height_label_bands():
    """Heights fall into the fixed display bands"""
    assert height_label(0.2) == "FLAT"
    assert height_label(0.7) == "1FT"
    assert height_label(1.5) == "1-2FT"
    assert height_label(2.9) == "2-3FT"
    assert height_label(3.5) == "3-4FT"
    assert height_label(4.0) == "4-5FT"
    assert height_label(5.5) == "4-6FT"
    assert height_label(6.5) == "4-6FT+"
    assert height_label(7.5) == "5-7FT"
    assert height_label(9) == "6-8FT"
    assert height_label(11) == "6-10FT"
    assert height_label(13) == "8-12FT"
    assert height_label(20) == "10-15FT"


def test_height_label_missing_height_is_flat():
    """None renders as FLAT"""
    assert height_label(None) == "FLAT"
