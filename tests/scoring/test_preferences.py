# ABOUTME: Tests for wind preference matching
# ABOUTME: Validates the OFFSHORE and ANY keywords, substring fallback and missing wind data

from surfcall.scoring.preferences import wind_matches_pref


def test_cross_wind_does_not_match_offshore_preference():
    """Cross wind is not offshore"""
    assert wind_matches_pref("cross", "OFFSHORE") is False


def test_side_offshore_matches_offshore_with_direction():
    """Side-offshore satisfies an "offshore, wnw" preference"""
    assert wind_matches_pref("side-offshore", "offshore, wnw") is True


def test_missing_wind_never_matches_even_any():
    """Absent wind data never auto-matches"""
    assert wind_matches_pref(None, "ANY") is False
    assert wind_matches_pref("", "ALL") is False


def test_offshore_preference_requires_exact_type():
    """Offshore preference only accepts offshore and side-offshore"""
    assert wind_matches_pref("offshore", "OFFSHORE") is True
    assert wind_matches_pref("OFFSHORE", "offshore") is True
    assert wind_matches_pref("onshore", "OFFSHORE") is False


def test_offshore_clause_is_not_weakened_by_other_entries():
    """"offshore, cross" still rejects cross: the offshore keyword wins"""
    assert wind_matches_pref("cross", "offshore, cross") is False


def test_any_and_all_accept_every_wind():
    """ANY/ALL accept every known wind type"""
    for wind in ["offshore", "side-offshore", "cross", "onshore"]:
        assert wind_matches_pref(wind, "ANY") is True
        assert wind_matches_pref(wind, "All winds") is True


def test_substring_fallback_both_directions():
    """Generic preferences match when either side contains the other"""
    assert wind_matches_pref("cross", "CROSS") is True
    assert wind_matches_pref("cross", "cross-shore") is True
    assert wind_matches_pref("onshore", "cross") is False


def test_missing_preference_is_empty_text():
    """None preference behaves like empty text (which every wind contains)"""
    assert wind_matches_pref("cross", None) is True
