# ABOUTME: Tests for forecast readings and user preference models
# ABOUTME: Validates payload parsing, numeric coercion and the shared height and score fallbacks

from datetime import datetime, timezone

from surfcall.forecast.models import (
    Reading, UserPreference, effective_height, effective_score, parse_timeline,
)

TS = datetime(2025, 7, 9, 14, 0, tzinfo=timezone.utc)


class TestEffectiveValues:
    """Shared fallbacks for height and score"""

    def test_breaking_height_preferred(self):
        """Breaking height wins over swell height"""
        reading = Reading(timestamp=TS, breaking_wave_height_ft=3.2, dominant_swell_height_ft=5.0)
        assert effective_height(reading) == 3.2

    def test_swell_height_when_breaking_missing(self):
        """Swell height stands in for breaking height"""
        reading = Reading(timestamp=TS, dominant_swell_height_ft=5.0)
        assert effective_height(reading) == 5.0

    def test_default_height_when_both_missing(self):
        """Neither height gives 1.5ft"""
        assert effective_height(Reading(timestamp=TS)) == 1.5

    def test_zero_height_is_a_real_value(self):
        """0ft is data, not absence"""
        reading = Reading(timestamp=TS, breaking_wave_height_ft=0.0, dominant_swell_height_ft=2.0)
        assert effective_height(reading) == 0.0

    def test_score_fallbacks(self):
        """Quality, then probability, then 0"""
        assert effective_score(Reading(timestamp=TS, quality_score=66, probability_score=40)) == 66
        assert effective_score(Reading(timestamp=TS, probability_score=40)) == 40
        assert effective_score(Reading(timestamp=TS)) == 0


class TestReadingFromDict:
    """Parsing the forecast collaborator's payload"""

    def test_parses_camel_case_payload(self):
        """All known keys land on the matching fields"""
        reading = Reading.from_dict({
            "forecastTimestamp": "2025-07-09T14:00:00Z",
            "breakingWaveHeightFt": 3.5,
            "dominantSwellHeightFt": 2.8,
            "dominantSwellPeriodS": 9,
            "dominantSwellDirectionDeg": 150,
            "windSpeedMph": 8.5,
            "windDirectionDeg": 10,
            "windType": "Offshore",
            "tidePhase": "Rising",
            "qualityScore": 68,
            "secondarySwellHeightFt": "1.8",
            "secondarySwellPeriodS": 11,
        })

        assert reading.timestamp == TS
        assert reading.breaking_wave_height_ft == 3.5
        assert reading.dominant_swell_period_s == 9.0
        assert reading.wind_speed_mph == 8.5
        assert reading.wind_type == "offshore"
        assert reading.tide_phase == "rising"
        assert reading.quality_score == 68.0
        assert reading.secondary_swell_height_ft == 1.8

    def test_numeric_strings_are_coerced(self):
        """Database decimals arrive as strings"""
        reading = Reading.from_dict({"timestamp": "2025-07-09T14:00:00+00:00", "breakingWaveHeightFt": "4.25"})
        assert reading.breaking_wave_height_ft == 4.25

    def test_bad_numbers_become_none(self):
        """Garbage numbers fall back to the shared defaults"""
        reading = Reading.from_dict({"timestamp": TS, "breakingWaveHeightFt": "n/a", "qualityScore": ""})

        assert reading.breaking_wave_height_ft is None
        assert effective_height(reading) == 1.5
        assert effective_score(reading) == 0

    def test_wind_type_derived_from_bearing(self):
        """Missing wind type is classified from the bearing"""
        reading = Reading.from_dict({"timestamp": TS, "windDirectionDeg": 300})
        assert reading.wind_type == "side-offshore"

    def test_missing_wind_stays_missing(self):
        """No type and no bearing keeps wind type None, speed 0"""
        reading = Reading.from_dict({"timestamp": TS})

        assert reading.wind_type is None
        assert reading.wind_speed_mph == 0.0

    def test_missing_timestamp_returns_none(self):
        """Without a timestamp the payload is unusable"""
        assert Reading.from_dict({"breakingWaveHeightFt": 3}) is None

    def test_unparseable_timestamp_returns_none(self):
        """A broken timestamp is unusable"""
        assert Reading.from_dict({"timestamp": "yesterday-ish"}) is None


def test_parse_timeline_keeps_incomplete_entries():
    """Entries missing height/score stay; only timestamp-less ones drop"""
    timeline = parse_timeline([
        {"timestamp": "2025-07-10T12:00:00Z"},
        {"breakingWaveHeightFt": 3},
        {"timestamp": "2025-07-11T12:00:00Z", "qualityScore": 70},
    ])

    assert len(timeline) == 2
    assert effective_height(timeline[0]) == 1.5
    assert effective_score(timeline[1]) == 70


class TestUserPreference:
    """Profile payload parsing"""

    def test_from_dict_reads_fields(self):
        """Stored fields are used as-is"""
        prefs = UserPreference.from_dict({
            "homeBreak": "Long Beach",
            "minWaveHeightFt": "2.5",
            "windPreference": "OFFSHORE, WNW",
            "minQualityScore": 70,
        })

        assert prefs.home_break == "Long Beach"
        assert prefs.min_wave_height_ft == 2.5
        assert prefs.wind_preference == "OFFSHORE, WNW"
        assert prefs.min_quality_score == 70

    def test_from_dict_fills_defaults(self):
        """Unset fields take the configured defaults"""
        prefs = UserPreference.from_dict({})

        assert prefs.home_break == "lido"
        assert prefs.min_wave_height_ft == 3.0
        assert prefs.wind_preference == "ANY"
        assert prefs.min_quality_score == 60

    def test_zero_minimum_is_kept(self):
        """A 0ft minimum is a real setting"""
        prefs = UserPreference.from_dict({"minWaveHeightFt": 0})
        assert prefs.min_wave_height_ft == 0.0
