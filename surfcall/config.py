# ABOUTME: Engine configuration including forecast horizon, timezone and default preferences
# ABOUTME: Centralized config read from the environment so deployments can tune the engine

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Engine configuration"""

    # Region: western Long Island (Lido, Long Beach, Rockaway)
    REGION_NAME = "Western Long Island, NY"
    LOCAL_TIMEZONE = os.getenv("LOCAL_TIMEZONE", "America/New_York")

    # Forecast window handed to us by the forecast collaborator
    FORECAST_HORIZON_HOURS = int(os.getenv("FORECAST_HORIZON_HOURS", "168"))  # 7 days

    # How often the collaborator refreshes readings (we never poll ourselves)
    POLL_INTERVAL_MINUTES = int(os.getenv("POLL_INTERVAL_MINUTES", "30"))

    # A timeline point older than this is not "current conditions"
    CURRENT_CONDITIONS_MAX_AGE_MINUTES = int(os.getenv("CURRENT_CONDITIONS_MAX_AGE_MINUTES", "60"))

    # Height used when a reading has neither breaking nor swell height
    DEFAULT_HEIGHT_FT = 1.5

    # Profile defaults for users who never touched their settings
    DEFAULT_MIN_WAVE_HEIGHT_FT = 3.0
    DEFAULT_WIND_PREFERENCE = "ANY"
    DEFAULT_MIN_QUALITY_SCORE = 60
    DEFAULT_HOME_BREAK = "lido"

    # Debug mode
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"
