"""Data tooling configuration via environment variables."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class DatacheckSettings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FLIGHTCHORD_", env_file=".env", extra="ignore"
    )

    # Dataset layout
    data_dir: Path = Path("public/data")
    airports_subdir: str = "airports"
    airports_index_file: str = "airports.json"
    airlines_index_file: str = "airlines.json"
    manifest_file: str = "coverage.json"

    # Citation used when a carrier has no known timetable page
    placeholder_source_url: str = "https://example.com/verify-required"

    log_level: str = "INFO"


settings = DatacheckSettings()
