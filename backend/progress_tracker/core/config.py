from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Directory holding goals.json, habits.json and daily_logs.json
    data_dir: Path = Path.home() / ".progresstracker"
    # Timezone used to decide which calendar day a timestamp falls on.
    # Examples: "America/New_York", "Europe/London", or "local" to use system tz.
    timezone: str = "local"
    # How many entries the recent activity feed shows by default
    recent_activity_limit: int = 10
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="PROGRESS_TRACKER_", env_file=".env")

    # Allow empty env strings to fall back to defaults
    @field_validator("timezone", mode="before")
    @classmethod
    def _empty_tz_to_local(cls, v):
        if v in ("", None, "null", "None"):
            return "local"
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v):
        if v in ("", None):
            return "WARNING"
        return str(v).upper()

    @field_validator("data_dir", mode="after")
    @classmethod
    def _expand_user(cls, v: Path) -> Path:
        return v.expanduser()


settings = Settings()
