from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    database_url: str = "sqlite:///./study_time.db"

    # Storage keys for the two persisted blobs
    records_key: str = "records"
    goal_key: str = "goal"

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None  # console only when unset

    chart_title: str = "Weekly study hours"

    # Allow empty env strings for optional fields
    @field_validator("log_file", mode="before")
    @classmethod
    def _empty_to_none(cls, v):
        if v in ("", None, "null", "None"):
            return None
        return v

    class Config:
        env_file = ".env"


settings = Settings()
