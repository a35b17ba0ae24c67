from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from verbump.schemas.rules import MatchMode


class Settings(BaseSettings):
    """Tool settings loaded from environment variables (.env)."""
    root: Path = Field(default=Path("."), alias="VERBUMP_ROOT")
    mode: MatchMode = Field(default=MatchMode.STRUCTURED, alias="VERBUMP_MODE")
    # Commit every file or none of them
    atomic: bool = Field(default=False, alias="VERBUMP_ATOMIC")
    dry_run: bool = Field(default=False, alias="VERBUMP_DRY_RUN")
    log_level: str = Field(default="INFO", alias="VERBUMP_LOG_LEVEL")

    # pydantic-settings v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

def get_settings() -> "Settings":
    return Settings()
