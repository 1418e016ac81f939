"""Runtime settings using pydantic-settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_EXPORT_PREFIX = "davinci_transcript"
DEFAULT_LOG_LEVEL = "INFO"


class Settings(BaseSettings):
    """Export and logging settings, overridable with SPEAKERSCRIPT_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="SPEAKERSCRIPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    export_prefix: str = DEFAULT_EXPORT_PREFIX
    export_dir: str = "."
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()
