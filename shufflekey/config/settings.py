"""Runtime settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SHUFFLEKEY_", extra="ignore")

    app_name: str = "shufflekey"
    log_level: str = "info"
    # empty string disables the rotating file handler
    log_file: str = ""

    default_size: int = Field(default=100, ge=1)
    # comma separated registry names, concatenated in order
    default_character_sets: str = "tr,number"
    character_sets_path: str = "config/character_sets.yaml"

    # id redraws allowed per mapping object before the whole build is abandoned
    max_id_attempts: int = Field(default=1000, ge=1)
    # most recent diagnostics kept on each instance
    max_diagnostics: int = Field(default=100, ge=1)


settings = Settings()
