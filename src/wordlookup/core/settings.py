# src/wordlookup/core/settings.py
"""
Configuration: Settings.toml in the working directory, overridden by WORD_* env vars.
"""

from pathlib import Path
from typing import Optional

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from wordlookup.core.wordsapi import BASE_URL


SETTINGS_FILE = "Settings.toml"
ENV_PREFIX = "WORD_"


class Settings(BaseSettings):
    token: Optional[str] = None
    cache_dir: Optional[Path] = None
    api_url: str = BASE_URL
    timeout: float = 30.0

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        toml_file=SETTINGS_FILE,
        frozen=True,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # first wins: explicit values, then environment, then the file
        return (init_settings, env_settings, TomlConfigSettingsSource(settings_cls))


def load_settings(token: str | None = None) -> Settings:
    """Build settings once per run. A non-empty token argument beats the configured one."""
    if token:
        return Settings(token=token)
    return Settings()
