"""Runtime settings for locating the bridge configuration document."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_ENV_PREFIX = "BRIDGE_"

CONFIG_DIRNAME = "Terracord"
CONFIG_FILENAME = "terracord.xml"


def _prefixed(name: str) -> str:
    return f"{_ENV_PREFIX}{name}"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    save_path: Path = Field(
        Path("tshock"),
        validation_alias=AliasChoices(_prefixed("SAVE_PATH"), "SAVE_PATH"),
    )
    log_level: str = Field(
        "INFO",
        validation_alias=AliasChoices(_prefixed("LOG_LEVEL"), "LOG_LEVEL"),
    )

    @field_validator("save_path", mode="before")
    @classmethod
    def normalize_save_path(cls, value: str | Path) -> Path:
        if isinstance(value, str):
            value = value.strip()
            if not value:
                raise ValueError("SAVE_PATH must not be empty")
        return Path(value).expanduser()

    @property
    def config_dir(self) -> Path:
        """Directory owned by the bridge inside the server save path."""

        return self.save_path / CONFIG_DIRNAME

    @property
    def config_path(self) -> Path:
        return self.config_dir / CONFIG_FILENAME


def _settings_source(env_file: str | Path | None = None) -> Settings:
    return Settings(_env_file=env_file)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return _settings_source()


__all__ = [
    "CONFIG_DIRNAME",
    "CONFIG_FILENAME",
    "Settings",
    "get_settings",
]
