import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = "flight-itinerary-service"
    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)


class LoggingSettings(BaseModel):
    # YAML files use kebab-case keys ("default-level")
    model_config = ConfigDict(populate_by_name=True)

    default_level: str = Field(default="INFO", alias="default-level")

    @field_validator("default_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown logging level: {value!r}")
        return level


class Settings(BaseSettings):
    # Server
    server: ServerSettings = ServerSettings()

    # Logging
    logging: LoggingSettings = LoggingSettings()

    # ITINERARY_SERVER__PORT=9000, ITINERARY_LOGGING__DEFAULT_LEVEL=debug, ...
    model_config = SettingsConfigDict(
        env_prefix="ITINERARY_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )


def load_settings(config_file: str | Path | None = None) -> Settings:
    """
    Build the settings, optionally from a YAML file.

    Values found in the file win over environment variables; anything the
    file leaves out falls back to the environment and then to the defaults.
    """
    if config_file is None:
        return Settings()

    with open(config_file, encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{config_file}: expected a mapping at the top level")
    return Settings(**raw)


# Global instance used by the ASGI app when started through uvicorn directly
settings = Settings()
