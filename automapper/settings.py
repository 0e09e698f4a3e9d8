"""Mapper and application settings."""
import os
from dataclasses import dataclass


def _env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class MapperSettings:
    """Mapping engine policies."""

    strict_from_property: bool = False  # Missing from_property source -> SourceMemberMissing
    skip_constructor: bool = False  # Default construction policy for destinations

    @classmethod
    def from_env(cls) -> "MapperSettings":
        """Load settings from environment variables."""
        return cls(
            strict_from_property=_env_flag("AUTOMAPPER_STRICT_FROM_PROPERTY"),
            skip_constructor=_env_flag("AUTOMAPPER_SKIP_CONSTRUCTOR"),
        )


@dataclass
class AppConfig:
    """Command line tool configuration."""

    log_level: str = "WARNING"
    mapper: MapperSettings = None

    def __post_init__(self):
        """Initialize default values."""
        if self.mapper is None:
            self.mapper = MapperSettings.from_env()

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load configuration from environment variables."""
        return cls(
            log_level=os.getenv("AUTOMAPPER_LOG_LEVEL", "WARNING").upper(),
            mapper=MapperSettings.from_env(),
        )
