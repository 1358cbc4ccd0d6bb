"""Settings for the libsystem tooling."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
import tomllib

from .config_parser import MAX_SECTIONS


class LoggingConfig(BaseModel):
    """Logging configuration settings."""

    # Logging severity threshold (INFO/DEBUG/etc.).
    level: str = Field(default="INFO", description="Logging level")
    # Emit JSON if True; otherwise emit a human-readable format.
    json_output: bool = Field(default=True, description="Emit JSON logs")
    # Optional file path for log output; if None, logs go to stderr.
    log_file: str | None = Field(default=None, description="Optional log file path")
    max_bytes: int = Field(default=1_000_000, description="Max log file size before rotation")
    backup_count: int = Field(default=3, description="Number of rotated log files to keep")


class ParserConfig(BaseModel):
    """Limits applied when scanning configuration files."""

    # None lifts the section table capacity entirely.
    max_sections: int | None = Field(default=MAX_SECTIONS, ge=1, description="Distinct sections allowed per file")


class LibsystemSettings(BaseSettings):
    """Configuration settings loaded from env or optional TOML."""

    # Environment keys use LIBSYSTEM_ prefix and "__" nesting.
    model_config = SettingsConfigDict(env_prefix="LIBSYSTEM_", env_nested_delimiter="__", extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)

    @classmethod
    def from_toml(cls, path: str | Path) -> "LibsystemSettings":
        data = tomllib.loads(Path(path).read_text())
        return cls(**data)
