"""
Environment-driven configuration.

BranchlogSettings reads ``BRANCHLOG_*`` variables (and a ``.env`` file when
present); apply_settings installs the matching default writer and logger
levels on a LoggingManager.
"""

import sys
from typing import TYPE_CHECKING, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants import DEFAULT_WRITER_NAME, ENV_PREFIX, OUTPUT_FORMATS
from ..exceptions.config import ConfigurationError
from ..formatters import StructuredFormatter
from ..levels import Level, parse_level
from ..writers.registry import Writer
from ..writers.rich import RichWriter
from ..writers.simple import SimpleWriter
from .parser import parse_config_string

if TYPE_CHECKING:
    from ..manager import LoggingManager


class BranchlogSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    loggers: Optional[str] = Field(
        None, description="Logger specification, e.g. '<root>=INFO,app.db=DEBUG'"
    )
    writer_level: Level = Field(
        Level.TRACE, description="Minimum level accepted by the default writer"
    )
    format: str = Field("default", description="Default writer format: default, json, rich")
    service_name: Optional[str] = Field(
        None, description="Service name added to json output"
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("loggers")
    @classmethod
    def validate_loggers(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            try:
                parse_config_string(v)
            except ConfigurationError as e:
                raise ValueError(str(e)) from e
        return v

    @field_validator("writer_level", mode="before")
    @classmethod
    def validate_writer_level(cls, v):
        if isinstance(v, str):
            return parse_level(v)
        return v

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"format must be one of: {', '.join(OUTPUT_FORMATS)}")
        return v


def create_writer(settings: BranchlogSettings) -> Writer:
    """Build the default writer described by ``settings``."""
    if settings.format == "rich":
        return RichWriter()
    if settings.format == "json":
        return SimpleWriter(sys.stderr, StructuredFormatter(settings.service_name))
    return SimpleWriter(sys.stderr)


def apply_settings(
    settings: Optional[BranchlogSettings] = None,
    manager: Optional["LoggingManager"] = None,
) -> "LoggingManager":
    """Configure ``manager`` (the global one by default) from settings."""
    if manager is None:
        from ..manager import logging_manager

        manager = logging_manager
    if settings is None:
        settings = BranchlogSettings()

    manager.writers.install(
        DEFAULT_WRITER_NAME, create_writer(settings), settings.writer_level
    )

    if settings.loggers:
        manager.configure_loggers(settings.loggers)
    return manager
