"""
Package Configuration

The loader's own logging configuration, read from the environment with the
loader itself.
"""

from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from envsettings.core.extractor import Extractor, extract
from envsettings.utils.logger import setup_logging


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field('INFO', description="Log level")
    format: str = Field('json', description="Log format (json or text)")
    file: Optional[str] = Field(None, description="Log file path")
    max_bytes: int = Field(10485760, ge=1024, description="Max log file size")
    backup_count: int = Field(5, ge=1, le=20, description="Number of backup log files")
    console: bool = Field(True, description="Log to console")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator('format')
    @classmethod
    def validate_format(cls, v):
        valid_formats = ['json', 'text']
        if v.lower() not in valid_formats:
            raise ValueError(f"Invalid log format: {v}. Must be one of {valid_formats}")
        return v.lower()


def _logging_config(e: Extractor) -> LoggingConfig:
    return LoggingConfig(
        level=e.string('ENVSETTINGS_LOG_LEVEL', default='INFO'),
        format=e.string('ENVSETTINGS_LOG_FORMAT', default='json'),
        file=e.string('ENVSETTINGS_LOG_FILE', default=None) or None,
        max_bytes=e.number('ENVSETTINGS_LOG_MAX_BYTES', default=10485760),
        backup_count=e.number('ENVSETTINGS_LOG_BACKUP_COUNT', default=5),
        console=e.boolean('ENVSETTINGS_LOG_CONSOLE', default=True),
    )


def load_logging_config(source: Optional[Mapping[str, str]] = None) -> LoggingConfig:
    """
    Load logging configuration from ENVSETTINGS_LOG_* variables.

    Args:
        source: Key to raw string mapping. Default is os.environ

    Returns:
        Validated LoggingConfig

    Raises:
        SettingParseError: If a numeric variable is not a number
        ValidationError: If a value is out of range or unknown
    """
    return extract(_logging_config, source)


def setup_logging_from_env(source: Optional[Mapping[str, str]] = None) -> LoggingConfig:
    """
    Configure the envsettings package logger from ENVSETTINGS_LOG_* variables.

    Handlers go on the `envsettings` logger only; the root logger is untouched.

    Returns:
        The LoggingConfig that was applied
    """
    config = load_logging_config(source)
    setup_logging(
        level=config.level,
        log_file=config.file,
        max_bytes=config.max_bytes,
        backup_count=config.backup_count,
        format_type=config.format,
        console=config.console,
    )
    return config
