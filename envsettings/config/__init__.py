"""
Configuration Module

Logging configuration for the loader, read from ENVSETTINGS_LOG_* variables.
"""

from envsettings.config.settings import LoggingConfig, load_logging_config, setup_logging_from_env

__all__ = ['LoggingConfig', 'load_logging_config', 'setup_logging_from_env']
