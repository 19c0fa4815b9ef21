"""
Utility Modules

Common utilities for the settings loader.

Modules:
    - logger: Structured logging setup
    - exceptions: Custom exception types
"""

from envsettings.utils.logger import get_logger, setup_logging
from envsettings.utils.exceptions import *

__all__ = [
    'get_logger',
    'setup_logging',
    'EnvSettingsError',
    'MissingSettingError',
    'UnknownKeyError',
    'SettingParseError',
    'SchemaError',
]
