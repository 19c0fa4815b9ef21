"""
envsettings

Declarative environment-variable settings: declare typed settings, resolve
them against os.environ (or any mapping), get an immutable lookup back.

    from envsettings import load

    settings = load(lambda s: (
        s.string('DATABASE_URL'),
        s.boolean('DEBUG'),
        s.number('PORT', default=8080),
        s.list('ALLOWED_HOSTS', default=['localhost']),
    ))
"""

from envsettings.core import (
    DEFAULT_DELIMITER, BaseSetting, StringSetting, BooleanSetting, NumberSetting,
    ListSetting, CustomSetting, SettingDeclaration, resolve, Settings, Builder,
    declare, load, Extractor, extract, load_schema, parse_schema,
)
from envsettings.utils.exceptions import (
    EnvSettingsError, MissingSettingError, UnknownKeyError, SettingParseError, SchemaError,
)

__version__ = '1.0.0'

__all__ = [
    'DEFAULT_DELIMITER',
    'BaseSetting',
    'StringSetting',
    'BooleanSetting',
    'NumberSetting',
    'ListSetting',
    'CustomSetting',
    'SettingDeclaration',
    'resolve',
    'Settings',
    'Builder',
    'declare',
    'load',
    'Extractor',
    'extract',
    'load_schema',
    'parse_schema',
    'EnvSettingsError',
    'MissingSettingError',
    'UnknownKeyError',
    'SettingParseError',
    'SchemaError',
]
