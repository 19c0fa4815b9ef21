"""
Core Module

Setting declarations, resolution, and the two usage modes:
schema mode (Builder -> Settings) and extraction mode (Extractor).
"""

from envsettings.core.declarations import (
    DEFAULT_DELIMITER, BaseSetting, StringSetting, BooleanSetting, NumberSetting,
    ListSetting, CustomSetting, SettingDeclaration,
)
from envsettings.core.resolver import resolve
from envsettings.core.container import Settings
from envsettings.core.builder import Builder, declare, load
from envsettings.core.extractor import Extractor, extract
from envsettings.core.schema import load_schema, parse_schema

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
]
