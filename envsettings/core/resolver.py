"""
Setting Resolution

Turns a declaration plus a source mapping into a typed value. Every kind goes
through the string rule for presence and default handling first.
"""

import logging
from typing import Any, Mapping

from envsettings.core.declarations import BaseSetting
from envsettings.utils.exceptions import MissingSettingError, SettingParseError

logger = logging.getLogger(__name__)

_NO_DEFAULT = object()

# Sentinel used for a boolean default of True; any non-empty string works
_TRUE_SENTINEL = 'yes'


def resolve_string(key: str, source: Mapping[str, str], default: Any = _NO_DEFAULT) -> Any:
    """
    Fetch the raw value for `key`.

    Args:
        key: Setting key
        source: Key to raw string mapping
        default: Returned when the key is absent; omit to make the key required

    Returns:
        Raw string from the source, or the default

    Raises:
        MissingSettingError: If the key is absent and no default was given
    """
    if key in source:
        logger.debug(f"Resolved {key} from source", extra={'setting': key, 'origin': 'source'})
        return source[key]

    if default is _NO_DEFAULT:
        raise MissingSettingError(key)

    logger.debug(f"Resolved {key} from default", extra={'setting': key, 'origin': 'default'})
    return default


def parse_number(key: str, raw: str):
    """Parse as float when `raw` contains a decimal point, else as int."""
    try:
        if '.' in raw:
            return float(raw)
        return int(raw)
    except ValueError:
        raise SettingParseError(key, raw, 'number') from None


def resolve(declaration: BaseSetting, source: Mapping[str, str]) -> Any:
    """
    Resolve one declaration against a source mapping.

    Args:
        declaration: Any of the five setting declarations
        source: Key to raw string mapping

    Returns:
        Typed value for the declaration's kind

    Raises:
        MissingSettingError: Required string/number setting is absent
        SettingParseError: Number setting holds a non-numeric value
    """
    key = declaration.key
    kind = declaration.kind

    if kind == 'string':
        default = declaration.default if declaration.has_default else _NO_DEFAULT
        return resolve_string(key, source, default)

    elif kind == 'boolean':
        raw = resolve_string(key, source, _TRUE_SENTINEL if declaration.default else '')
        return len(raw) > 0

    elif kind == 'number':
        default = declaration.default if declaration.has_default else _NO_DEFAULT
        raw = resolve_string(key, source, default)
        # Declared defaults are already numbers (or None)
        if not isinstance(raw, str):
            return raw
        return parse_number(key, raw)

    elif kind == 'list':
        raw = resolve_string(key, source, '')
        if raw == '':
            return list(declaration.default or ())

        delimiter = declaration.delimiter
        if isinstance(delimiter, str):
            return raw.split(delimiter)
        return delimiter.split(raw)

    elif kind == 'custom':
        raw = resolve_string(key, source, None)
        return declaration.parser(raw)

    raise ValueError(f"Unknown setting kind: {kind}")
