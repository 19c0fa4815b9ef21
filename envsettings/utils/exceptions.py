"""
Custom Exception Types

Specific exceptions for the settings loader.
"""

from typing import Optional


class EnvSettingsError(Exception):
    """Base exception for envsettings."""
    pass


class MissingSettingError(EnvSettingsError):
    """A required setting is absent from the source mapping."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"{key} must be set")


class UnknownKeyError(EnvSettingsError, KeyError):
    """
    Lookup of a key that was never declared.

    Also a KeyError so Mapping.get() and `in` keep working on the container.
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"{key} is not a configured env setting")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class SettingParseError(EnvSettingsError):
    """Raw value could not be coerced to the declared type."""

    def __init__(self, key: str, value: Optional[str], kind: str):
        self.key = key
        self.value = value
        self.kind = kind
        super().__init__(f"{key} is not a valid {kind}: {value!r}")


class SchemaError(EnvSettingsError):
    """Malformed settings schema document."""
    pass
