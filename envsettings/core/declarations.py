"""
Setting Declarations

Frozen pydantic models describing one named, typed setting each, plus the
shared factory that Builder and Extractor expose to declaration callbacks.
"""

import re
from typing import Annotated, Any, Callable, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_DELIMITER = re.compile(r'\s*,\s*')


class _NotSet:
    """Marker for an option the caller did not pass."""

    def __repr__(self) -> str:
        return 'NOT_SET'


NOT_SET: Any = _NotSet()


class BaseSetting(BaseModel):
    """
    Common fields of every setting declaration.

    A declaration has a default exactly when `default` was passed explicitly
    (even as None); that is read from pydantic's model_fields_set.
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    key: str

    @field_validator('key', mode='before')
    @classmethod
    def canonical_key(cls, v):
        return str(v)

    @property
    def has_default(self) -> bool:
        return 'default' in self.model_fields_set

    @property
    def required(self) -> bool:
        """Whether resolution fails when the key is absent from the source."""
        return not self.has_default


class StringSetting(BaseSetting):
    """Raw string value, required unless a default is given."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    kind: Literal['string'] = 'string'
    default: Optional[str] = None


class BooleanSetting(BaseSetting):
    """Non-empty string is True; absent resolves to the default (False)."""

    kind: Literal['boolean'] = 'boolean'
    default: bool = False

    @property
    def required(self) -> bool:
        return False


class NumberSetting(BaseSetting):
    """Integer, or float when the raw value contains a decimal point."""

    kind: Literal['number'] = 'number'
    default: Optional[Union[int, float]] = None

    @field_validator('default', mode='before')
    @classmethod
    def reject_bool_default(cls, v):
        if isinstance(v, bool):
            raise ValueError("number default must be an int or float, not bool")
        return v


class ListSetting(BaseSetting):
    """Delimited string split into a list of strings."""

    kind: Literal['list'] = 'list'
    default: Optional[Tuple[str, ...]] = None
    delimiter: Union[str, re.Pattern[str]] = DEFAULT_DELIMITER

    @field_validator('delimiter')
    @classmethod
    def non_empty_delimiter(cls, v):
        if isinstance(v, str) and not v:
            raise ValueError("delimiter must not be empty")
        return v

    @property
    def required(self) -> bool:
        return False


class CustomSetting(BaseSetting):
    """Raw value (or None when absent) handed to a caller-supplied parser."""

    kind: Literal['custom'] = 'custom'
    parser: Callable[[Optional[str]], Any]

    @property
    def required(self) -> bool:
        return False


SettingDeclaration = Annotated[
    Union[StringSetting, BooleanSetting, NumberSetting, ListSetting, CustomSetting],
    Field(discriminator='kind'),
]


def _options(**options) -> dict:
    return {name: value for name, value in options.items() if value is not NOT_SET}


class SettingFactory:
    """
    The five declaration operations shared by Builder and Extractor.

    Subclasses decide what happens to each declaration in _accept():
    Builder registers it, Extractor resolves it on the spot.
    """

    def _accept(self, declaration: BaseSetting) -> Any:
        raise NotImplementedError

    def string(self, key, default: Optional[str] = NOT_SET) -> Any:
        return self._accept(StringSetting(**_options(key=key, default=default)))

    def boolean(self, key, default: bool = NOT_SET) -> Any:
        return self._accept(BooleanSetting(**_options(key=key, default=default)))

    def number(self, key, default: Optional[Union[int, float]] = NOT_SET) -> Any:
        return self._accept(NumberSetting(**_options(key=key, default=default)))

    def custom(self, key, parser: Callable[[Optional[str]], Any]) -> Any:
        return self._accept(CustomSetting(key=key, parser=parser))

    def list(
        self,
        key,
        default: Optional[List[str]] = NOT_SET,
        delimiter: Union[str, re.Pattern[str]] = NOT_SET
    ) -> Any:
        return self._accept(
            ListSetting(**_options(key=key, default=default, delimiter=delimiter))
        )
