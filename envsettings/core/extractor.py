"""
Inline Extraction

Extraction mode: each call resolves one setting immediately and returns the
typed value, for assembling any structure straight from the environment.
"""

import os
from typing import Any, Callable, Mapping, Optional, TypeVar

from envsettings.core.declarations import BaseSetting, SettingFactory
from envsettings.core.resolver import resolve

T = TypeVar('T')


class Extractor(SettingFactory):
    """Resolver bound to one source mapping."""

    def __init__(self, source: Optional[Mapping[str, str]] = None):
        self._source = os.environ if source is None else source

    @property
    def source(self) -> Mapping[str, str]:
        return self._source

    def _accept(self, declaration: BaseSetting) -> Any:
        return resolve(declaration, self._source)


def extract(
    extract_fn: Callable[[Extractor], T],
    source: Optional[Mapping[str, str]] = None
) -> T:
    """
    Build a value directly from settings.

    Args:
        extract_fn: Called once with an Extractor; whatever it returns is returned
        source: Key to raw string mapping. Default is os.environ

    Returns:
        The callback's return value, unchanged

    Example:
        config = extract(lambda e: {
            'name': e.string('APP_NAME'),
            'workers': e.number('APP_WORKERS', default=4),
        })
    """
    return extract_fn(Extractor(source))
