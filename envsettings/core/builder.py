"""
Settings Builder

Schema mode: declare every setting up front, then resolve them all at once
into a Settings container.
"""

import logging
import os
from typing import Callable, Dict, Mapping, Optional, Tuple

from envsettings.core.container import Settings
from envsettings.core.declarations import BaseSetting, SettingDeclaration, SettingFactory
from envsettings.core.resolver import resolve

logger = logging.getLogger(__name__)


class Builder(SettingFactory):
    """
    Accumulates setting declarations keyed by name.

    Declaring the same key twice keeps the later declaration (in the
    position of the first).

    Example:
        builder = Builder()
        builder.string('DATABASE_URL')
        builder.number('PORT', default=8080)
        settings = builder.load()
    """

    def __init__(self):
        self._declarations: Dict[str, BaseSetting] = {}

    def _accept(self, declaration: BaseSetting) -> BaseSetting:
        return self.add(declaration)

    def add(self, declaration: SettingDeclaration) -> SettingDeclaration:
        """Register a pre-built declaration and return it."""
        self._declarations[declaration.key] = declaration
        return declaration

    @property
    def declarations(self) -> Tuple[BaseSetting, ...]:
        return tuple(self._declarations.values())

    def __len__(self) -> int:
        return len(self._declarations)

    def __contains__(self, key) -> bool:
        return str(key) in self._declarations

    def load(self, source: Optional[Mapping[str, str]] = None) -> Settings:
        """
        Resolve every declared setting.

        Args:
            source: Key to raw string mapping. Default is os.environ

        Returns:
            Settings container in declaration order

        Raises:
            MissingSettingError: A required setting is absent (nothing is returned)
            SettingParseError: A number setting holds a non-numeric value
        """
        if source is None:
            source = os.environ

        values = {}
        for key, declaration in self._declarations.items():
            values[key] = resolve(declaration, source)

        logger.info(f"Loaded {len(values)} settings", extra={'count': len(values)})
        return Settings(values)

    extract = load


def declare(declare_fn: Callable[[Builder], object]) -> Builder:
    """
    Run a declaration callback against a fresh Builder.

    Args:
        declare_fn: Called once with the builder; its return value is ignored

    Returns:
        The populated Builder, ready to load() any number of sources
    """
    builder = Builder()
    declare_fn(builder)
    return builder


def load(
    declare_fn: Callable[[Builder], object],
    source: Optional[Mapping[str, str]] = None
) -> Settings:
    """
    Declare settings and resolve them in one step.

    Example:
        settings = load(lambda s: (
            s.string('API_TOKEN'),
            s.boolean('DEBUG'),
            s.list('ALLOWED_HOSTS', default=['localhost']),
        ))
        settings['DEBUG']
    """
    return declare(declare_fn).load(source)
