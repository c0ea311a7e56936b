"""Named factory registries that can be extended by entry points.

Classes:
* Registry - a ``dict`` of name to factory, with registration helpers and entry point loading.

Functions:
* implements - build a check for entry points that must provide certain methods.
* pretty_name - turn an entry point into a "Nice Name (package)" display name.
"""
from __future__ import annotations

import logging
import re

from importlib.metadata import entry_points
from types import ModuleType
from typing import overload, TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping
    from importlib.metadata import EntryPoint

_logger = logging.getLogger(__name__)


def implements(*methods: str) -> Callable[[object], bool]:
    """Create a check that accepts factories whose products have all of ``methods``.

    Classes are checked for the methods directly. Other callables (functions,
    ``functools.partial`` objects) cannot be inspected without calling them,
    so they are accepted as is. Modules and non-callables are rejected.

    >>> is_sized = implements('__len__')
    >>> is_sized(list), is_sized(int), is_sized(len), is_sized(5)
    (True, False, True, False)
    """
    def _check(factory: object) -> bool:
        if isinstance(factory, ModuleType) or not callable(factory):
            return False
        if isinstance(factory, type):
            return all(callable(getattr(factory, method, None)) for method in methods)
        return True

    return _check


def pretty_name(entry: EntryPoint) -> str:
    """Name an entry point by its capitalized name and the package that provides it.

    >>> from importlib.metadata import EntryPoint
    >>> pretty_name(EntryPoint('spiral_runner', 'mazebots.spiral:SpiralRunner', 'robomaze.controller'))
    'Spiral Runner (mazebots)'
    """
    def capitalize_match(m: re.Match[str]) -> str:
        return m.group().capitalize()

    name = re.sub(r'\w+', capitalize_match, entry.name.replace('_', ' '))
    package = m.group() if (m := re.match(r'[^:.]+', entry.value)) else entry.value
    return f"{name} ({package})"


class Registry[T](dict[str, T]):
    """A registry of named factories.

    Besides the entries it is created with, factories are added with ``register``
    or loaded from the entry points of ``group`` with ``load_entry_points``.
    """

    def __init__(
            self,
            group: str,
            entries: Mapping[str, T] | Iterable[tuple[str, T]] = (),
            *,
            check: Callable[[object], bool] = callable,
            naming: Callable[[EntryPoint], str] = pretty_name,
    ) -> None:
        """Create a registry.

        Args:
            group (str): The entry point group plugins register in.
            entries (Mapping[str, T] | Iterable[tuple[str, T]], optional): The initial entries. Defaults to none.
            check (Callable[[object], bool], optional):
                Decides whether a loaded entry point is a usable factory. Defaults to ``callable``.
            naming (Callable[[EntryPoint], str], optional):
                Names the loaded entry points. Defaults to ``pretty_name``.
        """
        super().__init__(entries)
        self.group = group
        self._check = check
        self._naming = naming
        self._loaded = False

    @overload
    def register(self, name: str, factory: T) -> T: ...
    @overload
    def register(self, name: str, factory: None = None) -> Callable[[T], T]: ...

    def register(self, name: str, factory: T | None = None) -> T | Callable[[T], T]:
        """Register a factory under ``name``, replacing any previous factory with that name.

        Args:
            name (str): The name used to select the factory.
            factory (T | None, optional):
                The factory (usually a class). If omitted, a decorator that registers
                the decorated factory is returned instead. Defaults to None.

        Returns:
            T | Callable[[T], T]: ``factory`` if it is not ``None``, otherwise a decorator
            that accepts a factory, registers it and returns it.

        >>> shapes = Registry[type]('shapes.group')
        >>> shapes.register('square', int)
        <class 'int'>
        >>> @shapes.register('circle')
        ... class Circle:
        ...     pass
        >>> sorted(shapes)
        ['circle', 'square']
        """
        def _decorator(factory: T) -> T:
            if name in self:
                _logger.debug("%s: replacing %r", self.group, name)
            self[name] = factory
            return factory

        if factory is None:
            return _decorator
        return _decorator(factory)

    def load_entry_points(self) -> list[str]:
        """Register every usable factory from the entry points of ``group``.

        Entry points that fail to load or do not pass the check are logged and skipped.
        Only the first call loads anything.

        Returns:
            list[str]: The names that were registered.
        """
        if self._loaded:
            return []
        self._loaded = True

        loaded = []
        for entry in entry_points(group=self.group):
            try:
                factory = entry.load()
            except (AttributeError, ImportError) as err:
                _logger.warning("%s: failed to load %s: %s", self.group, entry.name, err)
                continue
            if not self._check(factory):
                _logger.warning("%s: %s (%s) is not a usable factory, skipping", self.group, entry.name, entry.value)
                continue
            name = self._naming(entry)
            self.register(name, factory)
            loaded.append(name)
        _logger.debug("%s: loaded %d entry points", self.group, len(loaded))
        return loaded
