"""Defines the :class:`.LocaleRegistry` class, the named store of locales.

Formatting functions accept a registry handle so tests and embedding applications can keep
isolated sets of locales. Callers that omit it share the process-wide registry returned by
:func:`.getLocaleRegistry`.
"""

from __future__ import annotations

# Standard Library Imports
from threading import RLock
from typing import TYPE_CHECKING

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from ..common.exceptions import LocaleError
from ..common.logger import fabletimeLogDebug
from ..data.named_store import NamedStore
from .locale import Locale

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Final


LOCALE_KEY_PREFIX: Final[str] = "Locale:"
"""``str``: prefix of the named-store keys that hold serialized locales."""

DEFAULT_NAME_KEY: Final[str] = "DefaultLocale"
"""``str``: named-store key holding the default locale name."""


class LocaleRegistry:
    """CRUD access to locales persisted in a :class:`.NamedStore`.

    An empty or ``None`` locale name always resolves to the default locale name. Every access
    holds the registry lock, so readers never observe a partially written locale.
    """

    def __init__(self, store: NamedStore | None = None) -> None:
        """Construct a `LocaleRegistry` object.

        Args:
            store (:class:`.NamedStore`, optional): backing persistence. Defaults to ``None``,
                which creates a store from the ``[database]`` config section.
        """
        self.store = store if store is not None else NamedStore()
        self._lock = RLock()

    def getDefaultName(self) -> str:
        """Return the name used when callers omit a locale name."""
        with self._lock:
            name = self.store.getNamed(DEFAULT_NAME_KEY)
        return name or BehavioralConfig.getConfig().locale.DefaultLocale

    def setDefaultName(self, name: str) -> None:
        """Set the name used when callers omit a locale name.

        Raises:
            LocaleError: if `name` is empty.
        """
        if not name:
            raise LocaleError("Default locale name must not be empty")
        with self._lock:
            self.store.setNamed(DEFAULT_NAME_KEY, name)

    def resolveName(self, name: str | None) -> str:
        """Return `name`, or the default locale name if `name` is empty."""
        return name or self.getDefaultName()

    def getLocale(self, name: str | None = None, init: bool = True) -> Locale | None:
        """Return the locale stored under `name`.

        Args:
            name (``str``, optional): locale name. Defaults to the default locale name.
            init (``bool``, optional): whether to build a locale from config defaults when none
                is stored. The new locale is not saved. Defaults to ``True``.

        Returns:
            :class:`.Locale` | ``None``: the locale, or ``None`` if absent and `init` is false.
        """
        with self._lock:
            name = self.resolveName(name)
            stored = self.store.getNamed(LOCALE_KEY_PREFIX + name)

        if stored is not None:
            return Locale.fromJSON(name, stored)

        if init:
            fabletimeLogDebug(f"Locale {name!r} not stored, using defaults")
            return Locale.fromDefaults(name)

        return None

    def setLocale(self, locale: Locale, name: str | None = None) -> Locale:
        """Store `locale` under `name`.

        Args:
            locale (:class:`.Locale`): locale to store.
            name (``str``, optional): name to store it under. Defaults to the default locale name.

        Returns:
            :class:`.Locale`: the stored locale, renamed to the name it was stored under.
        """
        with self._lock:
            name = self.resolveName(name)
            if locale.name != name:
                locale = locale.rename(name)
            self.store.setNamed(LOCALE_KEY_PREFIX + name, locale.toJSON())
        return locale

    def deleteLocale(self, name: str | None = None) -> bool:
        """Remove the locale stored under `name`; returns whether one was removed."""
        with self._lock:
            return self.store.deleteNamed(LOCALE_KEY_PREFIX + self.resolveName(name))

    def hasLocale(self, name: str | None = None) -> bool:
        """Return whether a locale is stored under `name`."""
        with self._lock:
            return self.store.hasNamed(LOCALE_KEY_PREFIX + self.resolveName(name))

    def listLocales(self) -> list[str]:
        """Return the sorted names of every stored locale."""
        with self._lock:
            keys = self.store.listNamed(LOCALE_KEY_PREFIX)
        return [key[len(LOCALE_KEY_PREFIX) :] for key in keys]


_shared_registry: LocaleRegistry | None = None


def getLocaleRegistry() -> LocaleRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _shared_registry  # noqa: PLW0603
    if _shared_registry is None:
        _shared_registry = LocaleRegistry()
    return _shared_registry


def setLocaleRegistry(registry: LocaleRegistry | None) -> None:
    """Replace the process-wide registry; ``None`` makes the next access create a fresh one."""
    global _shared_registry  # noqa: PLW0603
    _shared_registry = registry


def getLocale(name: str | None = None, init: bool = True) -> Locale | None:
    """Return a locale from the process-wide registry, see :meth:`.LocaleRegistry.getLocale`."""
    return getLocaleRegistry().getLocale(name, init=init)


def setLocale(locale: Locale, name: str | None = None) -> Locale:
    """Store a locale in the process-wide registry, see :meth:`.LocaleRegistry.setLocale`."""
    return getLocaleRegistry().setLocale(locale, name)


def deleteLocale(name: str | None = None) -> bool:
    """Remove a locale from the process-wide registry."""
    return getLocaleRegistry().deleteLocale(name)


def hasLocale(name: str | None = None) -> bool:
    """Return whether the process-wide registry stores a locale under `name`."""
    return getLocaleRegistry().hasLocale(name)
