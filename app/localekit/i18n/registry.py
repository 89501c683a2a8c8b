"""Translator registry for managing per-locale translators.

The registry owns the locale -> Translator mapping, the default locale and
the list of available locales. All three are kept in one immutable snapshot:
initialization builds a new snapshot and swaps it in under a lock, while
lookups read the current snapshot reference without locking. Concurrent
initializations serialize and the last one wins; nothing is ever merged.
"""

import threading
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from localekit.i18n.exceptions import ConfigurationError, RegistryNotInitializedError
from localekit.i18n.loader import DictionaryLoader, JSONDictionaryLoader
from localekit.i18n.models import (
    DictionaryCollection,
    collection_locales,
    locale_list,
)
from localekit.i18n.translator import Translator
from localekit.logging import get_module_logger

logger = get_module_logger()

_EMPTY_TRANSLATOR = Translator()


@dataclass(frozen=True)
class RegistrySnapshot:
    """Immutable registry state produced by one initialization.

    Attributes:
        default_locale: Locale used when a requested locale is unknown.
        available_locales: Locales configured for this registry, in order.
        translators: Read-only mapping of locale to Translator.
    """

    default_locale: str
    available_locales: Tuple[str, ...]
    translators: Mapping[str, Translator] = field(
        default_factory=lambda: MappingProxyType({})
    )


class TranslatorRegistry:
    """Thread-safe owner of all translators.

    Usage:
        registry = TranslatorRegistry()
        registry.initialize_from_dictionaries("en", {"en": {...}, "cz": {...}})

        translator = registry.get_translator("cz")
        translator.t("form.login", "title")
    """

    def __init__(self):
        self._snapshot: Optional[RegistrySnapshot] = None
        self._lock = threading.Lock()

    def initialize_from_dictionaries(
        self,
        default_locale: str,
        collection: DictionaryCollection,
        locales: Optional[Sequence[str]] = None,
    ) -> None:
        """Initialize translators from an in-memory dictionary collection.

        Args:
            default_locale: Locale used when a requested one is unknown.
            collection: Mapping of locale -> section -> key -> template.
            locales: Locales to make available. Defaults to every locale in
                ``collection``. Listed locales missing from ``collection``
                stay available but get no translator.

        Raises:
            ConfigurationError: If ``collection`` has no dictionary for the
                default locale, no locales are available, or the default
                locale is not among the loaded translators.
        """
        if not collection or default_locale not in collection:
            logger.error("missing_default_dictionary", default_locale=default_locale)
            raise ConfigurationError(
                f"No dictionary for default locale '{default_locale}'"
            )

        available = locale_list(locales) or collection_locales(collection)
        if not available:
            logger.error("available_locales_not_set")
            raise ConfigurationError("Available locales not set")

        translators = {}
        for locale in available:
            if locale in collection:
                translators[locale] = Translator(collection[locale], locale)

        self._swap(default_locale, available, translators)

    def initialize_from_directory(
        self,
        default_locale: str,
        translations_dir: Path,
        locales: Optional[Sequence[str]] = None,
        loader: Optional[DictionaryLoader] = None,
    ) -> None:
        """Initialize translators from one dictionary file per locale.

        Args:
            default_locale: Locale used when a requested one is unknown.
            translations_dir: Directory containing ``<locale>.json`` files.
            locales: Locales to load. Defaults to every file in the directory.
            loader: Loader to read dictionaries with (default: JSON loader
                for ``translations_dir``).

        Raises:
            OSError: If the directory or a locale file cannot be read.
            DictionaryDecodeError: If a locale file is malformed.
            ConfigurationError: If no locales are available or the default
                locale has no dictionary.
        """
        loader = loader or JSONDictionaryLoader(translations_dir)
        available = locale_list(locales) or loader.discover_locales()
        if not available:
            logger.error(
                "available_locales_not_set", translations_dir=str(translations_dir)
            )
            raise ConfigurationError(
                f"No dictionaries found in {translations_dir}"
            )

        translators = {}
        for locale in available:
            translators[locale] = Translator(loader.load(locale), locale)

        self._swap(default_locale, available, translators)

    def _swap(self, default_locale, available, translators) -> None:
        if default_locale not in translators:
            logger.error(
                "missing_default_dictionary",
                default_locale=default_locale,
                locales=list(available),
            )
            raise ConfigurationError(
                f"No dictionary for default locale '{default_locale}'"
            )

        snapshot = RegistrySnapshot(
            default_locale=default_locale,
            available_locales=tuple(available),
            translators=MappingProxyType(dict(translators)),
        )
        with self._lock:
            self._snapshot = snapshot

        logger.info(
            "registry_initialized",
            default_locale=default_locale,
            locales=list(available),
            translator_count=len(translators),
        )

    def _current(self) -> RegistrySnapshot:
        snapshot = self._snapshot
        if snapshot is None:
            raise RegistryNotInitializedError("Translator registry not initialized")
        return snapshot

    def is_initialized(self) -> bool:
        return self._snapshot is not None

    def get_translator(self, locale: Optional[str]) -> Translator:
        """Return the translator for a locale.

        Falls back to the default locale's translator, then to the empty
        translator whose lookups all return ``"section.key"``.

        Raises:
            RegistryNotInitializedError: If called before initialization.
        """
        snapshot = self._current()
        translator = snapshot.translators.get(locale)
        if translator is not None:
            return translator

        translator = snapshot.translators.get(snapshot.default_locale)
        if translator is not None:
            return translator
        return _EMPTY_TRANSLATOR

    def available_locales(self) -> list:
        """Return the configured locales, in order."""
        return list(self._current().available_locales)

    def default_locale(self) -> str:
        return self._current().default_locale

    def reset(self) -> None:
        """Return the registry to the uninitialized state.

        Primarily used for testing.
        """
        with self._lock:
            self._snapshot = None
        logger.debug("registry_reset")


# Global registry instance
_global_registry: Optional[TranslatorRegistry] = None
_global_registry_lock = threading.Lock()


def get_registry() -> TranslatorRegistry:
    """Get the process-wide registry singleton, creating it on first call."""
    global _global_registry

    if _global_registry is None:
        with _global_registry_lock:
            if _global_registry is None:
                _global_registry = TranslatorRegistry()
                logger.debug("global_registry_created")

    return _global_registry


def initialize_from_dictionaries(
    default_locale: str,
    collection: DictionaryCollection,
    locales: Optional[Sequence[str]] = None,
) -> None:
    """Initialize the process-wide registry from a dictionary collection."""
    get_registry().initialize_from_dictionaries(default_locale, collection, locales)


def initialize_from_directory(
    default_locale: str,
    translations_dir: Path,
    locales: Optional[Sequence[str]] = None,
    loader: Optional[DictionaryLoader] = None,
) -> None:
    """Initialize the process-wide registry from a translations directory."""
    get_registry().initialize_from_directory(
        default_locale, translations_dir, locales, loader
    )


def get_translator(locale: Optional[str]) -> Translator:
    """Return a translator from the process-wide registry."""
    return get_registry().get_translator(locale)


def available_locales() -> list:
    return get_registry().available_locales()


def default_locale() -> str:
    return get_registry().default_locale()
