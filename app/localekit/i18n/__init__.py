"""i18n system - dictionaries, translators and the translator registry.

Main components:
- models: Dictionary types and validation
- loader: DictionaryLoader with JSON and YAML implementations
- translator: Translator bound to one locale's dictionary
- registry: TranslatorRegistry and the process-wide default registry
- exceptions: LocalizationError hierarchy
"""

from localekit.i18n.exceptions import (
    ConfigurationError,
    DictionaryDecodeError,
    LocalizationError,
    RegistryNotInitializedError,
    TranslatedError,
)
from localekit.i18n.loader import (
    DictionaryLoader,
    JSONDictionaryLoader,
    YAMLDictionaryLoader,
    create_loader,
)
from localekit.i18n.models import (
    Dictionary,
    DictionaryCollection,
    DictionaryEntry,
    TranslationKey,
    Values,
)
from localekit.i18n.registry import (
    TranslatorRegistry,
    available_locales,
    default_locale,
    get_registry,
    get_translator,
    initialize_from_dictionaries,
    initialize_from_directory,
)
from localekit.i18n.translator import Translator

__all__ = [
    "ConfigurationError",
    "DictionaryDecodeError",
    "LocalizationError",
    "RegistryNotInitializedError",
    "TranslatedError",
    "DictionaryLoader",
    "JSONDictionaryLoader",
    "YAMLDictionaryLoader",
    "create_loader",
    "Dictionary",
    "DictionaryCollection",
    "DictionaryEntry",
    "TranslationKey",
    "Values",
    "TranslatorRegistry",
    "available_locales",
    "default_locale",
    "get_registry",
    "get_translator",
    "initialize_from_dictionaries",
    "initialize_from_directory",
    "Translator",
]
