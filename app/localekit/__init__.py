"""localekit - dictionary-based translations and translatable errors.

Example:
    from localekit import get_translator, initialize_from_dictionaries, new_error

    initialize_from_dictionaries(
        "en",
        {
            "en": {"fields.errors": {"to_short": "Field too short"}},
            "cz": {"fields.errors": {"to_short": "Pole je příliš krátké"}},
        },
    )

    get_translator("cz").t("fields.errors", "to_short")
    new_error("fields.errors", "to_short").with_locale("en").serialize()
"""

from localekit.errors import (
    SUMMARY_FIELD,
    TranslatableError,
    TranslatableMultiError,
    new_default_multi_error,
    new_empty_multi_error,
    new_error,
    new_error_with_code,
    new_multi_error,
)
from localekit.i18n import (
    ConfigurationError,
    DictionaryDecodeError,
    LocalizationError,
    RegistryNotInitializedError,
    Translator,
    TranslatorRegistry,
    available_locales,
    default_locale,
    get_registry,
    get_translator,
    initialize_from_dictionaries,
    initialize_from_directory,
)
from localekit.i18n.service import LocalizationService

__all__ = [
    "SUMMARY_FIELD",
    "TranslatableError",
    "TranslatableMultiError",
    "new_default_multi_error",
    "new_empty_multi_error",
    "new_error",
    "new_error_with_code",
    "new_multi_error",
    "ConfigurationError",
    "DictionaryDecodeError",
    "LocalizationError",
    "RegistryNotInitializedError",
    "Translator",
    "TranslatorRegistry",
    "available_locales",
    "default_locale",
    "get_registry",
    "get_translator",
    "initialize_from_dictionaries",
    "initialize_from_directory",
    "LocalizationService",
]
