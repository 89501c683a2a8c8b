"""Custom exceptions for the i18n system.

Lookup misses are not represented here: a missing ``(section, key)`` always
resolves to the literal ``"section.key"`` string instead of raising.
"""


class LocalizationError(Exception):
    """Base exception for all localization errors.

    Example:
        try:
            registry.initialize_from_directory("en", path)
        except LocalizationError as e:
            logger.error("localization_error", error=str(e))
    """

    pass


class ConfigurationError(LocalizationError, ValueError):
    """Raised when dictionaries cannot produce a valid registry.

    Example:
        >>> registry.initialize_from_dictionaries("de", {"en": {}})
        Traceback (most recent call last):
        ...
        ConfigurationError: No dictionary for default locale 'de'
    """

    pass


class DictionaryDecodeError(LocalizationError, ValueError):
    """Raised when a dictionary file is not a valid section/key/template mapping."""

    pass


class RegistryNotInitializedError(LocalizationError, RuntimeError):
    """Raised when the registry is used before a successful initialization.

    This is a programming error, not a data error: initialize the registry at
    startup before serving any lookups.
    """

    pass


class TranslatedError(Exception):
    """Plain error carrying an already translated message.

    Returned by ``Translator.err_t``/``err_tf`` where callers need an
    exception instead of a string.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
