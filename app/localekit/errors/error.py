"""Translatable error carrying a section/key identity instead of a message.

The human-readable message is resolved only when a locale is known: either
explicitly through ``render()``/``t()``, or during ``serialize()`` when the
error carries its own locale.

Usage:
    def register(name):
        if len(name) < 3:
            raise new_error_with_code(400, "fields.errors", "to_short")

    try:
        register("ab")
    except TranslatableError as err:
        payload = {"error": err.with_locale(request_locale).serialize()}
"""

import json
from typing import Any, Dict, Optional, Union

from localekit.errors.message import ErrorMessage, first_values
from localekit.i18n.exceptions import TranslatedError
from localekit.i18n.models import Values
from localekit.i18n.registry import TranslatorRegistry, get_registry
from localekit.i18n.translator import Translator


class TranslatableError(Exception):
    """Error identified by a dictionary section and key.

    ``str(err)`` is the locale-independent identity ``"section.key"``; the
    translated message comes from a Translator. Setters mutate in place and
    ``with_*`` builders mutate in place and return the same instance, so any
    alias of the error observes the change.

    Attributes:
        code: Status code, 0 when unset.
        section: Dictionary section.
        key: Template key within the section.
        values: Substitution values for formatted output.
        locale: Explicit locale used by ``serialize()``, None when unset.
    """

    def __init__(
        self,
        section: str = "",
        key: str = "",
        *values: Optional[Values],
        code: int = 0,
        locale: Optional[str] = None,
    ):
        super().__init__()
        self._message = ErrorMessage(section, key, first_values(values))
        self._code = code
        self._locale = locale

    def __str__(self) -> str:
        return self._message.identity()

    def __repr__(self) -> str:
        return (
            f"TranslatableError(section={self.section!r}, key={self.key!r}, "
            f"code={self._code!r}, locale={self._locale!r})"
        )

    @property
    def code(self) -> int:
        return self._code

    @property
    def section(self) -> str:
        return self._message.section

    @property
    def key(self) -> str:
        return self._message.key

    @property
    def values(self) -> Optional[Dict[str, Any]]:
        return self._message.values

    @property
    def locale(self) -> Optional[str]:
        return self._locale

    @property
    def message(self) -> ErrorMessage:
        """The underlying section/key/values payload."""
        return self._message

    # Setters

    def set_code(self, code: int) -> None:
        """Set status code, e.g. ``err.set_code(HTTPStatus.BAD_REQUEST)``."""
        self._code = code

    def set_section(self, section: str) -> None:
        self._message.section = section

    def set_key(self, key: str) -> None:
        self._message.key = key

    def set_values(self, values: Optional[Values]) -> None:
        self._message.values = dict(values) if values is not None else None

    def set_locale(self, locale: Optional[str]) -> None:
        self._locale = locale

    # Builders

    def with_code(self, code: int) -> "TranslatableError":
        self.set_code(code)
        return self

    def with_section(self, section: str) -> "TranslatableError":
        self.set_section(section)
        return self

    def with_key(self, key: str) -> "TranslatableError":
        self.set_key(key)
        return self

    def with_values(self, values: Optional[Values]) -> "TranslatableError":
        self.set_values(values)
        return self

    def with_locale(self, locale: Optional[str]) -> "TranslatableError":
        self.set_locale(locale)
        return self

    # Translation with an explicit translator

    def t(self, translator: Translator) -> str:
        return translator.t(self.section, self.key)

    def tf(self, translator: Translator) -> str:
        return translator.tf(self.section, self.key, self.values)

    def err_t(self, translator: Translator) -> TranslatedError:
        return translator.err_t(self.section, self.key)

    def err_tf(self, translator: Translator) -> TranslatedError:
        return translator.err_tf(self.section, self.key, self.values)

    def render(
        self,
        locale: Optional[str] = None,
        registry: Optional[TranslatorRegistry] = None,
    ) -> str:
        """Resolve the human message through a registry.

        Args:
            locale: Locale to translate to. Defaults to the error's own
                locale, then to the registry's default locale.
            registry: Registry to take the translator from (default: the
                process-wide registry).

        Returns:
            Translated message, formatted when values are present.

        Raises:
            RegistryNotInitializedError: If the registry was never initialized.
        """
        registry = registry or get_registry()
        translator = registry.get_translator(locale or self._locale)
        return self._message.translate(translator)

    def is_empty(self) -> bool:
        """True when neither section nor key is set."""
        return self._message.is_empty()

    def serialize(
        self, registry: Optional[TranslatorRegistry] = None
    ) -> Union[None, str, Dict[str, str]]:
        """Return the interchange value of this error.

        - ``None`` when the error has no section and no key;
        - the translated message when an explicit locale is set;
        - ``{section: key}`` otherwise.
        """
        if self.is_empty():
            return None
        if self._locale:
            return self.render(self._locale, registry)
        return self._message.to_dict()

    def to_json(self, registry: Optional[TranslatorRegistry] = None) -> str:
        return json.dumps(
            self.serialize(registry), ensure_ascii=False, separators=(",", ":")
        )

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "TranslatableError":
        """Rebuild an error from its ``{section: key}`` identity form.

        ``None`` yields an empty error.

        Raises:
            ValueError: If data is not a single ``{section: key}`` pair.
        """
        if data is None:
            return cls()
        message = ErrorMessage.from_dict(data)
        return cls(message.section, message.key)


def new_error(section: str, key: str, *values: Optional[Values]) -> TranslatableError:
    """Create a TranslatableError; only the first values mapping is kept."""
    return TranslatableError(section, key, *values)


def new_error_with_code(
    code: int, section: str, key: str, *values: Optional[Values]
) -> TranslatableError:
    """Create a TranslatableError with a status code."""
    return TranslatableError(section, key, *values, code=code)


def serialize_error(
    err: Optional[TranslatableError], registry: Optional[TranslatorRegistry] = None
) -> Union[None, str, Dict[str, str]]:
    """Serialize an optional error, mapping a missing error to ``None``."""
    if err is None:
        return None
    return err.serialize(registry)
