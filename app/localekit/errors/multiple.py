"""Translatable error aggregating several field-scoped messages.

Used for validation: each failing field gets its own section/key message and
one distinguished summary field holds a message that belongs to no field.
"""

import json
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from localekit.errors.message import ErrorMessage, first_values
from localekit.i18n.models import Values
from localekit.i18n.registry import TranslatorRegistry, get_registry

SUMMARY_FIELD = "_summary"
ERROR_SECTION = "_error"

DEFAULT_FIELD_CODE = 400
DEFAULT_SUMMARY_CODE = 500


class TranslatableMultiError(Exception):
    """Field name -> translatable message, plus a status code and locale.

    ``add()`` defaults the code to 400 and ``add_default()`` to 500; neither
    overrides a code that is already set.

    Attributes:
        code: Status code, 0 when unset.
        locale: Explicit locale used by ``serialize()``, None when unset.
        errors: Read-only view of field -> ErrorMessage.
    """

    def __init__(self, code: int = 0, locale: Optional[str] = None):
        super().__init__()
        self._code = code
        self._locale = locale
        self._errors: Dict[str, ErrorMessage] = {}

    def __str__(self) -> str:
        identity = {field: message.to_dict() for field, message in self._errors.items()}
        return json.dumps(identity, ensure_ascii=False, separators=(",", ":"))

    def __repr__(self) -> str:
        return (
            f"TranslatableMultiError(code={self._code!r}, locale={self._locale!r}, "
            f"fields={list(self._errors)!r})"
        )

    @property
    def code(self) -> int:
        return self._code

    @property
    def locale(self) -> Optional[str]:
        return self._locale

    @property
    def errors(self) -> Mapping[str, ErrorMessage]:
        return MappingProxyType(self._errors)

    def set_code(self, code: int) -> None:
        self._code = code

    def set_locale(self, locale: Optional[str]) -> None:
        self._locale = locale

    def with_code(self, code: int) -> "TranslatableMultiError":
        self.set_code(code)
        return self

    def with_locale(self, locale: Optional[str]) -> "TranslatableMultiError":
        self.set_locale(locale)
        return self

    def add(
        self, field: str, section: str, key: str, *values: Optional[Values]
    ) -> "TranslatableMultiError":
        """Set the message for a field, defaulting the code to 400."""
        if self._code == 0:
            self._code = DEFAULT_FIELD_CODE
        self._errors[field] = ErrorMessage(section, key, first_values(values))
        return self

    def add_default(
        self, section: str, key: str, *values: Optional[Values]
    ) -> "TranslatableMultiError":
        """Set the summary message, defaulting the code to 500."""
        if self._code == 0:
            self._code = DEFAULT_SUMMARY_CODE
        self._errors[SUMMARY_FIELD] = ErrorMessage(section, key, first_values(values))
        return self

    def add_default_from_error(self, err: BaseException) -> "TranslatableMultiError":
        """Absorb an arbitrary exception.

        - another TranslatableMultiError replaces this error's code, locale
          and messages with a copy of its own;
        - anything else, TranslatableError included, becomes the summary
          message ``{"_error": str(err)}``; the code defaults to 500.
        """
        if isinstance(err, TranslatableMultiError):
            self._code = err.code
            self._locale = err.locale
            self._errors = {
                field: ErrorMessage(
                    message.section,
                    message.key,
                    dict(message.values) if message.values is not None else None,
                )
                for field, message in err.errors.items()
            }
            return self

        return self.add_default(ERROR_SECTION, str(err))

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def render(
        self,
        locale: Optional[str] = None,
        registry: Optional[TranslatorRegistry] = None,
    ) -> Dict[str, str]:
        """Resolve every field's message through a registry.

        Args:
            locale: Locale to translate to. Defaults to the error's own
                locale, then to the registry's default locale.
            registry: Registry to take the translator from (default: the
                process-wide registry).

        Returns:
            Mapping of field name to translated message.
        """
        registry = registry or get_registry()
        translator = registry.get_translator(locale or self._locale)
        return {
            field: message.translate(translator)
            for field, message in self._errors.items()
        }

    def serialize(
        self, registry: Optional[TranslatorRegistry] = None
    ) -> Union[None, Dict[str, Any]]:
        """Return the interchange value of this error.

        - ``None`` when there are no messages;
        - ``{field: translated}`` when an explicit locale is set;
        - ``{field: {section: key}}`` otherwise.
        """
        if not self._errors:
            return None
        if self._locale:
            return self.render(self._locale, registry)
        return {field: message.to_dict() for field, message in self._errors.items()}

    def to_json(self, registry: Optional[TranslatorRegistry] = None) -> str:
        return json.dumps(
            self.serialize(registry), ensure_ascii=False, separators=(",", ":")
        )

    @classmethod
    def from_dict(
        cls, data: Optional[Dict[str, Any]], code: int = 0
    ) -> "TranslatableMultiError":
        """Rebuild an error from its ``{field: {section: key}}`` identity form.

        Raises:
            ValueError: If a field does not hold a single ``{section: key}`` pair.
        """
        error = cls(code=code)
        for field, payload in (data or {}).items():
            error._errors[field] = ErrorMessage.from_dict(payload)
        return error


def new_empty_multi_error() -> TranslatableMultiError:
    return TranslatableMultiError()


def new_multi_error(
    field: str, section: str, key: str, *values: Optional[Values]
) -> TranslatableMultiError:
    """Create a multi-error holding one field message.

    The code stays unset until ``add()``/``add_default()`` or ``set_code()``.
    """
    error = TranslatableMultiError()
    error._errors[field] = ErrorMessage(section, key, first_values(values))
    return error


def new_default_multi_error(
    section: str, key: str, *values: Optional[Values]
) -> TranslatableMultiError:
    """Create a multi-error holding only the summary message."""
    return new_multi_error(SUMMARY_FIELD, section, key, *values)


def serialize_multi_error(
    err: Optional[TranslatableMultiError],
    registry: Optional[TranslatorRegistry] = None,
) -> Union[None, Dict[str, Any]]:
    """Serialize an optional multi-error, mapping a missing error to ``None``."""
    if err is None:
        return None
    return err.serialize(registry)
