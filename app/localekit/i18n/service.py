"""Localization service for dependency injection.

Provides a class-based interface over a TranslatorRegistry so boundary
layers (HTTP handlers, loggers, workers) can resolve errors explicitly in a
request's locale before serializing them.
"""

from typing import Any, Dict, Optional, Union

from localekit.errors.error import TranslatableError
from localekit.errors.multiple import TranslatableMultiError
from localekit.i18n.models import Values
from localekit.i18n.registry import TranslatorRegistry, get_registry
from localekit.i18n.translator import Translator


class LocalizationService:
    """Class-based localization service.

    This is a thin facade: all actual work is delegated to the registry and
    its translators.

    Usage:
        service = LocalizationService(registry)

        try:
            validate(form)
        except TranslatableMultiError as err:
            body = {"errors": service.localize(err, request_locale)}
            status = err.code
    """

    def __init__(self, registry: Optional[TranslatorRegistry] = None):
        """Initialize localization service.

        Args:
            registry: Registry to resolve translators from. Defaults to the
                process-wide registry.
        """
        self._registry = registry or get_registry()

    @property
    def registry(self) -> TranslatorRegistry:
        return self._registry

    def translator(self, locale: Optional[str]) -> Translator:
        return self._registry.get_translator(locale)

    def translate(
        self,
        section: str,
        key: str,
        locale: Optional[str] = None,
        values: Optional[Values] = None,
    ) -> str:
        """Translate one template, formatting it when values are given."""
        translator = self.translator(locale)
        if values:
            return translator.tf(section, key, values)
        return translator.t(section, key)

    def localize(
        self,
        err: Union[None, TranslatableError, TranslatableMultiError],
        locale: Optional[str] = None,
    ) -> Union[None, str, Dict[str, Any]]:
        """Serialize an error, translating it when a locale is known.

        Args:
            err: Error to serialize (None serializes to None).
            locale: Locale to translate to. When omitted, the error's own
                locale is used; an error without one keeps its identity form.

        Returns:
            The error's interchange value.
        """
        if err is None:
            return None
        if not locale:
            return err.serialize(self._registry)
        if isinstance(err, TranslatableMultiError):
            if not err.has_errors():
                return None
        elif err.is_empty():
            return None
        return err.render(locale, self._registry)
