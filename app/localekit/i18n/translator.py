"""Translator bound to a single locale's dictionary.

Lookups never fail: a missing section or key resolves to the literal
``"section.key"`` string so that translation gaps stay visible without
breaking callers.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from localekit.i18n.exceptions import TranslatedError
from localekit.i18n.models import Dictionary, TranslationKey, Values
from localekit.logging import get_module_logger

logger = get_module_logger()

_EMPTY: Mapping[str, Mapping[str, str]] = MappingProxyType({})


def format_value(value: Any) -> Optional[str]:
    """Render a substitution value, or None if its type is not supported.

    Strings are used verbatim, integers in base 10 and floats with six
    decimal places. Booleans are not integers here.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return "%d" % value
    if isinstance(value, float):
        return "%f" % value
    return None


@dataclass(frozen=True, eq=False)
class Translator:
    """Resolves templates from one locale's dictionary.

    A translator created without a dictionary is the empty translator: every
    lookup returns the ``"section.key"`` fallback. Frozen so the dictionary
    reference cannot be swapped after construction.

    Attributes:
        dictionary: Section -> key -> template mapping (None when empty).
        locale: Locale the dictionary belongs to ("" for the empty translator).
    """

    dictionary: Optional[Dictionary] = field(default=None, repr=False)
    locale: str = ""

    def _lookup(self, section: str, key: str) -> Optional[str]:
        if not self.dictionary:
            return None
        return self.dictionary.get(section, _EMPTY).get(key)

    def has(self, section: str, key: str) -> bool:
        """Check if a template exists for ``(section, key)``."""
        return self._lookup(section, key) is not None

    def t(self, section: str, key: str) -> str:
        """Return the template for ``(section, key)``, or ``"section.key"``."""
        template = self._lookup(section, key)
        if template is None:
            return self._missing(section, key)
        return template

    def tf(self, section: str, key: str, values: Optional[Values]) -> str:
        """Return the template with every value token replaced.

        Each key of ``values`` is a literal substring of the template; every
        occurrence is replaced by the rendered value. Values of unsupported
        types are skipped. Replacement order across tokens is not defined.

        Args:
            section: Dictionary section.
            key: Template key within the section.
            values: Mapping of token -> value.

        Returns:
            Formatted template, or ``"section.key"`` if it does not exist.
        """
        template = self._lookup(section, key)
        if template is None:
            return self._missing(section, key)

        for token, value in (values or {}).items():
            rendered = format_value(value)
            if rendered is None:
                logger.debug(
                    "skipped_unsupported_value",
                    section=section,
                    key=key,
                    token=token,
                    value_type=type(value).__name__,
                )
                continue
            template = template.replace(token, rendered)
        return template

    def err_t(self, section: str, key: str) -> TranslatedError:
        """Return ``t()`` wrapped in a TranslatedError."""
        return TranslatedError(self.t(section, key))

    def err_tf(self, section: str, key: str, values: Optional[Values]) -> TranslatedError:
        """Return ``tf()`` wrapped in a TranslatedError."""
        return TranslatedError(self.tf(section, key, values))

    def _missing(self, section: str, key: str) -> str:
        fallback = str(TranslationKey(section, key))
        logger.debug("translation_missing", key=fallback, locale=self.locale)
        return fallback
