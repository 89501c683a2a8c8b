"""Translatable message payload shared by single and multiple errors."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from localekit.i18n.models import Values
from localekit.i18n.translator import Translator


def first_values(values: Sequence[Optional[Values]]) -> Optional[Dict[str, Any]]:
    """Return a copy of the first values mapping passed positionally.

    Constructors accept ``*values`` for compatibility with call sites that
    pass several mappings; only the first one is kept.
    """
    if not values or values[0] is None:
        return None
    return dict(values[0])


@dataclass
class ErrorMessage:
    """Section, key and substitution values of one translatable message.

    Attributes:
        section: Dictionary section (e.g., "fields.errors").
        key: Template key within the section (e.g., "to_short").
        values: Optional token -> value mapping for ``Translator.tf``.
    """

    section: str = ""
    key: str = ""
    values: Optional[Dict[str, Any]] = None

    def identity(self) -> str:
        """Return ``"section.key"``, or ``"section"`` when key is empty."""
        if self.key:
            return f"{self.section}.{self.key}"
        return self.section

    def is_empty(self) -> bool:
        return not self.section and not self.key

    def translate(self, translator: Translator) -> str:
        """Resolve with ``tf`` when values are present, else ``t``."""
        if self.values:
            return translator.tf(self.section, self.key, self.values)
        return translator.t(self.section, self.key)

    def to_dict(self) -> Dict[str, str]:
        """Return the untranslated identity form ``{section: key}``."""
        return {self.section: self.key}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ErrorMessage":
        """Rebuild a message from its identity form.

        Raises:
            ValueError: If data is not a single ``{section: key}`` pair of strings.
        """
        if not isinstance(data, dict) or len(data) != 1:
            raise ValueError(f"Expected a single {{section: key}} pair, got: {data!r}")
        section, key = next(iter(data.items()))
        if not isinstance(section, str) or not isinstance(key, str):
            raise ValueError(f"Section and key must be strings, got: {data!r}")
        return cls(section=section, key=key)
