"""Dictionary models for the i18n system.

A dictionary collection is a plain nested mapping:

    {
        "en_US": {
            "errors.connections": {
                "connections_limit": "Connections limit is {count}"
            },
            "form.login": {
                "title": "Hello, {name}"
            }
        },
        "cs_CZ": {
            "errors.connections": {
                "connections_limit": "Limit připojení je {count}"
            },
            "form.login": {
                "title": "Ahoj, {name}"
            }
        }
    }

Section names are free-form; dots in them carry no structure.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence

from pydantic import StrictStr, TypeAdapter, ValidationError

from localekit.i18n.exceptions import DictionaryDecodeError

# "key" => "template"
DictionaryEntry = Dict[str, str]

# "section" => "key" => "template"
Dictionary = Dict[str, DictionaryEntry]

# "locale" => "section" => "key" => "template"
DictionaryCollection = Dict[str, Dictionary]

# Substitution values, "token" => value
Values = Mapping[str, Any]

_DICTIONARY_ADAPTER = TypeAdapter(Dict[StrictStr, Dict[StrictStr, StrictStr]])


def validate_dictionary(data: Any, source: Optional[str] = None) -> Dictionary:
    """Validate decoded data as a Dictionary.

    Args:
        data: Decoded file content.
        source: Where the data came from, used in the error message.

    Returns:
        The data as a ``{section: {key: template}}`` dict.

    Raises:
        DictionaryDecodeError: If the data is not a mapping of sections to
            mappings of string templates.
    """
    try:
        return _DICTIONARY_ADAPTER.validate_python(data)
    except ValidationError as e:
        where = source or "dictionary"
        raise DictionaryDecodeError(f"Invalid dictionary in {where}: {e}") from e


@dataclass(frozen=True)
class TranslationKey:
    """Identifies one template within a dictionary.

    Attributes:
        section: Caller-defined namespace (e.g., "form.login").
        key: Template identifier within the section (e.g., "title").
    """

    section: str
    key: str

    def __str__(self) -> str:
        """Return the ``section.key`` fallback string."""
        return f"{self.section}.{self.key}"


def collection_locales(collection: Optional[Mapping[str, Any]]) -> list:
    """Return the locales present in a collection, in insertion order."""
    if not collection:
        return []
    return list(collection.keys())


def locale_list(locales: Optional[Sequence[str]]) -> list:
    """Copy ``locales`` into a list; a single locale string counts as one locale."""
    if not locales:
        return []
    if isinstance(locales, str):
        return [locales]
    return list(locales)
