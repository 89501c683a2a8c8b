"""Translatable errors.

- TranslatableError: one section/key message with optional code and locale
- TranslatableMultiError: field -> message mapping for validation failures
"""

from localekit.errors.error import (
    TranslatableError,
    new_error,
    new_error_with_code,
    serialize_error,
)
from localekit.errors.message import ErrorMessage
from localekit.errors.multiple import (
    SUMMARY_FIELD,
    TranslatableMultiError,
    new_default_multi_error,
    new_empty_multi_error,
    new_multi_error,
    serialize_multi_error,
)

__all__ = [
    "TranslatableError",
    "new_error",
    "new_error_with_code",
    "serialize_error",
    "ErrorMessage",
    "SUMMARY_FIELD",
    "TranslatableMultiError",
    "new_default_multi_error",
    "new_empty_multi_error",
    "new_multi_error",
    "serialize_multi_error",
]
