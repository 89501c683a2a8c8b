"""Shared fixtures for the localekit test suite."""

import pytest

from localekit.i18n import get_registry
from tests.factories.i18n import (
    make_dictionary_collection,
    make_registry,
    write_json_dictionaries,
)


@pytest.fixture
def dictionary_collection():
    """Two-locale ("en", "cz") dictionary collection."""
    return make_dictionary_collection()


@pytest.fixture
def registry():
    """Registry initialized with the sample collection, default "en"."""
    return make_registry()


@pytest.fixture
def global_registry():
    """Process-wide registry initialized with the sample collection.

    The registry is reset after the test so state never leaks between tests.
    """
    registry = get_registry()
    registry.initialize_from_dictionaries("en", make_dictionary_collection())
    yield registry
    registry.reset()


@pytest.fixture
def translations_dir(tmp_path):
    """Directory containing en.json and cz.json."""
    return write_json_dictionaries(tmp_path)
