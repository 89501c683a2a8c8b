"""Tests for localekit.i18n.factory module."""

import pytest

from localekit.configuration import I18nSettings, Settings
from localekit.i18n import ConfigurationError, TranslatorRegistry
from localekit.i18n.factory import create_registry
from tests.factories.i18n import write_yaml_dictionaries


def make_settings(**i18n_overrides) -> Settings:
    """Create Settings with i18n options set by field name."""
    return Settings(i18n=I18nSettings(**i18n_overrides))


class TestCreateRegistry:
    """Tests for create_registry()."""

    def test_from_settings_directory(self, translations_dir):
        settings = make_settings(translations_dir=translations_dir)
        registry = create_registry(settings)

        assert registry.default_locale() == "en"
        assert registry.available_locales() == ["cz", "en"]

    def test_explicit_directory_overrides_settings(self, translations_dir):
        registry = create_registry(make_settings(), translations_dir=translations_dir)
        assert registry.get_translator("cz").t("section.sub_section", "key") == (
            "Přeložené pole"
        )

    def test_yaml_format_and_locales(self, tmp_path):
        write_yaml_dictionaries(tmp_path)
        settings = make_settings(
            translations_dir=tmp_path,
            file_format="yaml",
            locales=["cz"],
            default_locale="cz",
        )
        registry = create_registry(settings)

        assert registry.available_locales() == ["cz"]
        assert registry.get_translator("en").locale == "cz"

    def test_initializes_given_registry(self, translations_dir):
        registry = TranslatorRegistry()
        result = create_registry(make_settings(translations_dir=translations_dir), registry=registry)

        assert result is registry
        assert registry.is_initialized()

    def test_missing_directory_setting(self):
        with pytest.raises(ConfigurationError):
            create_registry(make_settings())
