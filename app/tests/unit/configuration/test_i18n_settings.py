"""Unit tests for localekit.configuration.settings module."""

from pathlib import Path

from localekit.configuration import I18nSettings, Settings, settings


class TestI18nSettings:
    """Test suite for I18nSettings configuration."""

    def test_defaults(self, monkeypatch):
        """I18nSettings uses correct default values."""
        for name in (
            "I18N_DEFAULT_LOCALE",
            "I18N_TRANSLATIONS_DIR",
            "I18N_LOCALES",
            "I18N_FILE_FORMAT",
        ):
            monkeypatch.delenv(name, raising=False)

        i18n = I18nSettings()

        assert i18n.default_locale == "en"
        assert i18n.translations_dir is None
        assert i18n.locales == []
        assert i18n.file_format == "json"

    def test_environment_overrides(self, monkeypatch):
        """I18nSettings reads I18N_* environment variables."""
        monkeypatch.setenv("I18N_DEFAULT_LOCALE", "cs_CZ")
        monkeypatch.setenv("I18N_TRANSLATIONS_DIR", "/srv/locales")
        monkeypatch.setenv("I18N_LOCALES", '["cs_CZ", "en_US"]')
        monkeypatch.setenv("I18N_FILE_FORMAT", "yaml")

        i18n = I18nSettings()

        assert i18n.default_locale == "cs_CZ"
        assert i18n.translations_dir == Path("/srv/locales")
        assert i18n.locales == ["cs_CZ", "en_US"]
        assert i18n.file_format == "yaml"


class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_builds_i18n_section(self):
        assert isinstance(Settings().i18n, I18nSettings)

    def test_is_production(self, monkeypatch):
        """Empty PREFIX means production."""
        monkeypatch.delenv("PREFIX", raising=False)
        assert Settings().is_production is True
        assert Settings(PREFIX="dev-").is_production is False

    def test_module_singleton(self):
        assert isinstance(settings, Settings)
