"""Tests for localekit.i18n.service module."""

from localekit.errors import TranslatableError, new_empty_multi_error, new_error
from localekit.i18n import get_registry
from localekit.i18n.service import LocalizationService


class TestLocalizationService:
    """Tests for LocalizationService."""

    def test_defaults_to_global_registry(self):
        assert LocalizationService().registry is get_registry()

    def test_translate(self, registry):
        service = LocalizationService(registry)
        assert service.translate("fields.errors", "to_short", "cz") == (
            "Pole je příliš krátké"
        )

    def test_translate_with_values(self, registry):
        service = LocalizationService(registry)
        assert service.translate("form.login", "title", "en", {"{name}": "Joe"}) == (
            "Hello, Joe"
        )

    def test_translate_default_locale(self, registry):
        service = LocalizationService(registry)
        assert service.translate("fields.errors", "to_long") == "Field too long"

    def test_localize_error_in_locale(self, registry):
        service = LocalizationService(registry)
        err = new_error("fields.errors", "to_short")

        assert service.localize(err, "cz") == "Pole je příliš krátké"
        # The error itself is left untouched
        assert err.locale is None

    def test_localize_without_locale_keeps_identity(self, registry):
        service = LocalizationService(registry)
        assert service.localize(new_error("s", "k")) == {"s": "k"}

    def test_localize_uses_error_locale(self, registry):
        service = LocalizationService(registry)
        err = new_error("fields.errors", "to_long").with_locale("cz")
        assert service.localize(err) == "Pole je příliš dlouhé"

    def test_localize_multi_error(self, registry):
        service = LocalizationService(registry)
        err = new_empty_multi_error().add("name", "fields.errors", "to_short")
        assert service.localize(err, "en") == {"name": "Field too short"}

    def test_localize_empty_values(self, registry):
        service = LocalizationService(registry)
        assert service.localize(None, "en") is None
        assert service.localize(TranslatableError(), "en") is None
        assert service.localize(new_empty_multi_error(), "en") is None
