"""Tests for localekit.i18n.translator module."""

import dataclasses

import pytest

from localekit.i18n import TranslatedError, Translator
from localekit.i18n.translator import format_value


@pytest.fixture
def translator(dictionary_collection):
    """Translator over the English sample dictionary."""
    return Translator(dictionary_collection["en"], "en")


class TestTranslatorLookup:
    """Tests for Translator.t()."""

    def test_t_returns_template(self, translator):
        """t() returns the template stored at section/key."""
        assert translator.t("section.sub_section", "key") == "Translated field"

    def test_t_missing_key_returns_section_dot_key(self, translator):
        """t() falls back to "section.key" for a missing key."""
        assert translator.t("fields.errors", "unknown") == "fields.errors.unknown"

    def test_t_missing_section_returns_section_dot_key(self, translator):
        """t() falls back to "section.key" for a missing section."""
        assert translator.t("nonexistent", "message") == "nonexistent.message"

    def test_t_empty_section_behaves_like_missing_section(self):
        """A section with no keys resolves like a missing one."""
        translator = Translator({"empty": {}}, "en")
        assert translator.t("empty", "key") == "empty.key"
        assert translator.t("empty", "key") == Translator({}, "en").t("empty", "key")

    def test_empty_translator_always_falls_back(self):
        """A translator without a dictionary returns "section.key" for everything."""
        translator = Translator()
        assert translator.t("section.sub_section", "key") == "section.sub_section.key"
        assert translator.tf("a", "b", {"x": 1}) == "a.b"

    def test_has(self, translator):
        """has() reports whether a template exists."""
        assert translator.has("fields.errors", "to_short")
        assert not translator.has("fields.errors", "unknown")
        assert not Translator().has("fields.errors", "to_short")

    def test_translator_is_immutable(self, translator):
        """The dictionary reference cannot be replaced after construction."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            translator.dictionary = {}


class TestTranslatorFormatting:
    """Tests for Translator.tf() value substitution."""

    def test_tf_substitutes_integer(self, translator):
        """tf() renders integers in base 10."""
        result = translator.tf(
            "errors.connections", "connections_limit", {"{count}": 5}
        )
        assert result == "Connections limit is 5"

    def test_tf_substitutes_negative_integer(self, translator):
        """tf() keeps the sign of negative integers."""
        result = translator.tf(
            "errors.connections", "connections_limit", {"{count}": -12}
        )
        assert result == "Connections limit is -12"

    def test_tf_substitutes_string(self, translator):
        """tf() inserts strings verbatim."""
        assert translator.tf("form.login", "title", {"{name}": "Alice"}) == "Hello, Alice"

    def test_tf_substitutes_float_with_six_decimals(self, translator):
        """tf() renders floats with six decimal places."""
        result = translator.tf(
            "errors.connections", "connections_limit", {"{count}": 2.5}
        )
        assert result == "Connections limit is 2.500000"

    def test_tf_replaces_every_occurrence(self):
        """tf() replaces all occurrences of a token."""
        translator = Translator({"s": {"k": "{n} and {n}"}}, "en")
        assert translator.tf("s", "k", {"{n}": 3}) == "3 and 3"

    def test_tf_tokens_are_literal_substrings(self):
        """Tokens need no delimiters: any literal substring is replaced."""
        translator = Translator({"s": {"k": "Hello NAME"}}, "en")
        assert translator.tf("s", "k", {"NAME": "Bob"}) == "Hello Bob"

    def test_tf_skips_unsupported_types(self, translator):
        """Values of unsupported types leave their token untouched."""
        result = translator.tf(
            "errors.connections", "connections_limit", {"{count}": [1, 2]}
        )
        assert result == "Connections limit is {count}"

    def test_tf_skips_booleans(self, translator):
        """Booleans are not rendered as integers."""
        result = translator.tf(
            "errors.connections", "connections_limit", {"{count}": True}
        )
        assert result == "Connections limit is {count}"

    def test_tf_ignores_tokens_absent_from_template(self, translator):
        """Extra values do not change the template."""
        assert translator.tf("form.login", "title", {"{other}": "x", "{name}": "Ann"}) == (
            "Hello, Ann"
        )

    def test_tf_with_no_values_returns_template(self, translator):
        """tf() with None or empty values returns the raw template."""
        assert translator.tf("form.login", "title", None) == "Hello, {name}"
        assert translator.tf("form.login", "title", {}) == "Hello, {name}"

    def test_tf_missing_template_ignores_values(self, translator):
        """tf() falls back to "section.key" and ignores values when not found."""
        assert translator.tf("form.login", "missing", {"{name}": "Ann"}) == (
            "form.login.missing"
        )


class TestTranslatorErrors:
    """Tests for err_t() and err_tf()."""

    def test_err_t_wraps_translation(self, translator):
        """err_t() returns a TranslatedError carrying the translation."""
        err = translator.err_t("fields.errors", "to_short")
        assert isinstance(err, TranslatedError)
        assert str(err) == "Field too short"
        assert err.message == "Field too short"

    def test_err_tf_wraps_formatted_translation(self, translator):
        """err_tf() returns a TranslatedError carrying the formatted translation."""
        err = translator.err_tf("form.login", "title", {"{name}": "Eve"})
        assert str(err) == "Hello, Eve"

    def test_err_t_missing_key(self, translator):
        """err_t() carries the fallback string for missing keys."""
        assert str(translator.err_t("x", "y")) == "x.y"


class TestFormatValue:
    """Tests for format_value()."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("text", "text"),
            (42, "42"),
            (0, "0"),
            (1.0, "1.000000"),
            (3.1415926, "3.141593"),
            (True, None),
            (None, None),
            ({"a": 1}, None),
        ],
    )
    def test_format_value(self, value, expected):
        """format_value() renders supported shapes and rejects the rest."""
        assert format_value(value) == expected
