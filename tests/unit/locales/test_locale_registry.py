"""Test the locale registry and active-language switching."""
import pytest
from datefmt.locales.registry import LocaleRegistry
from datefmt.locales.tables import EN, LOCALE_TABLES, PL

SUPPORTED = ["en", "be", "cs", "kk", "pl", "ru", "tr", "tt", "uk"]


class TestSupportedLanguages:
    def test_reference_set(self, locale_registry):
        assert locale_registry.supported_languages() == frozenset(SUPPORTED)


class TestLanguage:
    def test_defaults_to_english(self, locale_registry):
        assert locale_registry.language() == "en"

    @pytest.mark.parametrize("code", SUPPORTED)
    def test_switch_to_supported(self, locale_registry, code):
        assert locale_registry.language(code) == code
        assert locale_registry.language() == code

    @pytest.mark.parametrize("code", ["de", "fr", "no", "", "PL", 42])
    def test_unsupported_is_ignored(self, locale_registry, code):
        locale_registry.language("pl")
        assert locale_registry.language(code) == "pl"
        assert locale_registry.language() == "pl"

    def test_active_table_follows_language(self, locale_registry):
        assert locale_registry.active_table() is EN
        locale_registry.language("pl")
        assert locale_registry.active_table() is PL

    def test_table_for(self, locale_registry):
        assert locale_registry.table_for("pl") is PL


class TestConstruction:
    def test_custom_default(self):
        assert LocaleRegistry(default="ru").language() == "ru"

    def test_unknown_default_rejected(self):
        with pytest.raises(ValueError):
            LocaleRegistry(default="de")

    def test_custom_tables(self):
        registry = LocaleRegistry({"pl": LOCALE_TABLES["pl"]}, default="pl")
        assert registry.supported_languages() == frozenset({"pl"})
        assert registry.language("en") == "pl"
