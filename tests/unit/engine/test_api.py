"""Module-level API backed by the process-wide default formatter."""
from datetime import datetime

import pytest
from datefmt import api
from datefmt.engine import DateFormatter
from datefmt.errors import ArgumentTypeError

SUPPORTED = ["be", "cs", "kk", "pl", "ru", "tr", "tt", "uk", "en"]


@pytest.mark.usefixtures("default_formatter")
class TestModuleLevelApi:
    @pytest.mark.parametrize("code", SUPPORTED)
    def test_language_can_be_changed(self, code):
        assert api.language(code) == code
        assert api.language() == code

    @pytest.mark.parametrize("code", ["de", "fr", "no"])
    def test_unsupported_language_is_ignored(self, code):
        current = api.language()
        assert api.language(code) == current
        assert api.language() == current

    def test_register_then_list(self):
        api.register("longDate", "d MMMM")
        assert "longDate" in api.formatters()

    def test_supported_languages(self):
        assert api.supported_languages() == frozenset(SUPPORTED)

    def test_render_frozen_now(self):
        assert api.render("ISODateTimeTZ") == "2000-01-01T08:00:00+00:00"

    def test_render_polish(self):
        api.language("pl")
        assert api.render("D d-M hh:mm A", datetime(2022, 12, 31, 23, 59, 59)) == "So 31-12 11:59"
        assert api.render("MMM 'YY", 5) == "sty '70"

    def test_render_without_arguments(self):
        with pytest.raises(ArgumentTypeError, match="format must be a string"):
            api.render()


def test_default_formatter_is_built_lazily(monkeypatch):
    monkeypatch.setenv("DATEFMT_DEFAULT_LANGUAGE", "tr")
    api.reset_default_formatter()
    try:
        formatter = api.get_default_formatter()
        assert isinstance(formatter, DateFormatter)
        assert formatter is api.get_default_formatter()
        assert api.language() == "tr"
    finally:
        api.reset_default_formatter()
