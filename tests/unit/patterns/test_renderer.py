"""Test token rendering."""
import pytest
from datefmt.locales.tables import EN, PL, RU, TR, TT
from datefmt.patterns.compiler import compile_pattern
from datefmt.patterns.renderer import format_offset, render_tokens
from tests.factories import make_breakdown, make_locale_table


def render(pattern, table=EN, **overrides):
    return render_tokens(compile_pattern(pattern), make_breakdown(**overrides), table)


class TestNumericDirectives:
    @pytest.mark.parametrize("pattern,expected", [
        ("YYYY", "2022"),
        ("YY", "22"),
        ("MM", "12"),
        ("DD", "31"),
        ("HH:mm:ss", "23:59:59"),
        ("hh h", "11 11"),
    ])
    def test_padded_and_unpadded(self, pattern, expected):
        assert render(pattern) == expected

    def test_single_digit_fields(self):
        result = render("MM M DD d HH H mm m ss s", month=1, day=5, hour=8, minute=3, second=7)
        assert result == "01 1 05 5 08 8 03 3 07 7"

    def test_year_padding(self):
        assert render("YYYY YY", year=5) == "0005 05"

    def test_midnight_is_twelve_on_twelve_hour_clock(self):
        assert render("hh h HH H", hour=0) == "12 12 00 0"

    def test_afternoon_on_twelve_hour_clock(self):
        assert render("hh h", hour=13) == "01 1"

    def test_sub_second(self):
        assert render("ff f", millisecond=5) == "005 0"
        assert render("ff f", millisecond=987) == "987 9"


class TestOffset:
    @pytest.mark.parametrize("minutes,with_colon,without", [
        (0, "+00:00", "+0000"),
        (330, "+05:30", "+0530"),
        (-90, "-01:30", "-0130"),
        (-300, "-05:00", "-0500"),
    ])
    def test_format_offset(self, minutes, with_colon, without):
        assert format_offset(minutes) == with_colon
        assert format_offset(minutes, separator="") == without

    def test_offset_directives(self):
        assert render("Z ZZ", utc_offset_minutes=120) == "+02:00 +0200"


class TestNames:
    def test_english_names(self):
        assert render("DDD dd D MMMM MMM") == "Saturday Sat Sa December Dec"

    def test_polish_names(self):
        assert render("DDD dd D MMM", PL) == "sobota sb So gru"

    def test_genitive_after_day_of_month(self):
        assert render("d MMMM", PL) == "31 grudnia"
        assert render("DD MMMM", RU) == "31 декабря"

    def test_nominative_when_standalone(self):
        assert render("MMMM YYYY", PL, month=6) == "czerwiec 2022"

    def test_nominative_when_separated_by_quoted_text(self):
        assert render("d 'z' MMMM", PL) == "31 z grudzień"

    def test_languages_without_declension_use_full_names(self):
        assert render("d MMMM") == "31 December"
        table = make_locale_table(genitive=True)
        assert render("d MMMM", table, month=3) == "31 of-month3"
        assert render("MMMM", table, month=3) == "month3"


class TestDayPeriod:
    def test_english_casing(self):
        assert render("a A", hour=9) == "am AM"
        assert render("a A") == "pm PM"

    def test_uppercase_override(self):
        assert render("A", PL, hour=8) == "rano"

    def test_turkish_uppercase(self):
        assert render("a A", TR) == "ös ÖS"

    def test_empty_marker_collapses_preceding_space(self):
        assert render("D d-M hh:mm A", PL) == "So 31-12 11:59"

    def test_collapse_keeps_following_text(self):
        assert render("h:mm:ss.ff a Z", PL) == "11:59:59.000 +00:00"

    def test_only_one_space_is_collapsed(self):
        assert render("hh  a", PL) == "11 "

    def test_quoted_space_is_not_collapsed(self):
        assert render("hh' 'a", PL) == "11 "

    def test_no_collapse_without_space(self):
        assert render("hh-a", PL) == "11-"

    def test_both_halves_unmarked(self):
        assert render("HH:mm a", TT) == "23:59"
        assert render("HH:mm a", TT, hour=7) == "07:59"


class TestLiterals:
    def test_quoted_text_is_emitted_verbatim(self):
        assert render("'Year' YYYY") == "Year 2022"

    def test_unterminated_quote(self):
        assert render("MMM 'YY", PL, year=1970, month=1) == "sty '70"
