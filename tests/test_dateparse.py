import locale

import pytest

from glibcore.date import Date
from glibcore.dateparse import DateParser, parse_date, set_parse


@pytest.fixture(autouse=True)
def c_time_locale():
    saved = locale.setlocale(locale.LC_TIME)
    locale.setlocale(locale.LC_TIME, "C")
    yield
    locale.setlocale(locale.LC_TIME, saved)


def dmy(date):
    return date.day(), date.month(), date.year()


def test_slash_date_in_c_locale():
    assert dmy(DateParser().parse("12/25/1999")) == (25, 12, 1999)


def test_iso_order_fallback():
    assert dmy(DateParser().parse("1999-12-25")) == (25, 12, 1999)


def test_compact_eight_digits():
    assert dmy(DateParser().parse("19991225")) == (25, 12, 1999)


def test_compact_six_digits_uses_two_digit_years():
    parser = DateParser()
    date = parser.parse("991225")
    assert parser.using_twodigit_years is True
    assert dmy(date) == (25, 12, 1999)


def test_two_digit_year_in_slash_date():
    assert dmy(DateParser().parse("3/10/05")) == (10, 3, 2005)


def test_two_digit_cutoff_boundary():
    parser = DateParser()
    assert parser.parse("12/25/30").year() == 1930
    assert parser.parse("12/25/29").year() == 2029


def test_month_and_year_gives_first_day():
    assert dmy(DateParser().parse("12/1999")) == (1, 12, 1999)


def test_month_name_and_year():
    assert dmy(DateParser().parse("March 2001")) == (1, 3, 2001)


def test_short_month_name_and_year():
    assert dmy(DateParser().parse("Mar 2001")) == (1, 3, 2001)


def test_day_month_name_year():
    assert dmy(DateParser().parse("25 March 2001")) == (25, 3, 2001)


@pytest.mark.parametrize(
    "text",
    ["", "hello", "1/2/3/4", "2001", "02/30/1999", "12/25/9000", "13/13/2000"],
)
def test_unparseable_text_gives_invalid_date(text):
    assert DateParser().parse(text).is_valid() is False


def test_parse_date_matches_from_dmy():
    assert parse_date("7/4/1976") == Date.from_dmy(4, 7, 1976)


def test_set_parse_sets_date():
    date = Date()
    set_parse(date, "12/25/1999")
    assert date == Date.from_dmy(25, 12, 1999)


def test_set_parse_invalidates_on_garbage():
    date = Date.from_dmy(1, 1, 2000)
    set_parse(date, "no date here")
    assert date.is_valid() is False


def test_parse_none_raises():
    with pytest.raises(TypeError):
        DateParser().parse(None)


def test_round_trip_through_strftime():
    parser = DateParser()
    original = Date.from_dmy(17, 8, 1987)
    assert parser.parse(original.strftime("%m/%d/%Y")) == original