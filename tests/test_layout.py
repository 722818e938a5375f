import re

import pytest

from hcal.historic import HistoricDate, Locale
from hcal.layout import center, format_month, format_year


def _days(text):
    body = text.split("\n")[2:]
    return [int(token) for line in body for token in line.split()]


def test_center_keeps_width_and_text():
    for text, width in [("abc", 7), ("ab", 5), ("January", 20), ("", 4)]:
        result = center(text, width, " ")
        assert len(result) == width
        assert result.strip() == text


def test_center_puts_extra_space_on_left():
    result = center("ab", 5, "*")
    assert result.startswith("  ab")
    assert result.endswith("*")
    assert result.count("*") == 1


def test_center_truncates_long_text():
    assert center("abcdef", 3, " ") == "abc"


def test_center_empty_gives_blank_line():
    assert center("", 66, " ") == " " * 66


def test_england_september_1752():
    date = HistoricDate.from_date(1752, 9, 1, Locale.ENGLAND)
    expected = (
        "   September 1752   \n"
        "Su Mo Tu We Th Fr Sa\n"
        "       1  2 14 15 16\n"
        "17 18 19 20 21 22 23\n"
        "24 25 26 27 28 29 30\n"
        "\n\n\n"
    )
    assert format_month(date) == expected


def test_month_has_eight_lines():
    date = HistoricDate.from_gregorian(2024, 5, 10)
    lines = format_month(date).split("\n")
    assert len(lines) == 9
    assert lines[-1] == ""
    assert lines[1] == "Su Mo Tu We Th Fr Sa"


def test_month_lists_all_days_in_order():
    date = HistoricDate.from_gregorian(2023, 7, 4)
    assert _days(format_month(date)) == list(range(1, 32))


@pytest.mark.parametrize("year, length", [(2024, 29), (2023, 28), (1900, 28)])
def test_gregorian_february_lengths(year, length):
    date = HistoricDate.from_gregorian(year, 2, 1)
    assert _days(format_month(date)) == list(range(1, length + 1))


def test_julian_leap_1900():
    date = HistoricDate.from_julian(1900, 2, 1)
    assert _days(format_month(date))[-1] == 29


def test_month_argument_overrides_date():
    date = HistoricDate.from_gregorian(2024, 5, 10)
    assert format_month(date, 2) == format_month(HistoricDate.from_gregorian(2024, 2, 1))


def test_style_one_title_fills_with_newlines():
    date = HistoricDate.from_gregorian(2024, 1, 1)
    text = format_month(date, 1, 1)
    assert text.startswith(center("January", 20, "\n") + "\n")
    assert "2024" not in text.split("Su")[0]


def test_other_style_title_without_year():
    date = HistoricDate.from_gregorian(2024, 3, 1)
    first = format_month(date, 3, 10).split("\n")[0]
    assert first == center("March", 20, " ")


def test_invalid_month_raises():
    date = HistoricDate.from_gregorian(2024, 3, 1)
    with pytest.raises(ValueError):
        format_month(date, 13)


def test_year_three_columns_shape():
    date = HistoricDate.from_gregorian(2024, 1, 1)
    lines = format_year(date).split("\n")
    assert lines[-1] == ""
    lines = lines[:-1]
    assert len(lines) == 2 + 4 * 8
    assert lines[0] == center("2024", 66, " ")
    assert lines[1] == " " * 66
    assert all(len(line) == 66 for line in lines[2:])


def test_year_three_columns_titles():
    date = HistoricDate.from_gregorian(2024, 1, 1)
    lines = format_year(date).split("\n")
    assert re.split(r"\s{2,}", lines[2].strip()) == ["January", "February", "March"]
    assert lines[3] == "   ".join(["Su Mo Tu We Th Fr Sa"] * 3)


def test_year_single_column_matches_months():
    date = HistoricDate.from_gregorian(2024, 6, 1)
    lines = format_year(date, single=True).split("\n")[:-1]
    assert len(lines) == 1 + 12 * 8
    assert lines[0] == center("2024", 20, " ")
    assert all(len(line) == 20 for line in lines[1:])
    march = lines[1 + 2 * 8 : 1 + 3 * 8]
    expected = [row.ljust(20) for row in format_month(date, 3, 10).split("\n")[:8]]
    assert march == expected


def test_reform_year_contains_gap():
    date = HistoricDate.from_date(1752, 1, 1, Locale.ENGLAND)
    text = format_year(date, single=True)
    september = text.split("\n")[1 + 8 * 8 : 1 + 9 * 8]
    numbers = [int(t) for line in september[2:] for t in line.split()]
    assert 3 not in numbers and 13 not in numbers
    assert numbers[:3] == [1, 2, 14]