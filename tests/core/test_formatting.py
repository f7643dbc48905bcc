import pytest

from core.formatting import (
    extract_date,
    filter_echo,
    first_present,
    format_currency,
    format_history,
    format_percent,
    parse_number,
    render_fields,
    trend,
    truncation_notice,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("$158.00", 158.0),
        ("$1,200.50", 1200.5),
        (" 42 ", 42.0),
        (7, 7.0),
        (0.25, 0.25),
        ("n/a", None),
        ("", None),
        (None, None),
        (True, None),
        ([1], None),
        ("NaN", None),
        ("inf", None),
        ("-Infinity", None),
        ("1_000", None),
        (float("nan"), None),
        (float("inf"), None),
        (10 ** 400, None),
    ],
)
def test_parse_number(value, expected):
    assert parse_number(value) == expected


def test_format_percent():
    assert format_percent(0.1534) == "15.3%"
    assert format_percent("0.42") == "42.0%"
    assert format_percent(None) == "N/A"
    assert format_percent("NaN") == "N/A"


def test_format_currency():
    assert format_currency("$1200.5") == "$1,200.50"
    assert format_currency("free") is None


class TestTrend:
    def test_up(self):
        assert trend(110, 100) == "↑10.0%"

    def test_down(self):
        assert trend(90, 100) == "↓10.0%"

    def test_flat(self):
        assert trend(100, 100) == "→0.0%"

    def test_previous_zero_is_empty(self):
        assert trend(5, 0) == ""

    def test_unparseable_is_empty(self):
        assert trend("abc", 100) == ""
        assert trend(100, None) == ""
        assert trend("NaN", 0.4) == ""
        assert trend(0.4, "inf") == ""

    def test_fractions_and_currency_strings(self):
        assert trend(0.42, 0.40) == "↑5.0%"
        assert trend("$90.00", "$100.00") == "↓10.0%"


def test_extract_date_plain_and_wrapped():
    assert extract_date("2025-07-01") == "2025-07-01"
    assert extract_date({"value": "2025-07-02"}) == "2025-07-02"
    assert extract_date({"other": "x"}) is None
    assert extract_date(None) is None


def test_render_fields_skips_blank_values():
    row = {"title": "Shoe", "price": "$10", "note": "", "score": None, "tags": ["a", "b"], "date": "d"}
    text = render_fields(row, skip=("date",))
    assert text == "  title: Shoe\n  price: $10\n  tags: a, b\n"


def test_format_history_keeps_last_points():
    history = [{"date": f"2025-07-0{i}", "market_share": i / 10} for i in range(1, 10)]
    text = format_history(history, 3, ("market_share",), as_percent=True)
    assert text == "2025-07-07: 70.0% → 2025-07-08: 80.0% → 2025-07-09: 90.0%"


def test_format_history_scalars_and_garbage():
    assert format_history([3, 2, 1], 5, ("position",)) == "3 → 2 → 1"
    assert format_history("not a list", 5, ("position",)) == ""


def test_truncation_notice():
    assert truncation_notice(50, 50) == ""
    assert "... and 12 more rows (showing first 50)." in truncation_notice(62, 50)


def test_filter_echo():
    assert filter_echo({"q": "leggings", "source": None, "device": ""}) == ' (search term: "leggings")'


def test_first_present():
    assert first_present({"a": None, "b": 0, "c": 1}, "a", "b", "c") == 0
    assert first_present({}, "a") is None
