import pytest

from basketstat.ingest import clean_cell, extract_player_identity, is_player_cell, parse_stat_value
from basketstat.models import ABSENT, Absent, Count, MadeAttempted, RawText


@pytest.mark.parametrize(
    "cell, expected",
    [
        ("9-19", MadeAttempted(made=9, attempted=19)),
        ("47%", Count(value=47)),
        ("-", ABSENT),
        ("", ABSENT),
        ("10", Count(value=10)),
        ("abc", RawText(text="abc")),
    ],
)
def test_parse_stat_value_examples(cell, expected):
    assert parse_stat_value(cell) == expected


def test_parse_stat_value_strips_quotes_and_whitespace():
    assert parse_stat_value('  "3-4" ') == MadeAttempted(made=3, attempted=4)
    assert parse_stat_value("'12'") == Count(value=12)
    assert parse_stat_value('" - "') == ABSENT


def test_parse_stat_value_percentages():
    assert parse_stat_value("47.5%") == Count(value=47)
    assert parse_stat_value("%") == ABSENT
    assert parse_stat_value("n/a%") == ABSENT


def test_parse_stat_value_signed_and_decimal_numbers():
    assert parse_stat_value("-3") == Count(value=-3)
    assert parse_stat_value("+5") == Count(value=5)
    assert parse_stat_value("1.5") == Count(value=1.5)


def test_parse_stat_value_keeps_unrecognised_text():
    assert parse_stat_value("12:30") == RawText(text="12:30")
    assert parse_stat_value("nan") == RawText(text="nan")
    assert parse_stat_value("DNP - coach") == RawText(text="DNP - coach")


def test_clean_cell_only_strips_matching_quotes():
    assert clean_cell('"abc"') == "abc"
    assert clean_cell("'abc'") == "abc"
    assert clean_cell('"abc') == '"abc'


def test_extract_player_identity():
    identity = extract_player_identity("#22 Christoffer")
    assert identity.number == 22
    assert identity.name == "Christoffer"


def test_extract_player_identity_without_number():
    identity = extract_player_identity("TeamTotal")
    assert identity.number is None
    assert identity.name == "TeamTotal"


def test_extract_player_identity_trims_name():
    identity = extract_player_identity('"#7   Sam Larsen  "')
    assert identity.number == 7
    assert identity.name == "Sam Larsen"


def test_is_player_cell():
    assert is_player_cell("#4 Ola")
    assert not is_player_cell("Totals")


@pytest.mark.parametrize(
    "cell",
    ["1e999", "-1e999", "%", "--", "''", '""', "\x00", "9" * 400, "9" * 5000 + "%", "9" * 5000 + "-1", "1-", "-5-3", "#", "  "],
)
def test_parse_stat_value_never_raises(cell):
    value = parse_stat_value(cell)

    assert isinstance(value, (Absent, Count, MadeAttempted, RawText))


def test_extract_player_identity_with_oversized_number():
    identity = extract_player_identity("#" + "9" * 5000 + " Alex")

    assert identity.number is None
    assert identity.name.endswith("Alex")
