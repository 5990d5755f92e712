import pytest

from wildwater.avl import MAX_ID_LEN
from wildwater.csv_parser import (
    MAX_LINE_LENGTH,
    LineType,
    parse_csv_line,
    parse_float,
)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("-", -1.0),
        (None, -1.0),
        ("3442", 3442.0),
        ("12.5", 12.5),
        ("abc", 0.0),
        ("", 0.0),
        ("  7x", 7.0),
        ("-2.5", -2.5),
    ],
)
def test_parse_float(token, expected):
    assert parse_float(token) == expected


def test_plant_line():
    seg = parse_csv_line("-;Unit #AB000001T;-;3442;-\n")
    assert seg.type is LineType.PLANT
    assert seg.plant_id == ""
    assert seg.upstream_id == "Unit #AB000001T"
    assert seg.downstream_id == ""
    assert seg.volume_or_capacity == 3442.0
    assert seg.leak_percentage == -1.0


def test_capture_line():
    seg = parse_csv_line("-;Spring #1;Unit #A;100;5.5\r\n")
    assert seg.type is LineType.CAPTURE
    assert seg.upstream_id == "Spring #1"
    assert seg.downstream_id == "Unit #A"
    assert seg.volume_or_capacity == 100.0
    assert seg.leak_percentage == 5.5


def test_missing_trailing_columns():
    seg = parse_csv_line("-;Unit #A")
    assert seg.downstream_id == ""
    assert seg.volume_or_capacity == -1.0
    assert seg.leak_percentage == -1.0
    assert seg.type is LineType.CAPTURE


def test_consecutive_delimiters_collapse():
    seg = parse_csv_line("-;;A;B;10;2")
    assert seg.upstream_id == "A"
    assert seg.downstream_id == "B"
    assert seg.volume_or_capacity == 10.0
    assert seg.leak_percentage == 2.0


def test_leading_spaces_removed():
    seg = parse_csv_line("Plant X; Unit #A; Tank #2;50;1")
    assert seg.plant_id == "Plant X"
    assert seg.upstream_id == "Unit #A"
    assert seg.downstream_id == "Tank #2"


def test_long_identifier_truncated():
    seg = parse_csv_line("-;" + "u" * 60 + ";-;1;-")
    assert seg.upstream_id == "u" * (MAX_ID_LEN - 1)


def test_newline_only_line():
    seg = parse_csv_line("\n")
    assert (seg.plant_id, seg.upstream_id, seg.downstream_id) == ("", "", "")
    assert seg.type is LineType.CAPTURE


@pytest.mark.parametrize("line", ["", None, "x" * MAX_LINE_LENGTH])
def test_rejected_lines(line):
    with pytest.raises(ValueError):
        parse_csv_line(line)