import pytest

from scrapless.parsers import parse_line, parse_text


def _triples(body):
    return [(e.quantity, e.unit, e.item_name) for e in parse_text(body)]


def test_commas_semicolons_and_newlines():
    assert _triples("2 kg beef, 3 cups rice\n1/2 l milk; 4 eggs") == [
        (2, "kg", "beef"),
        (3, "cup", "rice"),
        (0.5, "l", "milk"),
        (4, "pcs", "eggs"),
    ]


@pytest.mark.parametrize("line,expected", [
    ("1 pound Ground Beef", (1, "lb", "ground beef")),
    ("2 fl oz vanilla", (2, "fl oz", "vanilla")),
    ("1 bunch of basil", (1, "bunch", "basil")),
    ("2 pcs bread", (2, "pcs", "bread")),
    ("3 cloves garlic", (3, "clove", "garlic")),
    ("2 potatoes", (2, "pcs", "potatoes")),
    ("2 potato", (2, "pcs", "potato")),
    ("3 milk", (3, "l", "milk")),
    ("1.5 kilograms pork", (1.5, "kg", "pork")),
])
def test_parse_line(line, expected):
    e = parse_line(line)
    assert (e.quantity, e.unit, e.item_name) == expected


@pytest.mark.parametrize("line", ["hello", "2 x", "1/0 kg beef", "", "kg beef"])
def test_unparseable_lines_are_skipped(line):
    assert parse_text(line) == []


@pytest.mark.parametrize("line,expected", [
    ("3 1/2 cups flour", (3.5, "cup", "flour")),
    ("1 1/4 kg beef", (1.25, "kg", "beef")),
    ("2 1/2 tomatoes", (2.5, "pcs", "tomatoes")),
])
def test_mixed_numbers(line, expected):
    e = parse_line(line)
    assert (e.quantity, e.unit, e.item_name) == expected


def test_mixed_number_with_zero_denominator_is_skipped():
    assert parse_line("1 1/0 kg beef") is None
