import pytest

from scrapless.schemas import QuantityExpression as Q
from scrapless.shopping import merge_quantities

LIST = [
    Q(quantity=1, unit="cup", item_name="milk"),
    Q(quantity=2, unit="kg", item_name="rice"),
    Q(quantity=500, unit="ml", item_name="Milk"),
    Q(quantity=1, unit="furlong", item_name="twine"),
]


def test_merges_same_item_in_base_unit():
    merged = merge_quantities(LIST)
    assert [(m.item_name, m.unit) for m in merged] == [("milk", "ml"), ("rice", "g"), ("twine", "furlong")]
    assert merged[0].quantity == 740
    assert merged[1].quantity == 2000


def test_target_unit_applied_where_dimension_allows():
    merged = merge_quantities(LIST, target_unit="l")
    assert merged[0].unit == "l"
    assert merged[0].quantity == pytest.approx(0.74)
    assert (merged[1].quantity, merged[1].unit) == (2000, "g")


def test_different_dimensions_stay_separate():
    merged = merge_quantities([
        Q(quantity=2, unit="pcs", item_name="tomato"),
        Q(quantity=500, unit="g", item_name="tomato"),
    ])
    assert [(m.quantity, m.unit) for m in merged] == [(2, "pcs"), (500, "g")]


def test_unknown_unit_keeps_position():
    merged = merge_quantities([
        Q(quantity=1, unit="furlong", item_name="twine"),
        Q(quantity=1, unit="kg", item_name="beef"),
    ])
    assert [m.item_name for m in merged] == ["twine", "beef"]
