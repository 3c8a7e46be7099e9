from datetime import date

import pytest

from scrapless.errors import (
    ConversionError,
    InsufficientQuantityError,
    ItemMismatchError,
    MismatchedUnitTypeError,
    UnrecognizedUnitError,
)
from scrapless.pantry import deduct_usage, forecast, predict_expiration
from scrapless.schemas import QuantityExpression as Q

LOGGED = date(2026, 1, 1)


def test_predict_expiration_uses_shelf_life():
    assert predict_expiration("tomato", LOGGED) == date(2026, 1, 11)
    assert predict_expiration("xylophone", LOGGED) == date(2026, 1, 8)


def test_forecast_expiring_soon():
    f = forecast("fish fillet", LOGGED, today=LOGGED)
    assert f.shelf_life_days == 2
    assert f.estimated_expiration_date == date(2026, 1, 3)
    assert f.days_left == 2
    assert f.status == "expiring_soon"


def test_forecast_expired():
    f = forecast("fish fillet", LOGGED, today=date(2026, 1, 5))
    assert f.days_left == -2
    assert f.status == "expired"


def test_forecast_ok():
    assert forecast("rice", LOGGED, today=date(2026, 2, 1)).status == "ok"


def test_deduct_across_units():
    left = deduct_usage(Q(quantity=1, unit="kg", item_name="rice"), Q(quantity=250, unit="g", item_name="rice"))
    assert left.unit == "kg"
    assert left.quantity == pytest.approx(0.75)


def test_deduct_everything_leaves_zero():
    left = deduct_usage(Q(quantity=2, unit="bulbs", item_name="garlic"), Q(quantity=20, unit="cloves", item_name="garlic"))
    assert left.quantity == 0


def test_deduct_more_than_stock():
    with pytest.raises(InsufficientQuantityError) as exc:
        deduct_usage(Q(quantity=2, unit="cups", item_name="milk"), Q(quantity=600, unit="ml", item_name="milk"))
    assert exc.value.requested == pytest.approx(2.5)


def test_deduct_incompatible_units():
    with pytest.raises(ConversionError):
        deduct_usage(Q(quantity=6, unit="pcs", item_name="egg"), Q(quantity=1, unit="kg", item_name="egg"))


def test_deduct_other_item_is_rejected():
    with pytest.raises(ItemMismatchError) as exc:
        deduct_usage(Q(quantity=1, unit="kg", item_name="rice"), Q(quantity=250, unit="g", item_name="beef"))
    assert exc.value.stock_item == "rice"
    assert exc.value.used_item == "beef"


def test_deduct_matches_names_ignoring_case_and_spaces():
    left = deduct_usage(Q(quantity=1, unit="kg", item_name="Rice"), Q(quantity=500, unit="g", item_name=" rice "))
    assert left.item_name == "Rice"
    assert left.quantity == pytest.approx(0.5)


def test_deduct_checks_dimension_before_converting():
    with pytest.raises(MismatchedUnitTypeError):
        deduct_usage(Q(quantity=6, unit="pcs", item_name="tomato"), Q(quantity=200, unit="g", item_name="tomato"))


def test_deduct_unknown_used_unit():
    with pytest.raises(UnrecognizedUnitError):
        deduct_usage(Q(quantity=6, unit="pcs", item_name="tomato"), Q(quantity=1, unit="furlong", item_name="tomato"))
