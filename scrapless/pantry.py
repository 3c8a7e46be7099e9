# scrapless/pantry.py — expiration forecasts and stock deduction
from __future__ import annotations
import os
from datetime import date, timedelta
from typing import Optional

from .errors import (
    InsufficientQuantityError,
    ItemMismatchError,
    MismatchedUnitTypeError,
    UnrecognizedUnitError,
)
from .impact import lookup_impact
from .schemas import PantryForecast, QuantityExpression
from .utils.units import convert, unit_family

EXPIRING_SOON_DAYS = int(os.getenv("SCRAPLESS_EXPIRING_SOON_DAYS", "3"))


def predict_expiration(item_name: str, logged_on: date) -> date:
    return logged_on + timedelta(days=lookup_impact(item_name).shelf_life_days)


def forecast(item_name: str, logged_on: date, today: Optional[date] = None) -> PantryForecast:
    today = today or date.today()
    shelf = lookup_impact(item_name).shelf_life_days
    expires = logged_on + timedelta(days=shelf)
    days_left = (expires - today).days

    if days_left < 0:
        status = "expired"
    elif days_left <= EXPIRING_SOON_DAYS:
        status = "expiring_soon"
    else:
        status = "ok"

    return PantryForecast(
        item_name=item_name,
        logged_on=logged_on,
        shelf_life_days=shelf,
        estimated_expiration_date=expires,
        days_left=days_left,
        status=status,
    )


def deduct_usage(stock: QuantityExpression, used: QuantityExpression) -> QuantityExpression:
    """Take `used` out of `stock`, answering in the stock's own unit.

    Both must name the same item (case and surrounding spaces ignored). The
    used amount goes through the conversion table with the stock's item name,
    so "1 kg rice" minus "250 g" leaves 0.75 kg.
    """
    if used.item_name.strip().lower() != stock.item_name.strip().lower():
        raise ItemMismatchError(stock.item_name, used.item_name)

    used_family = unit_family(used.unit, stock.item_name)
    if used_family is None:
        raise UnrecognizedUnitError(used.unit, stock.item_name)
    stock_family = unit_family(stock.unit, stock.item_name)
    if stock_family is None:
        raise UnrecognizedUnitError(stock.unit, stock.item_name)
    if used_family != stock_family:
        raise MismatchedUnitTypeError(used_family.value, stock.unit, stock.item_name)

    used_in_stock_unit = convert(used.quantity, used.unit, stock.unit, stock.item_name).quantity
    remaining = stock.quantity - used_in_stock_unit
    if remaining < -1e-9:
        raise InsufficientQuantityError(stock.item_name, stock.quantity, used_in_stock_unit, stock.unit)
    return QuantityExpression(quantity=max(remaining, 0.0), unit=stock.unit, item_name=stock.item_name)
