# scrapless/calculator.py
from __future__ import annotations
import os
from typing import Iterable, List, Tuple

from .errors import ConversionError
from .impact import lookup_impact
from .schemas import ImpactRecord, ItemValuation, QuantityExpression, ValuationResult
from .utils.units import normalize_to_base_unit

ROUND_DIGITS = int(os.getenv("SCRAPLESS_ROUND_DIGITS", "3"))


def reference_units(expr: QuantityExpression, record: ImpactRecord) -> Tuple[float, str]:
    """How many of the record's reference amounts `expr` is worth.

    Returns (amount, basis). basis is "normalized" when the quantity could be
    put in the record's base unit, otherwise "raw" and the entered quantity
    counts one reference amount per unit.
    """
    try:
        base = normalize_to_base_unit(expr.quantity, expr.unit, expr.item_name)
    except ConversionError as e:
        print(f"[calc] {e} Counting {expr.quantity} as reference amounts.")
        return expr.quantity, "raw"

    if base.unit != record.reference_unit.value:
        print(
            f"[calc] {expr.item_name!r}: {expr.quantity} {expr.unit} is {base.unit}, "
            f"impact is per {record.reference_quantity:g} {record.reference_unit.value}; using raw quantity"
        )
        return expr.quantity, "raw"
    return base.quantity / record.reference_quantity, "normalized"


def value_item(expr: QuantityExpression) -> ItemValuation:
    record = lookup_impact(expr.item_name)
    amount, basis = reference_units(expr, record)
    return ItemValuation(
        item_name=expr.item_name,
        quantity=expr.quantity,
        unit=expr.unit,
        keyword=record.keyword,
        reference_units=amount,
        basis=basis,
        peso_value=round(amount * record.unit_value, 2),
        carbon_footprint=round(amount * record.carbon_footprint_per_unit, ROUND_DIGITS),
    )


def value_items(items: Iterable[QuantityExpression]) -> ValuationResult:
    total_peso = 0.0
    total_co2 = 0.0
    breakdown: List[ItemValuation] = []

    for expr in items:
        if not (expr.item_name or "").strip():
            continue
        v = value_item(expr)
        total_peso += v.peso_value
        total_co2 += v.carbon_footprint
        breakdown.append(v)

    return ValuationResult(
        total_peso_value=round(total_peso, 2),
        total_carbon_footprint=round(total_co2, ROUND_DIGITS),
        items=breakdown,
    )
