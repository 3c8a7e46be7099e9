# scrapless/impact.py — peso value, carbon footprint and shelf life by food keyword
from __future__ import annotations
from typing import Tuple

from .schemas import BaseUnit, ImpactRecord

G, ML, PCS = BaseUnit.GRAM, BaseUnit.MILLILITER, BaseUnit.PIECE


def _rec(keyword: str, peso: float, co2e: float, shelf_days: int,
         ref_qty: float = 1.0, ref_unit: BaseUnit = PCS) -> Tuple[str, ImpactRecord]:
    return keyword, ImpactRecord(
        keyword=keyword,
        unit_value=peso,
        carbon_footprint_per_unit=co2e,
        shelf_life_days=shelf_days,
        reference_quantity=ref_qty,
        reference_unit=ref_unit,
    )


# Ordered: the first keyword found in the item name wins ("chicken rice" → rice).
IMPACT_TABLE: Tuple[Tuple[str, ImpactRecord], ...] = (
    _rec("rice",    5,  0.1,  365, 240, ML),  # per cup
    _rec("bread",   10, 0.05, 7),             # per slice
    _rec("chicken", 40, 0.5,  3,   100, G),
    _rec("beef",    80, 2.5,  4,   100, G),
    _rec("pork",    60, 1.0,  4,   100, G),
    _rec("fish",    50, 0.3,  2,   100, G),
    _rec("lettuce", 15, 0.02, 7),             # per head
    _rec("tomato",  8,  0.03, 10),
    _rec("apple",   20, 0.04, 30),
    _rec("banana",  10, 0.08, 5),
    _rec("orange",  15, 0.05, 21),
    _rec("pasta",   25, 0.15, 365, 240, ML),  # per cup cooked
    _rec("potato",  12, 0.02, 60),
    _rec("cheese",  50, 0.8,  21,  50, G),    # per slice
    _rec("egg",     9,  0.2,  28),
    _rec("milk",    60, 0.3,  7,   1000, ML),
    _rec("yogurt",  30, 0.2,  14),            # per cup
)

DEFAULT_IMPACT = ImpactRecord(
    keyword="",
    unit_value=5,
    carbon_footprint_per_unit=0.1,
    shelf_life_days=7,
)


def lookup_impact(item_name: str) -> ImpactRecord:
    """Return the first matching record, or DEFAULT_IMPACT for unknown foods."""
    n = (item_name or "").lower()
    for key, record in IMPACT_TABLE:
        if key in n:
            return record
    return DEFAULT_IMPACT
