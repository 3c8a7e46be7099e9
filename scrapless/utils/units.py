# scrapless/utils/units.py — conversion table for ingredient quantities
from __future__ import annotations
from typing import Optional, Tuple, Union

from ..errors import MismatchedUnitTypeError, UnrecognizedUnitError
from ..schemas import BaseUnit, ConversionCategory, ConvertedQuantity

# --- categories -------------------------------------------------------------
WEIGHT = ConversionCategory(
    name="weight",
    base_unit=BaseUnit.GRAM,
    factors={"kg": 1000, "g": 1, "gram": 1, "mg": 0.001, "oz": 28.35, "lb": 453.592},
)
VOLUME = ConversionCategory(
    name="volume",
    base_unit=BaseUnit.MILLILITER,
    factors={
        "l": 1000, "liter": 1000, "ml": 1,
        "cup": 240,  # US cup
        "tbsp": 15, "tsp": 5, "fl oz": 29.5735,
    },
)
QUANTITY = ConversionCategory(
    name="quantity",
    base_unit=BaseUnit.PIECE,
    factors={
        "pcs": 1,
        "pc": 1,  # what "pcs" becomes once the plural "s" is stripped
        "piece": 1, "dozen": 12,
        "potato": 1,
    },
)
GARLIC = ConversionCategory(
    name="garlic",
    base_unit=BaseUnit.CLOVE,
    factors={"bulb": 10, "clove": 1},  # ~10 cloves per bulb
)
HERBS = ConversionCategory(
    name="herbs",
    base_unit=BaseUnit.LEAF,
    factors={"sprig": 5, "bunch": 50, "leaf": 1},
)

# table order is the search order for base-unit matches
CATEGORIES: Tuple[ConversionCategory, ...] = (WEIGHT, VOLUME, QUANTITY, GARLIC, HERBS)

# item keyword → ingredient-specific category, first match wins
INGREDIENT_CATEGORIES: Tuple[Tuple[str, ConversionCategory], ...] = (
    ("garlic", GARLIC),
)

# checked against the item name, in this order, before defaulting to QUANTITY
_NAME_HINT_CATEGORIES: Tuple[ConversionCategory, ...] = (WEIGHT, VOLUME)
# last-chance lookup when the resolved category doesn't know the unit
_GENERIC_FALLBACKS: Tuple[ConversionCategory, ...] = (WEIGHT, VOLUME, QUANTITY)


# --- helpers ----------------------------------------------------------------
def normalize_unit(unit: Optional[str]) -> str:
    """Lowercase and drop one trailing "s" ("Cups" → "cup"). Irregular plurals are not handled."""
    u = (unit or "").strip().lower()
    return u[:-1] if u.endswith("s") else u


def resolve_category(item_name: str) -> ConversionCategory:
    """Pick the most specific category for an item. Never fails.

    Ingredient keywords win. Next the item *name* is tested against the unit
    tokens of weight, then volume, so any name containing "g" or "l" lands in
    one of those. Everything else is counted in pieces.
    """
    n = (item_name or "").lower()
    for key, category in INGREDIENT_CATEGORIES:
        if key in n:
            return category
    for category in _NAME_HINT_CATEGORIES:
        if any(u in n for u in category.factors):
            return category
    return QUANTITY


def _as_base_unit(base_unit: Union[BaseUnit, str], item_name: str) -> BaseUnit:
    if isinstance(base_unit, BaseUnit):
        return base_unit
    try:
        return BaseUnit((base_unit or "").strip().lower())
    except ValueError:
        raise UnrecognizedUnitError(str(base_unit), item_name) from None


# --- public API -------------------------------------------------------------
def normalize_to_base_unit(quantity: float, unit: str, item_name: str) -> ConvertedQuantity:
    u = normalize_unit(unit)
    category = resolve_category(item_name)
    factor = category.factors.get(u)
    if factor is not None:
        return ConvertedQuantity(quantity=quantity * factor, unit=category.base_unit.value)

    for generic in _GENERIC_FALLBACKS:
        factor = generic.factors.get(u)
        if factor is not None:
            return ConvertedQuantity(quantity=quantity * factor, unit=generic.base_unit.value)

    raise UnrecognizedUnitError(unit, item_name)


def denormalize_from_base_unit(
    quantity: float,
    base_unit: Union[BaseUnit, str],
    target_unit: str,
    item_name: str,
) -> ConvertedQuantity:
    base = _as_base_unit(base_unit, item_name)
    u = normalize_unit(target_unit)
    category = resolve_category(item_name)

    if category.base_unit != base:
        chosen = next(
            (c for c in CATEGORIES if c.base_unit == base and u in c.factors), None
        )
        if chosen is None:
            raise MismatchedUnitTypeError(base.value, target_unit, item_name)
    elif u in category.factors:
        chosen = category
    else:
        chosen = next(
            (c for c in CATEGORIES if c.base_unit == base and u in c.factors), None
        )
        if chosen is None:
            raise UnrecognizedUnitError(target_unit, item_name)

    return ConvertedQuantity(quantity=quantity / chosen.factors[u], unit=target_unit)


def convert(quantity: float, unit: str, target_unit: str, item_name: str) -> ConvertedQuantity:
    base = normalize_to_base_unit(quantity, unit, item_name)
    return denormalize_from_base_unit(base.quantity, base.unit, target_unit, item_name)


def unit_family(unit: Optional[str], item_name: Optional[str] = None) -> Optional[BaseUnit]:
    """Base unit a unit token converts into, or None if no table knows it."""
    u = normalize_unit(unit)
    if item_name:
        category = resolve_category(item_name)
        if u in category.factors:
            return category.base_unit
    for generic in _GENERIC_FALLBACKS:
        if u in generic.factors:
            return generic.base_unit
    return None
