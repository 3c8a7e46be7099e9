# scrapless/shopping.py — merge shopping-list lines written in different units
from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Tuple

from .errors import ConversionError
from .schemas import QuantityExpression
from .utils.units import denormalize_from_base_unit, normalize_to_base_unit


def merge_quantities(
    entries: Iterable[QuantityExpression],
    target_unit: Optional[str] = None,
) -> List[QuantityExpression]:
    """Sum lines for the same item, e.g. "1 cup milk" + "500 ml milk" → 740 ml.

    Lines are grouped by lowercase item name and base unit, in first-seen
    order. With `target_unit`, each group is expressed in that unit when its
    dimension allows; otherwise it stays in its base unit. Lines whose unit
    no table knows are passed through untouched.
    """
    totals: Dict[Tuple[str, str], float] = {}
    names: Dict[Tuple[str, str], str] = {}
    order: List[Tuple[str, str]] = []
    passthrough: List[Tuple[int, QuantityExpression]] = []

    for e in entries:
        try:
            base = normalize_to_base_unit(e.quantity, e.unit, e.item_name)
        except ConversionError as err:
            print(f"[shopping] keeping line as-is: {err}")
            passthrough.append((len(order), e))
            continue
        key = (e.item_name.strip().lower(), base.unit)
        if key not in totals:
            totals[key] = 0.0
            names[key] = e.item_name.strip()
            order.append(key)
        totals[key] += base.quantity

    merged: List[QuantityExpression] = []
    for key in order:
        qty, unit = totals[key], key[1]
        if target_unit:
            try:
                out = denormalize_from_base_unit(qty, unit, target_unit, names[key])
                qty, unit = out.quantity, out.unit
            except ConversionError as err:
                print(f"[shopping] {err} Leaving {names[key]!r} in {unit}.")
        merged.append(QuantityExpression(quantity=qty, unit=unit, item_name=names[key]))

    # unconvertible lines go back where they appeared relative to merged groups
    for offset, (pos, e) in enumerate(passthrough):
        merged.insert(pos + offset, e)
    return merged
