# scrapless/parsers.py — free-text waste/pantry lines → QuantityExpression
import re
from typing import List, Optional, Tuple

from .schemas import QuantityExpression
from .utils.units import CATEGORIES, normalize_unit

# ------------------ Units ------------------
# keys are already through normalize_unit (lowercase, trailing "s" gone)
UNIT_ALIASES = {
    'pound': 'lb', 'kilogram': 'kg', 'kilo': 'kg', 'gramme': 'g', 'milligram': 'mg',
    'ounce': 'oz', 'litre': 'liter', 'milliliter': 'ml', 'millilitre': 'ml',
    'tablespoon': 'tbsp', 'teaspoon': 'tsp', 'fluid ounce': 'fl oz', 'fl. oz': 'fl oz',
    'head': 'pcs', 'slice': 'pcs', 'pack': 'pcs', 'each': 'pcs', 'pc': 'pcs',
    'leave': 'leaf',  # "leaves" minus its "s"
}
# item words that double as count units in the table; never split off as units
ITEM_WORD_UNITS = {'potato'}
LIQUID_WORDS = ('milk', 'juice', 'water', 'soda', 'broth', 'oil', 'vinegar', 'sauce')


def _canon_unit(token: str) -> Optional[str]:
    u = normalize_unit(token)
    u = UNIT_ALIASES.get(u, u)
    if u in ITEM_WORD_UNITS:
        return None
    return u if any(u in c.factors for c in CATEGORIES) else None


def _split(body: str) -> List[str]:
    # split on commas, semicolons or newlines
    return [p for p in re.split(r",|;|\n", body) if p and p.strip()]


# "2", "1.5", "1/2" or a mixed number "3 1/2"
ITEM_RE = re.compile(
    r"^\s*(?:(?P<whole>\d+)\s+(?=\d+\s*/))?"
    r"(?P<num>\d+(?:\.\d+)?)(?:\s*/\s*(?P<den>\d+(?:\.\d+)?))?"
    r"\s*(?P<rest>.+?)\s*$"
)


def _parse_qty(m: re.Match) -> Optional[float]:
    qty = float(m.group('num'))
    if m.group('den') is not None:
        den = float(m.group('den'))
        if not den:
            return None
        qty /= den
    if m.group('whole'):
        qty += int(m.group('whole'))
    return qty


def _take_unit(rest: str) -> Tuple[Optional[str], str]:
    """Split a leading unit off `rest`; two-word units ("fl oz") are tried first."""
    words = rest.split()
    for n in (2, 1):
        if len(words) > n - 1:
            unit = _canon_unit(' '.join(words[:n]))
            if unit:
                name = ' '.join(words[n:])
                if name.lower().startswith('of '):
                    name = name[3:]
                return unit, name.strip()
    return None, rest.strip()


def infer_unit(name: str) -> str:
    n = name.lower()
    if any(w in n for w in LIQUID_WORDS):
        return 'l'
    return 'pcs'


def parse_line(part: str) -> Optional[QuantityExpression]:
    m = ITEM_RE.match(part)
    if not m:
        return None
    qty = _parse_qty(m)
    if qty is None:
        return None
    unit, name = _take_unit(m.group('rest'))
    if not name:
        # "2 potatoes": the unit word is the item
        name, unit = m.group('rest').strip(), None
    name = name.lower()
    if len(name) < 2:
        return None
    return QuantityExpression(quantity=qty, unit=unit or infer_unit(name), item_name=name)


def parse_text(body: str) -> List[QuantityExpression]:
    items: List[QuantityExpression] = []
    if not body:
        return items
    for part in _split(body):
        expr = parse_line(part)
        if expr:
            items.append(expr)
    return items
