from .errors import (
    ConversionError,
    InsufficientQuantityError,
    ItemMismatchError,
    MismatchedUnitTypeError,
    UnrecognizedUnitError,
)
from .impact import DEFAULT_IMPACT, IMPACT_TABLE, lookup_impact
from .schemas import BaseUnit, ConvertedQuantity, ImpactRecord, QuantityExpression
from .utils.units import convert, denormalize_from_base_unit, normalize_to_base_unit

__all__ = [
    "BaseUnit",
    "ConversionError",
    "ConvertedQuantity",
    "DEFAULT_IMPACT",
    "IMPACT_TABLE",
    "ImpactRecord",
    "InsufficientQuantityError",
    "ItemMismatchError",
    "MismatchedUnitTypeError",
    "QuantityExpression",
    "UnrecognizedUnitError",
    "convert",
    "denormalize_from_base_unit",
    "lookup_impact",
    "normalize_to_base_unit",
]
