# scrapless/errors.py
from __future__ import annotations


class ConversionError(ValueError):
    """Base class for every unit conversion failure."""


class UnrecognizedUnitError(ConversionError):
    def __init__(self, unit: str, item_name: str):
        self.unit = unit
        self.item_name = item_name
        super().__init__(f'Unrecognized unit "{unit}" for item "{item_name}".')


class MismatchedUnitTypeError(ConversionError):
    def __init__(self, base_unit: str, target_unit: str, item_name: str):
        self.base_unit = base_unit
        self.target_unit = target_unit
        self.item_name = item_name
        super().__init__(
            f'Cannot convert from base unit "{base_unit}" to "{target_unit}" '
            f'for item "{item_name}". Mismatched types.'
        )


class InsufficientQuantityError(ConversionError):
    def __init__(self, item_name: str, available: float, requested: float, unit: str):
        self.item_name = item_name
        self.available = available
        self.requested = requested
        self.unit = unit
        super().__init__(
            f'Not enough "{item_name}": {available} {unit} in stock, {requested} {unit} requested.'
        )


class ItemMismatchError(ConversionError):
    def __init__(self, stock_item: str, used_item: str):
        self.stock_item = stock_item
        self.used_item = used_item
        super().__init__(f'Cannot deduct "{used_item}" from stock of "{stock_item}".')
