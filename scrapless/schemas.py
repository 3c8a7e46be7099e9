from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class BaseUnit(str, Enum):
    GRAM = "g"
    MILLILITER = "ml"
    PIECE = "pcs"
    CLOVE = "clove"
    LEAF = "leaf"


class ConversionCategory(BaseModel):
    """A group of interchangeable units that all funnel through one base unit.

    `factors` maps a lowercase, singular unit name to how many base units one
    of it is worth ("1 kg = 1000 g").
    """
    model_config = ConfigDict(frozen=True)

    name: str
    base_unit: BaseUnit
    factors: Mapping[str, float]

    @field_validator("factors")
    @classmethod
    def _positive_factors(cls, v: Mapping[str, float]) -> Mapping[str, float]:
        bad = [u for u, f in v.items() if f <= 0]
        if bad:
            raise ValueError(f"factors must be positive: {', '.join(bad)}")
        return MappingProxyType(dict(v))

    @model_validator(mode="after")
    def _has_base_unit(self):
        if self.factors.get(self.base_unit.value) != 1:
            raise ValueError(
                f"category {self.name!r} must map its base unit {self.base_unit.value!r} to 1"
            )
        return self


class ImpactRecord(BaseModel):
    """Per reference amount economic and environmental constants for a food."""
    model_config = ConfigDict(frozen=True)

    keyword: str
    unit_value: float  # pesos
    carbon_footprint_per_unit: float  # kg CO2e
    shelf_life_days: int = Field(ge=0)
    reference_quantity: float = Field(default=1.0, gt=0)
    reference_unit: BaseUnit = BaseUnit.PIECE


class QuantityExpression(BaseModel):
    quantity: float
    unit: str
    item_name: str


class ConvertedQuantity(BaseModel):
    quantity: float
    unit: str


class ItemValuation(BaseModel):
    item_name: str
    quantity: float
    unit: str
    keyword: str  # "" when the default record was used
    reference_units: float
    basis: str  # "normalized" | "raw"
    peso_value: float
    carbon_footprint: float


class ValuationResult(BaseModel):
    total_peso_value: float
    total_carbon_footprint: float
    items: List[ItemValuation]


class PantryForecast(BaseModel):
    item_name: str
    logged_on: date
    shelf_life_days: int
    estimated_expiration_date: date
    days_left: int
    status: str  # "ok" | "expiring_soon" | "expired"
