from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List, Optional
from datetime import date, time
from decimal import Decimal

CENTS = Decimal("0.01")
# 10 integer digits + 2 fractional
MAX_AMOUNT_DIGITS = 12

def _to_cents_scale(value: Decimal) -> Decimal:
    # "2.9" and "2.90" are the same amount; keep every amount at scale 2
    return value.quantize(CENTS)

# ----------------------------
# Inbound receipt payload
# ----------------------------
class Item(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: str = Field(alias="shortDescription")
    price: Decimal = Field(ge=0, max_digits=MAX_AMOUNT_DIGITS, decimal_places=2, allow_inf_nan=False)

    @field_validator("price")
    @classmethod
    def scale_price(cls, v: Decimal) -> Decimal:
        return _to_cents_scale(v)

class Receipt(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    retailer: Optional[str] = None
    purchase_date: date = Field(alias="purchaseDate")
    purchase_time: time = Field(alias="purchaseTime")
    items: List[Item] = Field(default_factory=list)
    total: Decimal = Field(ge=0, max_digits=MAX_AMOUNT_DIGITS, decimal_places=2, allow_inf_nan=False)

    @field_validator("total")
    @classmethod
    def scale_total(cls, v: Decimal) -> Decimal:
        return _to_cents_scale(v)

    @field_validator("items", mode="before")
    @classmethod
    def items_default(cls, v: Any) -> Any:
        return [] if v is None else v

# ----------------------------
# Outbound payloads
# ----------------------------
class ProcessResponse(BaseModel):
    id: int

class PointsResponse(BaseModel):
    points: int

class ErrorDetails(BaseModel):
    route: str
    message: str
    status: int
    httpStatus: str
    details: Optional[List[Any]] = None
