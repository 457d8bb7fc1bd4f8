"""Pricing snapshot model.

A snapshot is always recomputed from the draft and the proposal's nightly
price; it is never the source of truth. Money values are Decimals
rounded to cents.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class PricingSnapshot(BaseModel):
    """Derived price and host compensation for a draft."""

    model_config = ConfigDict(strict=True, frozen=True)

    nightly_price: Decimal = Field(..., description="Guest price per night")
    nightly_compensation: Decimal = Field(..., description="Host compensation per night")
    nights_per_week: int = Field(..., ge=0)
    weeks: int = Field(..., ge=1)
    total_nights: int = Field(..., ge=0)
    total_price: Decimal
    total_compensation: Decimal
    price_per_4_weeks: Decimal
    compensation_per_4_weeks: Decimal
