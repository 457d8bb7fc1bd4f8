"""API models for pricing endpoints.

Money is returned as JSON numbers rounded to cents.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from proposals.models.pricing import PricingSnapshot


class PricingQuoteRequest(BaseModel):
    """Inputs for a pricing quote."""

    model_config = ConfigDict(
        strict=False,
        json_schema_extra={
            "examples": [
                {
                    "nightly_price": 85,
                    "nights_per_week": 4,
                    "weeks": 8,
                }
            ]
        },
    )

    nightly_price: float = Field(..., ge=0, description="Guest price per night")
    nights_per_week: int = Field(..., ge=0, le=7, description="Selected nights per week")
    weeks: int = Field(..., description="Reservation length in weeks (at least 1)")
    compensation_rate: Optional[float] = Field(
        default=None,
        gt=0,
        le=1,
        description="Host share of the nightly price; defaults to the configured rate",
    )


class PricingQuoteResponse(BaseModel):
    """Derived compensation and price."""

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={
            "examples": [
                {
                    "nightly_price": 85.0,
                    "nightly_compensation": 72.25,
                    "nights_per_week": 4,
                    "weeks": 8,
                    "total_nights": 32,
                    "total_price": 2720.0,
                    "total_compensation": 2312.0,
                    "price_per_4_weeks": 1360.0,
                    "compensation_per_4_weeks": 1156.0,
                }
            ]
        },
    )

    nightly_price: float
    nightly_compensation: float
    nights_per_week: int
    weeks: int
    total_nights: int
    total_price: float
    total_compensation: float
    price_per_4_weeks: float
    compensation_per_4_weeks: float

    @classmethod
    def from_snapshot(cls, snapshot: PricingSnapshot) -> "PricingQuoteResponse":
        return cls(
            nightly_price=float(snapshot.nightly_price),
            nightly_compensation=float(snapshot.nightly_compensation),
            nights_per_week=snapshot.nights_per_week,
            weeks=snapshot.weeks,
            total_nights=snapshot.total_nights,
            total_price=float(snapshot.total_price),
            total_compensation=float(snapshot.total_compensation),
            price_per_4_weeks=float(snapshot.price_per_4_weeks),
            compensation_per_4_weeks=float(snapshot.compensation_per_4_weeks),
        )
