"""Pricing endpoints.

Provides REST endpoints for pricing quotes: nightly compensation, totals
and figures normalised to a 4-week period.
"""

from fastapi import APIRouter, Depends

from proposals.services.pricing import PricingCalculator
from proposals_api.dependencies import get_pricing_calculator
from proposals_api.models.pricing import PricingQuoteRequest, PricingQuoteResponse

router = APIRouter(tags=["pricing"])


@router.post(
    "/pricing/quote",
    summary="Quote price and compensation",
    description="""
Calculate compensation and price for a weekly night pattern.

**Notes:**
- Host compensation is the nightly price times the compensation rate
- 4-week figures are totals divided by weeks, times 4
- A week count below 1 is rejected as an incomplete draft
""",
    response_model=PricingQuoteResponse,
    responses={
        200: {
            "description": "Quote calculated successfully",
            "content": {
                "application/json": {
                    "example": {
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
                }
            },
        },
        400: {"description": "Week count below 1"},
    },
)
async def quote(
    request: PricingQuoteRequest,
    calculator: PricingCalculator = Depends(get_pricing_calculator),
) -> PricingQuoteResponse:
    """Calculate a pricing quote."""
    snapshot = calculator.calculate(
        request.nightly_price,
        request.nights_per_week,
        request.weeks,
        compensation_rate=request.compensation_rate,
    )
    return PricingQuoteResponse.from_snapshot(snapshot)
