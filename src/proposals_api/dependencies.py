"""FastAPI dependency injection providers for shared services.

Services are lazily instantiated and cached with @lru_cache.

Usage in routes:
    from proposals_api.dependencies import get_pricing_calculator

    @router.post("/pricing/quote")
    async def quote(
        calculator: PricingCalculator = Depends(get_pricing_calculator),
    ):
        ...

Testing:
    Use reset_services() to clear cached instances between tests.
"""

from functools import lru_cache

from proposals.services.pricing import PricingCalculator


@lru_cache
def get_pricing_calculator() -> PricingCalculator:
    """Get cached PricingCalculator configured from the environment."""
    return PricingCalculator()


def reset_services() -> None:
    """Clear cached service instances (for tests or config changes)."""
    get_pricing_calculator.cache_clear()
