"""API routes package.

Routers are organized by domain:

- schedule: Night toggling and schedule derivation
- pricing: Pricing quotes
- proposals: Reservation spans and draft review

All routers are registered in main.py with /api prefix.
"""

from proposals_api.routes.pricing import router as pricing_router
from proposals_api.routes.proposals import router as proposals_router
from proposals_api.routes.schedule import router as schedule_router

__all__ = [
    "pricing_router",
    "proposals_router",
    "schedule_router",
]
