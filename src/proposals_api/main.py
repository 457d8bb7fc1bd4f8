"""FastAPI application for the proposal review preview API.

This package provides REST endpoints for:
- Health checks
- Schedule derivation and night toggling
- Pricing quotes
- Draft review against a proposal

Accepting, countering and rejecting proposals are not exposed here; they
belong to the product's own submission services.
"""

import os
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mangum import Mangum

from proposals.utils.logging import configure_logging, get_logger
from proposals_api.exceptions import register_exception_handlers
from proposals_api.middleware.correlation import CorrelationIdMiddleware
from proposals_api.routes.pricing import router as pricing_router
from proposals_api.routes.proposals import router as proposals_router
from proposals_api.routes.schedule import router as schedule_router

configure_logging(os.getenv("LOG_LEVEL", "INFO"))
logger = get_logger(__name__)

DEFAULT_ALLOWED_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"

app = FastAPI(
    title="Proposal Review API",
    description="Preview endpoints for reviewing and countering reservation proposals",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        origin.strip()
        for origin in os.getenv("ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS).split(",")
        if origin.strip()
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(CorrelationIdMiddleware)

# Register exception handlers for consistent error responses
register_exception_handlers(app)

app.include_router(schedule_router, prefix="/api")
app.include_router(pricing_router, prefix="/api")
app.include_router(proposals_router, prefix="/api")


@app.get("/api/ping")
async def ping() -> dict[str, Any]:
    """Health check endpoint at /api/ping."""
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(),
        "service": "proposal-review-api",
    }


# Lambda handler - Mangum wraps FastAPI for AWS Lambda + API Gateway
handler = Mangum(app, lifespan="off")


def run_server(host: str = "0.0.0.0", port: int = 8080, reload: bool = True) -> None:
    """Run the FastAPI server.

    Args:
        host: Host to bind to (default: 0.0.0.0)
        port: Port to listen on (default: 8080)
        reload: Enable hot reload for development (default: True)
    """
    import uvicorn

    if reload:
        # Use string reference for reload mode (uvicorn requirement)
        uvicorn.run(
            "proposals_api.main:app",
            host=host,
            port=port,
            reload=True,
            reload_dirs=["src"],
        )
    else:
        uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
