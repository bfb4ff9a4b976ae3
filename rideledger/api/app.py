"""
FastAPI application factory.

* Wraps one ``MarketplaceLedger`` in a ``SerializedLedger`` on ``app.state``.
* Registers routes for drivers, passengers, rides and admin.
* Applies rate-limiting middleware (``settings.rate_limit`` per route).
* Swagger / OpenAPI UI available at ``/docs``.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from rideledger.api.middleware import build_limiter
from rideledger.api.routes import admin, drivers, passengers, rides
from rideledger.config import settings
from rideledger.domain.entities import Governance
from rideledger.domain.ledger import MarketplaceLedger
from rideledger.infrastructure.locks import SerializedLedger

logging.basicConfig(level=settings.log_level)

logger = logging.getLogger(__name__)


def create_app(
    ledger: Optional[MarketplaceLedger] = None,
    rate_limit: Optional[str] = None,
) -> FastAPI:
    app = FastAPI(
        title="Ride-Sharing Marketplace Ledger API",
        description=(
            "Registers drivers and passengers, runs rides through "
            "request / accept / complete / rate, prices them "
            "deterministically and exposes the owner-controlled "
            "platform fee."
        ),
        version="1.0.0",
    )

    if ledger is None:
        ledger = MarketplaceLedger(Governance.from_settings(settings))
        logger.info(
            "Ledger initialised: owner=%s base_fare=%d per_km_fare=%d fee=%d bps",
            ledger.owner, ledger.base_fare, ledger.per_km_fare,
            ledger.platform_fee_basis_points,
        )
    app.state.ledger = SerializedLedger(ledger)

    # Rate limiter
    app.state.limiter = build_limiter(rate_limit or settings.rate_limit)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Routers
    app.include_router(drivers.router, prefix="/api/v1")
    app.include_router(passengers.router, prefix="/api/v1")
    app.include_router(rides.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
