"""
Admin / governance endpoints
============================

GET /api/v1/admin/governance    -- owner, platform fee and fare constants
PUT /api/v1/admin/platform-fee  -- owner-only platform fee update
GET /api/v1/admin/health        -- simple health check
"""

import logging

from fastapi import APIRouter, Depends

from rideledger.api.dependencies import get_caller, get_ledger, unwrap
from rideledger.api.schemas import GovernanceResponse, HealthResponse, PlatformFeeRequest
from rideledger.domain.entities import Principal
from rideledger.infrastructure.locks import SerializedLedger

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get(
    "/governance",
    response_model=GovernanceResponse,
    summary="Current governance state",
)
def get_governance(
    ledger: SerializedLedger = Depends(get_ledger),
):
    with ledger as core:
        return GovernanceResponse.from_entity(core.governance)


@router.put(
    "/platform-fee",
    response_model=GovernanceResponse,
    summary="Set the platform fee (owner only)",
    responses={
        403: {"description": "Caller is not the owner (code 100)."},
        422: {"description": "Fee outside 0-1000 basis points (code 106)."},
    },
)
def set_platform_fee(
    body: PlatformFeeRequest,
    caller: Principal = Depends(get_caller),
    ledger: SerializedLedger = Depends(get_ledger),
):
    with ledger as core:
        previous = core.platform_fee_basis_points
        unwrap(
            core.set_platform_fee(caller, body.platform_fee_basis_points),
            "set_platform_fee", caller,
        )
        logger.info(
            "Platform fee changed from %d to %d basis points",
            previous, core.platform_fee_basis_points,
        )
        return GovernanceResponse.from_entity(core.governance)


@router.get("/health", response_model=HealthResponse, summary="Health check")
def health():
    return HealthResponse()
