"""
Driver endpoints
================

POST /api/v1/drivers             -- register the caller as a driver
GET  /api/v1/drivers/{identity}  -- driver profile and rating totals
"""

from fastapi import APIRouter, Depends, HTTPException

from rideledger.api.dependencies import get_caller, get_ledger, unwrap
from rideledger.api.schemas import DriverRegisterRequest, DriverResponse
from rideledger.domain.entities import Principal
from rideledger.infrastructure.locks import SerializedLedger

router = APIRouter(prefix="/drivers", tags=["drivers"])


@router.post(
    "",
    status_code=201,
    response_model=DriverResponse,
    summary="Register the caller as a driver",
    responses={409: {"description": "Caller is already a registered driver."}},
)
def register_driver(
    body: DriverRegisterRequest,
    caller: Principal = Depends(get_caller),
    ledger: SerializedLedger = Depends(get_ledger),
):
    with ledger as core:
        unwrap(
            core.register_driver(caller, body.name, body.vehicle),
            "register_driver", caller,
        )
        return DriverResponse.from_entity(core.get_driver(caller))


@router.get("/{identity}", response_model=DriverResponse, summary="Get a driver")
def get_driver(
    identity: str,
    ledger: SerializedLedger = Depends(get_ledger),
):
    with ledger as core:
        driver = core.get_driver(Principal(identity))
        if driver is None:
            raise HTTPException(status_code=404, detail="Driver not found")
        return DriverResponse.from_entity(driver)
