"""
Passenger endpoints
===================

POST /api/v1/passengers             -- register the caller as a passenger
GET  /api/v1/passengers/{identity}  -- passenger profile
"""

from fastapi import APIRouter, Depends, HTTPException

from rideledger.api.dependencies import get_caller, get_ledger, unwrap
from rideledger.api.schemas import PassengerRegisterRequest, PassengerResponse
from rideledger.domain.entities import Principal
from rideledger.infrastructure.locks import SerializedLedger

router = APIRouter(prefix="/passengers", tags=["passengers"])


@router.post(
    "",
    status_code=201,
    response_model=PassengerResponse,
    summary="Register the caller as a passenger",
    responses={409: {"description": "Caller is already a registered passenger."}},
)
def register_passenger(
    body: PassengerRegisterRequest,
    caller: Principal = Depends(get_caller),
    ledger: SerializedLedger = Depends(get_ledger),
):
    with ledger as core:
        unwrap(core.register_passenger(caller, body.name), "register_passenger", caller)
        return PassengerResponse.from_entity(core.get_passenger(caller))


@router.get("/{identity}", response_model=PassengerResponse, summary="Get a passenger")
def get_passenger(
    identity: str,
    ledger: SerializedLedger = Depends(get_ledger),
):
    with ledger as core:
        passenger = core.get_passenger(Principal(identity))
        if passenger is None:
            raise HTTPException(status_code=404, detail="Passenger not found")
        return PassengerResponse.from_entity(passenger)
