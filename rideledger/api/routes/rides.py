"""
Ride endpoints
==============

POST /api/v1/rides                    -- passenger requests a ride (201)
GET  /api/v1/rides/quote              -- fare quote, no state change
GET  /api/v1/rides/{ride_id}          -- ride status, driver and fare
POST /api/v1/rides/{ride_id}/accept   -- driver takes a requested ride
POST /api/v1/rides/{ride_id}/complete -- assigned driver finishes the ride
POST /api/v1/rides/{ride_id}/rate     -- passenger rates the driver
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from rideledger.api.dependencies import get_caller, get_ledger, unwrap
from rideledger.api.schemas import (
    FareQuoteResponse,
    RideCreateRequest,
    RideRateRequest,
    RideResponse,
)
from rideledger.domain.entities import Principal
from rideledger.infrastructure.locks import SerializedLedger

router = APIRouter(prefix="/rides", tags=["rides"])


@router.post(
    "",
    status_code=201,
    response_model=RideResponse,
    summary="Request a ride",
    responses={403: {"description": "Caller is not a registered passenger."}},
)
def request_ride(
    body: RideCreateRequest,
    caller: Principal = Depends(get_caller),
    ledger: SerializedLedger = Depends(get_ledger),
):
    with ledger as core:
        ride_id = unwrap(
            core.request_ride(
                caller,
                body.start_location,
                body.end_location,
                body.distance_km,
                body.is_carpool,
                body.seats,
            ),
            "request_ride", caller,
        )
        return RideResponse.from_entity(core.get_ride(ride_id))


@router.get("/quote", response_model=FareQuoteResponse, summary="Quote a fare")
def quote_fare(
    distance_km: int = Query(..., ge=0),
    is_carpool: bool = False,
    seats: int = Query(1, ge=1),
    ledger: SerializedLedger = Depends(get_ledger),
):
    return FareQuoteResponse(
        distance_km=distance_km,
        is_carpool=is_carpool,
        seats=seats,
        fare=ledger.quote_fare(distance_km, is_carpool, seats),
    )


@router.get("/{ride_id}", response_model=RideResponse, summary="Get a ride")
def get_ride(
    ride_id: int,
    ledger: SerializedLedger = Depends(get_ledger),
):
    with ledger as core:
        ride = core.get_ride(ride_id)
        if ride is None:
            raise HTTPException(status_code=404, detail="Ride not found")
        return RideResponse.from_entity(ride)


@router.post(
    "/{ride_id}/accept",
    response_model=RideResponse,
    summary="Accept a requested ride",
    description=(
        "Assigns the calling driver.  A ride that does not exist, or that "
        "is no longer REQUESTED, answers 409 with code 104."
    ),
)
def accept_ride(
    ride_id: int,
    caller: Principal = Depends(get_caller),
    ledger: SerializedLedger = Depends(get_ledger),
):
    with ledger as core:
        unwrap(core.accept_ride(caller, ride_id), "accept_ride", caller)
        return RideResponse.from_entity(core.get_ride(ride_id))


@router.post(
    "/{ride_id}/complete",
    response_model=RideResponse,
    summary="Complete an accepted ride",
)
def complete_ride(
    ride_id: int,
    caller: Principal = Depends(get_caller),
    ledger: SerializedLedger = Depends(get_ledger),
):
    with ledger as core:
        unwrap(core.complete_ride(caller, ride_id), "complete_ride", caller)
        return RideResponse.from_entity(core.get_ride(ride_id))


@router.post(
    "/{ride_id}/rate",
    response_model=RideResponse,
    summary="Rate the driver of a completed ride",
)
def rate_driver(
    ride_id: int,
    body: RideRateRequest,
    caller: Principal = Depends(get_caller),
    ledger: SerializedLedger = Depends(get_ledger),
):
    with ledger as core:
        unwrap(core.rate_driver(caller, ride_id, body.rating), "rate_driver", caller)
        return RideResponse.from_entity(core.get_ride(ride_id))
