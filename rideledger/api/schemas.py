"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from rideledger.domain.entities import Driver, Governance, Passenger, Ride


# ── Requests ──────────────────────────────────────────────────────────


class DriverRegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    vehicle: str = Field(..., min_length=1, max_length=120)


class PassengerRegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)


class RideCreateRequest(BaseModel):
    start_location: str = Field(..., min_length=1, max_length=255)
    end_location: str = Field(..., min_length=1, max_length=255)
    distance_km: int = Field(..., ge=0)
    is_carpool: bool = False
    seats: int = Field(1, ge=1, description="Only used for carpool fares.")


class RideRateRequest(BaseModel):
    # Range is enforced by the ledger so authorization is checked first.
    rating: int


class PlatformFeeRequest(BaseModel):
    platform_fee_basis_points: int = Field(
        ..., description="Fee in tenths of a percent (0-1000)."
    )


# ── Responses ─────────────────────────────────────────────────────────


class DriverResponse(BaseModel):
    identity: str
    name: str
    vehicle: str
    total_rides: int
    total_rating_sum: int
    is_active: bool
    average_rating: Optional[float] = None

    @classmethod
    def from_entity(cls, driver: Driver) -> DriverResponse:
        return cls(
            identity=str(driver.identity),
            name=driver.name,
            vehicle=driver.vehicle,
            total_rides=driver.total_rides,
            total_rating_sum=driver.total_rating_sum,
            is_active=driver.is_active,
            average_rating=driver.average_rating,
        )


class PassengerResponse(BaseModel):
    identity: str
    name: str
    total_rides: int

    @classmethod
    def from_entity(cls, passenger: Passenger) -> PassengerResponse:
        return cls(
            identity=str(passenger.identity),
            name=passenger.name,
            total_rides=passenger.total_rides,
        )


class RideResponse(BaseModel):
    id: int
    passenger: str
    driver: Optional[str] = None
    start_location: str
    end_location: str
    distance_km: int
    fare: int
    status: str
    is_carpool: bool
    seats: int

    @classmethod
    def from_entity(cls, ride: Ride) -> RideResponse:
        return cls(
            id=ride.id,
            passenger=str(ride.passenger),
            driver=str(ride.driver) if ride.driver else None,
            start_location=ride.start_location,
            end_location=ride.end_location,
            distance_km=ride.distance_km,
            fare=ride.fare,
            status=ride.status.value,
            is_carpool=ride.is_carpool,
            seats=ride.seats,
        )


class FareQuoteResponse(BaseModel):
    distance_km: int
    is_carpool: bool
    seats: int
    fare: int


class GovernanceResponse(BaseModel):
    owner: str
    platform_fee_basis_points: int
    base_fare: int
    per_km_fare: int

    @classmethod
    def from_entity(cls, governance: Governance) -> GovernanceResponse:
        return cls(
            owner=str(governance.owner),
            platform_fee_basis_points=governance.platform_fee_basis_points,
            base_fare=governance.base_fare,
            per_km_fare=governance.per_km_fare,
        )


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    code: int
    error: str
