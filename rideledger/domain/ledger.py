"""
Marketplace Ledger
==================

In-memory state container for drivers, passengers and rides plus the
owner-controlled platform fee.  Every operation is synchronous and
returns ``Ok`` or ``Err``; all guards run before the first write, so a
failed call leaves the ledger untouched.

The ledger is not thread-safe.  Front ends with concurrent callers must go
through ``rideledger.infrastructure.locks.SerializedLedger``.
"""

from __future__ import annotations

from typing import Optional

from .entities import (
    MAX_PLATFORM_FEE_BASIS_POINTS,
    MAX_RATING,
    Driver,
    Governance,
    Passenger,
    Principal,
    Ride,
)
from .enums import LedgerError, RideStatus
from .pricing import FareCalculator
from .result import Err, Ok, Result


class MarketplaceLedger:
    def __init__(self, governance: Governance):
        self.governance = governance
        self.fares = FareCalculator(governance.base_fare, governance.per_km_fare)
        self._drivers: dict[Principal, Driver] = {}
        self._passengers: dict[Principal, Passenger] = {}
        self._rides: dict[int, Ride] = {}
        self._next_ride_id = 0

    # ── Registration ──────────────────────────────────────────────────

    def register_driver(self, caller: Principal, name: str, vehicle: str) -> Result[None]:
        if caller in self._drivers:
            return Err(LedgerError.ALREADY_REGISTERED)
        self._drivers[caller] = Driver(identity=caller, name=name, vehicle=vehicle)
        return Ok(None)

    def register_passenger(self, caller: Principal, name: str) -> Result[None]:
        if caller in self._passengers:
            return Err(LedgerError.ALREADY_REGISTERED)
        self._passengers[caller] = Passenger(identity=caller, name=name)
        return Ok(None)

    # ── Ride lifecycle ────────────────────────────────────────────────

    def request_ride(
        self,
        caller: Principal,
        start_location: str,
        end_location: str,
        distance_km: int,
        is_carpool: bool = False,
        seats: int = 1,
    ) -> Result[int]:
        if caller not in self._passengers:
            return Err(LedgerError.UNAUTHORIZED)

        ride_id = self._next_ride_id
        self._next_ride_id += 1
        self._rides[ride_id] = Ride(
            id=ride_id,
            passenger=caller,
            start_location=start_location,
            end_location=end_location,
            distance_km=distance_km,
            fare=self.fares.calculate_fare(distance_km, is_carpool, seats),
            is_carpool=is_carpool,
            seats=seats,
        )
        return Ok(ride_id)

    def accept_ride(self, caller: Principal, ride_id: int) -> Result[None]:
        if caller not in self._drivers:
            return Err(LedgerError.UNAUTHORIZED)
        ride = self._rides.get(ride_id)
        # Missing, already accepted and completed rides look the same.
        if ride is None or ride.status != RideStatus.REQUESTED:
            return Err(LedgerError.RIDE_NOT_AVAILABLE)

        ride.transition_to(RideStatus.ACCEPTED)
        ride.driver = caller
        return Ok(None)

    def complete_ride(self, caller: Principal, ride_id: int) -> Result[None]:
        ride = self._rides.get(ride_id)
        if ride is None or ride.driver != caller or ride.status != RideStatus.ACCEPTED:
            return Err(LedgerError.UNAUTHORIZED)

        ride.transition_to(RideStatus.COMPLETED)
        return Ok(None)

    def rate_driver(self, caller: Principal, ride_id: int, rating: int) -> Result[None]:
        ride = self._rides.get(ride_id)
        if ride is None or ride.passenger != caller or ride.status != RideStatus.COMPLETED:
            return Err(LedgerError.UNAUTHORIZED)
        if not 1 <= rating <= MAX_RATING:
            return Err(LedgerError.INVALID_RATING)

        # A completed ride can be rated again; each rating counts.
        self._drivers[ride.driver].record_rating(rating)
        return Ok(None)

    # ── Governance ────────────────────────────────────────────────────

    def set_platform_fee(self, caller: Principal, new_fee_basis_points: int) -> Result[None]:
        if caller != self.governance.owner:
            return Err(LedgerError.OWNER_ONLY)
        # Out-of-range fees reuse the rating error code.  Negative fees are
        # representable as int, so the lower bound is checked as well.
        if not 0 <= new_fee_basis_points <= MAX_PLATFORM_FEE_BASIS_POINTS:
            return Err(LedgerError.INVALID_RATING)

        self.governance.platform_fee_basis_points = new_fee_basis_points
        return Ok(None)

    # ── Queries ───────────────────────────────────────────────────────

    def get_driver(self, identity: Principal) -> Optional[Driver]:
        return self._drivers.get(identity)

    def get_passenger(self, identity: Principal) -> Optional[Passenger]:
        return self._passengers.get(identity)

    def get_ride(self, ride_id: int) -> Optional[Ride]:
        return self._rides.get(ride_id)

    def quote_fare(self, distance_km: int, is_carpool: bool = False, seats: int = 1) -> int:
        return self.fares.calculate_fare(distance_km, is_carpool, seats)

    @property
    def owner(self) -> Principal:
        return self.governance.owner

    @property
    def platform_fee_basis_points(self) -> int:
        return self.governance.platform_fee_basis_points

    @property
    def base_fare(self) -> int:
        return self.governance.base_fare

    @property
    def per_km_fare(self) -> int:
        return self.governance.per_km_fare

    @property
    def next_ride_id(self) -> int:
        return self._next_ride_id
