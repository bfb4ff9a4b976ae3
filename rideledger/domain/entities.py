"""
Domain entities with business logic.

Patterns used
-------------
- **Value Object** ``Principal``: caller identities are compared and
  hashed as a type of their own, never as bare display text.
- **State Pattern** on ``Ride``: enforces the forward-only lifecycle
  (REQUESTED -> ACCEPTED -> COMPLETED).
- ``Governance`` is the explicitly constructed owner / fee / fare-constant
  state injected into each ledger.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .enums import RIDE_TRANSITIONS, RideStatus

if TYPE_CHECKING:
    from rideledger.config import Settings


MAX_PLATFORM_FEE_BASIS_POINTS = 1000
MAX_RATING = 5


class InvalidStateTransition(Exception):
    """Raised when a ride status change violates the state machine."""


# ── Value Object ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Principal:
    value: str

    def __str__(self) -> str:
        return self.value


# ── Entities ──────────────────────────────────────────────────────────


@dataclass
class Driver:
    identity: Principal
    name: str
    vehicle: str
    total_rides: int = 0
    total_rating_sum: int = 0
    is_active: bool = True

    @property
    def average_rating(self) -> Optional[float]:
        if self.total_rides == 0:
            return None
        return self.total_rating_sum / self.total_rides

    def record_rating(self, rating: int) -> None:
        self.total_rides += 1
        self.total_rating_sum += rating


@dataclass
class Passenger:
    identity: Principal
    name: str
    total_rides: int = 0


@dataclass
class Ride:
    id: int
    passenger: Principal
    start_location: str
    end_location: str
    distance_km: int
    fare: int
    is_carpool: bool = False
    seats: int = 1
    driver: Optional[Principal] = None
    status: RideStatus = RideStatus.REQUESTED

    def can_transition_to(self, new_status: RideStatus) -> bool:
        return new_status in RIDE_TRANSITIONS.get(self.status, set())

    def transition_to(self, new_status: RideStatus) -> None:
        """Move to *new_status* if the transition is legal, else raise."""
        if not self.can_transition_to(new_status):
            raise InvalidStateTransition(
                f"Cannot transition from {self.status} to {new_status}"
            )
        self.status = new_status


@dataclass
class Governance:
    owner: Principal
    base_fare: int = 500000
    per_km_fare: int = 100000
    platform_fee_basis_points: int = 50

    def __post_init__(self) -> None:
        if self.base_fare <= 0 or self.per_km_fare <= 0:
            raise ValueError("Fare constants must be positive")
        if not 0 <= self.platform_fee_basis_points <= MAX_PLATFORM_FEE_BASIS_POINTS:
            raise ValueError(
                f"Platform fee must be within 0..{MAX_PLATFORM_FEE_BASIS_POINTS} "
                "basis points"
            )

    @classmethod
    def from_settings(cls, settings: Settings) -> Governance:
        return cls(
            owner=Principal(settings.owner_principal),
            base_fare=settings.base_fare,
            per_km_fare=settings.per_km_fare,
            platform_fee_basis_points=settings.platform_fee_basis_points,
        )
