"""
Fare Engine  (Strategy Pattern)
===============================

Formula
-------
Fare = Base_Fare + Distance_KM x Per_KM_Fare

* **Carpool**: floor(Fare x Seats / 2) -- the total is split two ways and
  scaled by the declared seat count.

All arithmetic is on integers so identical inputs give identical fares.
Complexity: O(1) per fare calculation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


# ── Strategy hierarchy ────────────────────────────────────────────────


class FareStrategy(ABC):
    @abstractmethod
    def calculate(self, distance_km: int, base_fare: int, per_km_fare: int) -> int: ...


class StandardFare(FareStrategy):
    def calculate(self, distance_km: int, base_fare: int, per_km_fare: int) -> int:
        return base_fare + distance_km * per_km_fare


class CarpoolFare(FareStrategy):
    """Splits the standard fare two ways, scaled by seat count."""

    def __init__(self, seats: int = 1):
        self.seats = seats

    def calculate(self, distance_km: int, base_fare: int, per_km_fare: int) -> int:
        total = StandardFare().calculate(distance_km, base_fare, per_km_fare)
        return (total * self.seats) // 2


# ── Engine facade ─────────────────────────────────────────────────────


class FareCalculator:
    """High-level API used by the ledger when a ride is requested."""

    def __init__(self, base_fare: int = 500000, per_km_fare: int = 100000):
        self.base_fare = base_fare
        self.per_km_fare = per_km_fare

    @staticmethod
    def strategy_for(is_carpool: bool, seats: int) -> FareStrategy:
        if is_carpool:
            return CarpoolFare(seats)
        return StandardFare()

    def calculate_fare(self, distance_km: int, is_carpool: bool = False, seats: int = 1) -> int:
        strategy = self.strategy_for(is_carpool, seats)
        return strategy.calculate(distance_km, self.base_fare, self.per_km_fare)
