"""Unit tests for the fare engine."""

import pytest

from rideledger.domain.pricing import CarpoolFare, FareCalculator, StandardFare


class TestFareStrategies:
    def test_standard_fare(self):
        assert StandardFare().calculate(10, 500000, 100000) == 1500000

    def test_standard_fare_zero_distance_is_base_fare(self):
        assert StandardFare().calculate(0, 500000, 100000) == 500000

    def test_carpool_two_seats_equals_standard(self):
        assert CarpoolFare(seats=2).calculate(10, 500000, 100000) == 1500000

    def test_carpool_single_seat_is_half(self):
        assert CarpoolFare(seats=1).calculate(10, 500000, 100000) == 750000

    def test_carpool_floors_odd_totals(self):
        # (3 + 2*1) * 1 // 2 == 2
        assert CarpoolFare(seats=1).calculate(2, 3, 1) == 2

    def test_carpool_scales_with_seats(self):
        assert CarpoolFare(seats=3).calculate(10, 500000, 100000) == 2250000


class TestFareCalculator:
    def setup_method(self):
        self.calculator = FareCalculator(base_fare=500000, per_km_fare=100000)

    def test_regular_ride(self):
        assert self.calculator.calculate_fare(10) == 1500000

    def test_regular_ride_ignores_seats(self):
        assert self.calculator.calculate_fare(10, is_carpool=False, seats=4) == 1500000

    @pytest.mark.parametrize(
        "seats, expected",
        [(1, 750000), (2, 1500000), (4, 3000000)],
    )
    def test_carpool_ride(self, seats, expected):
        assert self.calculator.calculate_fare(10, is_carpool=True, seats=seats) == expected

    def test_strategy_selection(self):
        assert isinstance(FareCalculator.strategy_for(False, 2), StandardFare)
        assert isinstance(FareCalculator.strategy_for(True, 2), CarpoolFare)

    def test_fares_are_integers(self):
        assert isinstance(self.calculator.calculate_fare(7, is_carpool=True, seats=3), int)
