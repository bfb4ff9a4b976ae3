"""
Shared test fixtures.

Every test gets a fresh ledger built from an explicit ``Governance``
object, so no state leaks between tests and nothing is read from the
environment.
"""

import pytest

from rideledger.domain.entities import Governance, Principal
from rideledger.domain.ledger import MarketplaceLedger

OWNER = Principal("ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM")
DRIVER = Principal("ST1SJ3DTE5DN7X54YDH5D64R3BCB6A2AG2ZQ8YPD5")
PASSENGER = Principal("ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG")
OTHER_DRIVER = Principal("ST2JHG361ZXG51QTKY2NQCVBPPRRE2KZB1HR05NNC")

BASE_FARE = 500000
PER_KM_FARE = 100000


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def governance() -> Governance:
    return Governance(
        owner=OWNER,
        base_fare=BASE_FARE,
        per_km_fare=PER_KM_FARE,
        platform_fee_basis_points=50,
    )


@pytest.fixture
def ledger(governance: Governance) -> MarketplaceLedger:
    return MarketplaceLedger(governance)


@pytest.fixture
def registered(ledger: MarketplaceLedger) -> MarketplaceLedger:
    """Ledger with DRIVER, OTHER_DRIVER and PASSENGER already registered."""
    ledger.register_driver(DRIVER, "John Doe", "Toyota Camry")
    ledger.register_driver(OTHER_DRIVER, "Ada Obi", "Honda Civic")
    ledger.register_passenger(PASSENGER, "Jane Smith")
    return ledger
