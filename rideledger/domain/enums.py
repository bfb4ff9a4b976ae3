"""Domain enumerations, state-transition rules and ledger error codes."""

import enum


class RideStatus(str, enum.Enum):
    REQUESTED = "REQUESTED"
    ACCEPTED = "ACCEPTED"
    COMPLETED = "COMPLETED"


# State machine: maps current status -> set of valid next statuses
RIDE_TRANSITIONS: dict[RideStatus, set[RideStatus]] = {
    RideStatus.REQUESTED: {RideStatus.ACCEPTED},
    RideStatus.ACCEPTED: {RideStatus.COMPLETED},
    RideStatus.COMPLETED: set(),
}


class LedgerError(enum.IntEnum):
    """Flat error taxonomy; the numeric values are wire-stable."""

    OWNER_ONLY = 100
    UNAUTHORIZED = 102
    ALREADY_REGISTERED = 103
    RIDE_NOT_AVAILABLE = 104
    # Shared by rating validation and platform-fee validation.
    INVALID_RATING = 106
