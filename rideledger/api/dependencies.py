"""FastAPI dependency injection helpers and ledger-result translation."""

from __future__ import annotations

import logging
from typing import TypeVar

from fastapi import Header, HTTPException, Request

from rideledger.domain.entities import Principal
from rideledger.domain.enums import LedgerError
from rideledger.domain.result import Err, Result
from rideledger.infrastructure.locks import SerializedLedger

logger = logging.getLogger(__name__)

T = TypeVar("T")

HTTP_STATUS_BY_ERROR: dict[LedgerError, int] = {
    LedgerError.OWNER_ONLY: 403,
    LedgerError.UNAUTHORIZED: 403,
    LedgerError.ALREADY_REGISTERED: 409,
    LedgerError.RIDE_NOT_AVAILABLE: 409,
    LedgerError.INVALID_RATING: 422,
}


def get_ledger(request: Request) -> SerializedLedger:
    return request.app.state.ledger


def get_caller(
    x_principal: str = Header(
        ...,
        min_length=1,
        description="Caller identity, already authenticated upstream.",
    ),
) -> Principal:
    return Principal(x_principal)


def unwrap(result: Result[T], operation: str, caller: Principal) -> T:
    """Return the success value or raise the matching HTTP error."""
    if isinstance(result, Err):
        logger.info(
            "%s rejected for %s: %s (%d)",
            operation, caller, result.error.name, result.code,
        )
        raise HTTPException(
            status_code=HTTP_STATUS_BY_ERROR[result.error],
            detail={"code": result.code, "error": result.error.name},
        )
    return result.value
