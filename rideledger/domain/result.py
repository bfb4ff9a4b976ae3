"""
Tagged success / failure result returned by every ledger operation.

Callers branch on the variant rather than catching exceptions::

    result = ledger.request_ride(...)
    if isinstance(result, Err):
        ...
    ride_id = result.value
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .enums import LedgerError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: LedgerError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def code(self) -> int:
        return int(self.error)


Result = Union[Ok[T], Err]
