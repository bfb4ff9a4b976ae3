"""
In-process ledger lock.

The ledger is a single-writer state machine.  FastAPI runs sync endpoints
on a thread pool, so every ledger call is funnelled through one mutex and
``accept_ride``'s status check and write can never interleave with
another caller's.

Attribute access is proxied: methods come back wrapped so the call runs
under the lock, plain attributes and properties are read under it.  Use
the context manager when several reads must see one consistent state.
"""

from __future__ import annotations

import functools
import logging
import threading
from typing import Any, Callable

from rideledger.domain.ledger import MarketplaceLedger

logger = logging.getLogger(__name__)


class SerializedLedger:
    def __init__(self, ledger: MarketplaceLedger):
        self.ledger = ledger
        self._lock = threading.Lock()

    def __getattr__(self, name: str) -> Any:
        with self._lock:
            attr = getattr(self.ledger, name)
        if callable(attr):
            return self._serialized(attr)
        return attr

    def _serialized(self, func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if not self._lock.acquire(blocking=False):
                logger.debug("Ledger busy -- waiting to run %s", func.__name__)
                self._lock.acquire()
            try:
                return func(*args, **kwargs)
            finally:
                self._lock.release()

        return wrapper

    # context-manager support
    def __enter__(self) -> MarketplaceLedger:
        self._lock.acquire()
        return self.ledger

    def __exit__(self, *args: Any) -> None:
        self._lock.release()
