from __future__ import annotations

from abc import ABC, abstractmethod

"""RecordStore interface and its error taxonomy.

A RecordStore resolves one identifier to one row of named fields
(header label -> value, not yet normalized). It either returns that row or
raises one of:

- RecordNotFoundError: the request was fine, no row carries this identifier
- StoreTransportError: network failure, timeout or non-2xx response
- StoreDataError: the source answered with something that is not usable data
"""

__all__ = [
    "RecordNotFoundError",
    "RecordStore",
    "RecordStoreError",
    "StoreDataError",
    "StoreTransportError",
    "NOT_FOUND_MESSAGE",
]

NOT_FOUND_MESSAGE = "לא נמצאו נתונים עבור תעודת הזהות הזו"


class RecordStoreError(Exception):
    """Base class for every RecordStore failure."""


class RecordNotFoundError(RecordStoreError):
    def __init__(self, message: str = NOT_FOUND_MESSAGE) -> None:
        super().__init__(message)


class StoreTransportError(RecordStoreError):
    pass


class StoreDataError(RecordStoreError):
    pass


class RecordStore(ABC):
    """Source of rows keyed by identifier."""

    name: str = "store"

    @abstractmethod
    def fetch(self, identifier: str) -> dict[str, str]:
        """Return the row for ``identifier`` as header label -> value."""
