from __future__ import annotations

from typing import Any

import requests

from .base import StoreDataError, StoreTransportError

"""Shared HTTP plumbing for the remote stores: one GET, one JSON body."""

LOAD_ERROR_PREFIX = "שגיאה בטעינת נתונים"


def get_json(session: requests.Session, url: str, timeout: float, params: dict[str, str] | None = None) -> Any:
    """GET ``url`` and decode its JSON body.

    Raises:
        StoreTransportError: connection failure, timeout or non-2xx status
        StoreDataError: body is not JSON
    """
    try:
        response = session.get(url, params=params, timeout=timeout)
    except requests.Timeout as e:
        raise StoreTransportError(f"{LOAD_ERROR_PREFIX}: timed out after {timeout}s") from e
    except requests.RequestException as e:
        raise StoreTransportError(f"{LOAD_ERROR_PREFIX}: {e}") from e

    if not response.ok:
        raise StoreTransportError(f"{LOAD_ERROR_PREFIX}: {response.status_code} {response.reason}")

    try:
        return response.json()
    except ValueError as e:
        raise StoreDataError(f"{LOAD_ERROR_PREFIX}: response is not JSON") from e
