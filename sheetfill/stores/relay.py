from __future__ import annotations

import logging

import requests

from ..models.config_models import DEFAULT_TIMEOUT_SECONDS
from ..table.lookup import cell_text
from ._http import get_json
from .base import RecordNotFoundError, RecordStore, StoreDataError

"""RecordStore backed by a relay endpoint.

Protocol: ``GET <url>?id=<identifier>`` answers with either a flat JSON
object (header label -> value) or ``{"error": "<message>"}``. The relay
reports errors with HTTP 200, so the body is checked for ``error``
regardless of the status code.
"""

__all__ = [
    "RelayRecordStore",
]

logger = logging.getLogger(__name__)


class RelayRecordStore(RecordStore):
    name = "relay"

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()

    def fetch(self, identifier: str) -> dict[str, str]:
        logger.debug(f"relay: GET {self.url}")
        data = get_json(self._session, self.url, self.timeout, params={"id": identifier})

        if not isinstance(data, dict):
            raise StoreDataError(f"relay returned {type(data).__name__}, expected an object")
        if "error" in data:
            # The relay folds "no row" and its own failures into one message
            raise RecordNotFoundError(str(data["error"]))
        return {str(k): cell_text(v) for k, v in data.items()}
