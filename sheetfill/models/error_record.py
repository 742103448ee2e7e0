from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""ErrorRecord model for the lookup failure log.

One record per failed lookup, serialized as a JSON line with a fixed key set.
Identifiers are national ID numbers, so only a masked form is ever stored.
"""

__all__ = [
    "ErrorRecord",
    "mask_identifier",
]

ERROR_TYPES = frozenset({
    "MISSING_IDENTIFIER",
    "NOT_FOUND",
    "TRANSPORT_ERROR",
    "DATA_ERROR",
})


def mask_identifier(identifier: str, visible: int = 4) -> str:
    """Mask all but the last ``visible`` characters: "123456789" -> "*****6789"."""
    text = identifier.strip()
    if len(text) <= visible:
        return "*" * len(text)
    return "*" * (len(text) - visible) + text[-visible:]


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        identifier: masked identifier the lookup was made for
        store: name of the RecordStore that served the lookup
        error_type: one of ERROR_TYPES (UPPER_SNAKE_CASE)
        message: error detail
    """
    timestamp: str
    identifier: str
    store: str
    error_type: str
    message: str

    @staticmethod
    def create(identifier: str, store: str, error_type: str, message: str) -> ErrorRecord:
        """Create a new ErrorRecord stamped with the current UTC time.

        The identifier is masked here; callers pass the raw value.
        """
        if error_type not in ERROR_TYPES:
            raise ValueError(f"unknown error_type: {error_type}")
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            identifier=mask_identifier(identifier),
            store=store,
            error_type=error_type,
            message=message,
        )

    def to_json_line(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False)
