from __future__ import annotations

import logging
from typing import Any

from ..stores.base import NOT_FOUND_MESSAGE
from ..table.columns import InvalidColumnLabelError, column_to_index
from ..table.lookup import TabularData, find_row

"""Server side of the relay protocol.

build_relay_payload() is what a relay endpoint answers for ``?id=``: the
matched row as a flat object, or ``{"error": ...}``. Errors are reported in
the body, never through the status code, which is what RelayRecordStore
expects on the client side. Any web layer can host it.
"""

__all__ = [
    "MISSING_ID_MESSAGE",
    "build_relay_payload",
]

logger = logging.getLogger(__name__)

MISSING_ID_MESSAGE = "לא הוזן מספר תעודת זהות"
FAILURE_PREFIX = "שגיאה: "


def build_relay_payload(table: TabularData, id_column: str, identifier: Any) -> dict[str, str]:
    if identifier is None or str(identifier).strip() == "":
        return {"error": MISSING_ID_MESSAGE}
    try:
        row = find_row(table, column_to_index(id_column), identifier)
    except (InvalidColumnLabelError, TypeError) as e:
        logger.error(f"relay: lookup failed: {e}")
        return {"error": FAILURE_PREFIX + str(e)}
    if row is None:
        return {"error": NOT_FOUND_MESSAGE}
    return row
