from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

from ..form.filler import FormFiller
from ..logging.error_log import ErrorLogBuffer
from ..logging.init import APP_LOGGER_NAME
from ..mapping.fields import FieldMapper
from ..models.error_record import ErrorRecord, mask_identifier
from ..models.fill_result import FillResult
from ..stores.base import (
    RecordNotFoundError,
    RecordStore,
    StoreDataError,
    StoreTransportError,
)

"""Record loading service.

Coordinates one lookup: validate the identifier, fetch the row from the
configured RecordStore, normalize its headers, and (for load_and_fill) apply
it to a form. Failures are terminal for the call and nothing is written to
the form unless the lookup succeeded.
"""

__all__ = [
    "GENERIC_ERROR_MESSAGE",
    "LoggingNotifier",
    "MissingIdentifierError",
    "Notifier",
    "RecordLoader",
]

logger = logging.getLogger(__name__)

MISSING_INPUT_MESSAGE = "יש להזין תעודת זהות"
GENERIC_ERROR_MESSAGE = "אירעה שגיאה בטעינת הנתונים"
SUCCESS_MESSAGE = "נטענו {count} שדות בהצלחה"


class MissingIdentifierError(ValueError):
    def __init__(self, message: str = MISSING_INPUT_MESSAGE) -> None:
        super().__init__(message)


class Notifier(Protocol):
    """Presentation callbacks for a load-and-fill call (spinner, toast)."""

    def show_loading(self, active: bool) -> None: ...

    def show_message(self, text: str, level: str = "info") -> None: ...


class LoggingNotifier:
    """Notifier that reports through the application logger."""

    def __init__(self, logger_name: str = APP_LOGGER_NAME) -> None:
        self._logger = logging.getLogger(logger_name)

    def show_loading(self, active: bool) -> None:
        self._logger.debug("loading..." if active else "loading done")

    def show_message(self, text: str, level: str = "info") -> None:
        if level == "error":
            self._logger.error(text)
        else:
            self._logger.info(text)


class RecordLoader:
    def __init__(
        self,
        store: RecordStore,
        mapper: FieldMapper | None = None,
        error_log: ErrorLogBuffer | None = None,
    ) -> None:
        self.store = store
        self.mapper = mapper if mapper is not None else FieldMapper()
        self.error_log = error_log

    def _record_error(self, identifier: str, error_type: str, message: str) -> None:
        if self.error_log is not None:
            self.error_log.append(ErrorRecord.create(identifier, self.store.name, error_type, message))

    def load(self, identifier: str | None) -> dict[str, str]:
        """Look up ``identifier`` and return its canonical record.

        Raises:
            MissingIdentifierError: blank identifier (the store is not called)
            RecordNotFoundError: no row for this identifier
            StoreTransportError / StoreDataError: the store failed
        """
        if identifier is None or str(identifier).strip() == "":
            self._record_error("", "MISSING_IDENTIFIER", MISSING_INPUT_MESSAGE)
            raise MissingIdentifierError()
        identifier = str(identifier).strip()
        masked = mask_identifier(identifier)

        try:
            raw = self.store.fetch(identifier)
        except RecordNotFoundError as e:
            logger.warning(f"lookup: no row for id={masked} store={self.store.name}: {e}")
            self._record_error(identifier, "NOT_FOUND", str(e))
            raise
        except StoreTransportError as e:
            logger.error(f"lookup: transport failure store={self.store.name}: {e}")
            self._record_error(identifier, "TRANSPORT_ERROR", str(e))
            raise
        except StoreDataError as e:
            logger.error(f"lookup: bad data store={self.store.name}: {e}")
            self._record_error(identifier, "DATA_ERROR", str(e))
            raise

        record = self.mapper.normalize(raw)
        logger.debug(f"lookup: id={masked} columns={len(raw)} fields={len(record)}")
        return record

    def load_and_fill(
        self,
        identifier: str | None,
        filler: FormFiller,
        overrides: Mapping[str, str] | None = None,
        notifier: Notifier | None = None,
    ) -> FillResult:
        notifier = notifier if notifier is not None else LoggingNotifier()
        notifier.show_loading(True)
        try:
            record = self.load(identifier)
            filled_count = filler.fill(record, overrides)
        except Exception as e:
            notifier.show_loading(False)
            notifier.show_message(str(e) or GENERIC_ERROR_MESSAGE, "error")
            raise
        notifier.show_loading(False)
        notifier.show_message(SUCCESS_MESSAGE.format(count=filled_count), "success")
        if filled_count == 0:
            logger.warning(f"lookup: id={mask_identifier(str(identifier))} matched but no form field was filled")
        return FillResult(identifier=str(identifier).strip(), record=record, filled_count=filled_count)
