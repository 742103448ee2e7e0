from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Protocol

"""Apply a canonical record to the targets of a form.

FormFiller only knows target identifiers; the form itself sits behind the
FormTargets protocol. InMemoryFormTargets is the plain model used by the
CLI and the tests.
"""

__all__ = [
    "CHANGE_EVENTS",
    "DEFAULT_FIELD_TARGETS",
    "FormFiller",
    "FormTargets",
    "InMemoryFormTargets",
]

logger = logging.getLogger(__name__)

# canonical field key -> form element id
DEFAULT_FIELD_TARGETS: Mapping[str, str] = MappingProxyType({
    "id": "input_57",
    "lastName": "input_7",
    "firstName": "input_8",
    "birthYear": "input_9",
    "fatherName": "input_13",
    "street": "input_15",
    "houseNumber": "input_59",
    "city": "input_16",
    "phone": "input_18_full",
    "email": "input_21",

    "partnerId": "input_60",
    "partnerLastName": "input_24",
    "partnerFirstName": "input_25",
    "partnerBirthYear": "input_26",
    "partnerFatherName": "input_30",
    "partnerPhone": "input_33_full",
    "partnerEmail": "input_36",

    "creditCard": "input_40",
    "creditExpiry": "input_61",
    "cardHolderName": "input_42",
    "cardHolderId": "input_62",
})

# Sent after every value change, in this order
CHANGE_EVENTS = ("input", "change")


class FormTargets(Protocol):
    def has(self, target_id: str) -> bool: ...

    def set_value(self, target_id: str, value: str) -> None: ...

    def notify(self, target_id: str, event: str) -> None: ...


class InMemoryFormTargets:
    """A form held as target id -> value, recording change notifications."""

    def __init__(self, target_ids: Iterable[str]) -> None:
        self.values: dict[str, str] = {t: "" for t in target_ids}
        self.events: list[tuple[str, str]] = []

    def has(self, target_id: str) -> bool:
        return target_id in self.values

    def set_value(self, target_id: str, value: str) -> None:
        if target_id not in self.values:
            raise KeyError(target_id)
        self.values[target_id] = value

    def notify(self, target_id: str, event: str) -> None:
        self.events.append((target_id, event))

    def filled(self) -> dict[str, str]:
        return {t: v for t, v in self.values.items() if v != ""}


class FormFiller:
    def __init__(self, targets: FormTargets, default_mapping: Mapping[str, str] | None = None) -> None:
        self.targets = targets
        self.default_mapping: Mapping[str, str] = (
            DEFAULT_FIELD_TARGETS if default_mapping is None else MappingProxyType(dict(default_mapping))
        )

    def fill(self, record: Mapping[str, str], overrides: Mapping[str, str] | None = None) -> int:
        """Set every target whose field has a non-empty value in ``record``.

        ``overrides`` (field key -> target id) is layered over the default
        mapping for this call only. Keys without a target id and target ids
        missing from the form are skipped.

        Returns:
            Number of targets actually set
        """
        mapping = dict(self.default_mapping)
        if overrides:
            mapping.update(overrides)

        filled_count = 0
        for key, value in record.items():
            target_id = mapping.get(key)
            if not target_id or not value:
                continue
            if not self.targets.has(target_id):
                logger.debug(f"form: no target '{target_id}' for field '{key}'")
                continue
            self.targets.set_value(target_id, value)
            for event in CHANGE_EVENTS:
                self.targets.notify(target_id, event)
            filled_count += 1
        return filled_count
