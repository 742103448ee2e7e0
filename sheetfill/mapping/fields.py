from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

"""Header label -> canonical field key normalization.

Sheet headers are written by people (in Hebrew, with synonyms). Consumers
such as the form filler expect a fixed set of canonical keys. The label table
is injected into FieldMapper so that other locales or sheets can bring their
own; DEFAULT_HEADER_MAP is the table for the member registration sheet.
"""

__all__ = [
    "DEFAULT_HEADER_MAP",
    "FieldMapper",
]

logger = logging.getLogger(__name__)

DEFAULT_HEADER_MAP: Mapping[str, str] = MappingProxyType({
    # member
    "תעודת זהות": "id",
    "ת.ז.": "id",
    "id": "id",
    "שם משפחה": "lastName",
    "שם פרטי": "firstName",
    "שנת לידה": "birthYear",
    "שם האב": "fatherName",
    "רחוב": "street",
    "מספר בית": "houseNumber",
    "עיר": "city",
    "טלפון": "phone",
    "טלפון נייד": "phone",
    "אימייל": "email",
    "דואר אלקטרוני": "email",
    "email": "email",
    # spouse / partner
    "תעודת זהות בן זוג": "partnerId",
    "ת.ז. בן זוג": "partnerId",
    "שם משפחה בן זוג": "partnerLastName",
    "שם פרטי בן זוג": "partnerFirstName",
    "שנת לידה בן זוג": "partnerBirthYear",
    "שם האב בן זוג": "partnerFatherName",
    "טלפון בן זוג": "partnerPhone",
    "אימייל בן זוג": "partnerEmail",
    # payment card
    "מספר אשראי": "creditCard",
    "תוקף אשראי": "creditExpiry",
    "שם בעל הכרטיס": "cardHolderName",
    "תעודת זהות בעל הכרטיס": "cardHolderId",
})


class FieldMapper:
    """Translate header labels to canonical field keys.

    Lookup is exact and case-sensitive on the trimmed label. Labels missing
    from the table fall back to their trimmed, lowercased form.
    """

    def __init__(self, header_map: Mapping[str, str] | None = None) -> None:
        table = DEFAULT_HEADER_MAP if header_map is None else header_map
        self._header_map: Mapping[str, str] = MappingProxyType(dict(table))

    @property
    def header_map(self) -> Mapping[str, str]:
        return self._header_map

    def with_overrides(self, extra: Mapping[str, str]) -> FieldMapper:
        """Return a new mapper whose table is this one updated with ``extra``."""
        merged = dict(self._header_map)
        merged.update({label.strip(): key for label, key in extra.items()})
        return FieldMapper(merged)

    def canonical_key(self, label: str) -> str:
        trimmed = label.strip()
        mapped = self._header_map.get(trimmed)
        if mapped is not None:
            return mapped
        return trimmed.lower()

    def normalize(self, record: Mapping[str, str]) -> dict[str, str]:
        """Rename every key of ``record`` to its canonical key.

        When two labels land on the same key the later one overwrites the
        earlier (e.g. both "טלפון" and "טלפון נייד" columns filled).
        """
        parsed: dict[str, str] = {}
        for label, value in record.items():
            key = self.canonical_key(label)
            if key in parsed:
                logger.debug(f"header '{label.strip()}' overwrites earlier value for '{key}'")
            parsed[key] = value
        return parsed
