from __future__ import annotations

from dataclasses import dataclass, field

"""Result of a load-and-fill call."""

__all__ = [
    "FillResult",
]


@dataclass(frozen=True)
class FillResult:
    """Outcome of one successful lookup applied to a form.

    ``filled_count`` may be 0 when the row had no usable fields or none of
    its keys map onto an existing target; that is not an error.
    """
    identifier: str
    record: dict[str, str] = field(default_factory=dict)  # canonical key -> value
    filled_count: int = 0

    @property
    def field_count(self) -> int:
        return len(self.record)
