from __future__ import annotations

from ..models.error_record import mask_identifier
from ..models.fill_result import FillResult

"""Summary line rendering for a load-and-fill run."""


def _format_seconds(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # avoid scientific notation
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.3f}".rstrip("0").rstrip(".")


def render_summary_line(result: FillResult, elapsed_seconds: float) -> str:
    """Render the SUMMARY line for one lookup.

    Format:
    SUMMARY id={masked} fields={record size} filled={targets set} elapsed_sec={elapsed}

    Examples:
        >>> r = FillResult(identifier="123456789", record={"id": "123456789"}, filled_count=1)
        >>> render_summary_line(r, 0.25)
        'SUMMARY id=*****6789 fields=1 filled=1 elapsed_sec=0.25'
    """
    return (
        f"SUMMARY id={mask_identifier(result.identifier)} "
        f"fields={result.field_count} "
        f"filled={result.filled_count} "
        f"elapsed_sec={_format_seconds(elapsed_seconds)}"
    )
