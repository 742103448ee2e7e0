"""Domain models for the identifier lookup tool."""

from .config_models import FormConfig, LookupConfig, StoreConfig, StoreType
from .error_record import ErrorRecord, mask_identifier
from .fill_result import FillResult

__all__ = [
    # Configuration models
    "FormConfig",
    "LookupConfig",
    "StoreConfig",
    "StoreType",
    # Result models
    "ErrorRecord",
    "FillResult",
    "mask_identifier",
]
