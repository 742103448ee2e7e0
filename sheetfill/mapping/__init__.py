from .fields import DEFAULT_HEADER_MAP, FieldMapper

__all__ = ["DEFAULT_HEADER_MAP", "FieldMapper"]
