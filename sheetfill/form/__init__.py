from .filler import DEFAULT_FIELD_TARGETS, FormFiller, FormTargets, InMemoryFormTargets

__all__ = ["DEFAULT_FIELD_TARGETS", "FormFiller", "FormTargets", "InMemoryFormTargets"]
