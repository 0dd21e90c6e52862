"""Application services."""

from medbill.services.classification_service import ClassificationService, EmptyDocumentError

__all__ = [
    "ClassificationService",
    "EmptyDocumentError",
]
