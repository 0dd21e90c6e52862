"""Data models for the application."""

from medbill.models.document import DOCUMENT_TYPE_DESCRIPTIONS, DocumentType
from medbill.models.matrix import (
    ClassificationMatrix,
    EOBScore,
    IndicatorMatch,
    IndicatorTier,
    RequiredCategories,
    RequiredCategory,
    RequiredCategoryResult,
    TypeScore,
)
from medbill.models.requests import ClassifyRequest
from medbill.models.responses import (
    ClassificationDebugInfo,
    ClassifyResponse,
    DocumentClassification,
    DocumentTypesResponse,
    ErrorResponse,
    HealthResponse,
    MatrixResponse,
)

__all__ = [
    "DocumentType",
    "DOCUMENT_TYPE_DESCRIPTIONS",
    "IndicatorTier",
    "IndicatorMatch",
    "RequiredCategory",
    "RequiredCategoryResult",
    "RequiredCategories",
    "TypeScore",
    "EOBScore",
    "ClassificationMatrix",
    "ClassifyRequest",
    "ClassificationDebugInfo",
    "DocumentClassification",
    "ClassifyResponse",
    "MatrixResponse",
    "HealthResponse",
    "DocumentTypesResponse",
    "ErrorResponse",
]
