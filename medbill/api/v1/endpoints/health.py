"""Health check and metadata endpoints."""

from fastapi import APIRouter

from medbill.models import (
    DOCUMENT_TYPE_DESCRIPTIONS,
    DocumentType,
    DocumentTypesResponse,
    HealthResponse,
)

router = APIRouter()

API_VERSION = "0.1.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint.

    Returns:
        Health status with version
    """
    return HealthResponse(status="healthy", version=API_VERSION)


@router.get("/types", response_model=DocumentTypesResponse)
async def get_document_types() -> DocumentTypesResponse:
    """Get list of document types the classifier can return.

    Returns:
        Document types with descriptions and whether they proceed to analysis
    """
    types = [
        {
            "type": doc_type.value,
            "description": description,
            "can_analyze": doc_type != DocumentType.INVALID,
        }
        for doc_type, description in DOCUMENT_TYPE_DESCRIPTIONS.items()
    ]

    return DocumentTypesResponse(types=types)
