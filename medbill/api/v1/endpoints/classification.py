"""Classification endpoints."""

from fastapi import APIRouter, HTTPException
from loguru import logger

from medbill.core.config import settings
from medbill.models import ClassifyRequest, ClassifyResponse, MatrixResponse
from medbill.services import ClassificationService, EmptyDocumentError

router = APIRouter()

CLASSIFICATION_FAILED = "We encountered an issue classifying your document. Please try again."


@router.post(
    "/classify",
    response_model=ClassifyResponse,
    response_model_exclude_none=True,
)
async def classify_document(request: ClassifyRequest) -> ClassifyResponse:
    """Classify a document from extracted text.

    Decides whether the document is a medical bill, an Explanation of
    Benefits, or an invalid/non-medical document, and whether it can
    proceed to analysis.

    Args:
        request: Classification request with extracted text

    Returns:
        Classification result wrapped in a success envelope

    Raises:
        HTTPException: 400 if no text was provided, 500 if classification fails
    """
    text_length = len(request.extracted_text) if request.extracted_text else 0
    logger.info(f"📄 /classify endpoint | text_length={text_length}")

    try:
        _, classification = ClassificationService.classify(
            extracted_text=request.extracted_text,
            header_text=request.document_header_text,
        )
    except EmptyDocumentError as e:
        logger.error(f"✗ /classify rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"✗ /classify failed: {e}")
        logger.exception("Full traceback:")
        raise HTTPException(status_code=500, detail=CLASSIFICATION_FAILED)

    logger.success(
        f"✓ /classify completed | type={classification.type.value} | "
        f"confidence={classification.confidence}%"
    )
    return ClassifyResponse(success=True, data=classification)


@router.post("/classify/matrix", response_model=MatrixResponse)
async def classify_matrix(request: ClassifyRequest) -> MatrixResponse:
    """Return the full classification matrix for a document.

    Diagnostic companion to ``/classify``: exposes every match list and
    score along with a per-phase trace.

    Args:
        request: Classification request with extracted text

    Returns:
        Classification matrix and trace lines

    Raises:
        HTTPException: 400 if no text was provided
    """
    try:
        text = ClassificationService.combine_text(
            request.extracted_text, request.document_header_text
        )
    except EmptyDocumentError as e:
        logger.error(f"✗ /classify/matrix rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    matrix = ClassificationService.build_matrix(text, settings.classification)
    return MatrixResponse(matrix=matrix, trace=ClassificationService.trace(matrix))
