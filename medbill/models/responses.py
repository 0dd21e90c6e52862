"""Response models for API endpoints."""

from typing import Optional

from pydantic import BaseModel, Field

from medbill.models.document import DocumentType
from medbill.models.matrix import ClassificationMatrix


class ClassificationDebugInfo(BaseModel):
    """Score diagnostics attached to a classification.

    For logging and display only; consumers branch on ``can_analyze``.

    Attributes:
        bill_score: Final bill score total
        eob_score: Final EOB score total
        required_categories: Number of required categories found (0-4)
        reasoning: Explanation of the decision
    """

    bill_score: int = Field(..., description="Bill score total")
    eob_score: int = Field(..., description="EOB score total")
    required_categories: int = Field(..., ge=0, le=4, description="Required categories found")
    reasoning: str = Field(..., description="Decision reasoning")


class DocumentClassification(BaseModel):
    """User-facing classification result.

    Attributes:
        type: Classified document type
        confidence: Confidence score (0-100)
        can_analyze: Whether the document may proceed to analysis
        user_message: Message to show the user
        debug: Optional score diagnostics, serialized as ``_debug``
    """

    type: DocumentType = Field(..., description="Classified document type")
    confidence: int = Field(..., ge=0, le=100, description="Confidence score (0-100)")
    can_analyze: bool = Field(..., description="Whether analysis can proceed")
    user_message: str = Field(..., description="Message for the user")
    debug: Optional[ClassificationDebugInfo] = Field(
        default=None,
        alias="_debug",
        description="Score diagnostics",
    )

    model_config = {"populate_by_name": True}


class ClassifyResponse(BaseModel):
    """Envelope for classification responses.

    Attributes:
        success: Whether the request succeeded
        data: Classification result on success
        error: Error message on failure
    """

    success: bool = Field(..., description="Whether the request succeeded")
    data: Optional[DocumentClassification] = Field(default=None, description="Result")
    error: Optional[str] = Field(default=None, description="Error message")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "success": True,
                    "data": {
                        "type": "EOB",
                        "confidence": 90,
                        "can_analyze": True,
                        "user_message": "This appears to be an Explanation of Benefits (EOB) "
                        "from your insurance company. ...",
                        "_debug": {
                            "bill_score": 62,
                            "eob_score": 45,
                            "required_categories": 4,
                            "reasoning": 'Document explicitly states "this is not a bill"',
                        },
                    },
                }
            ]
        }
    }


class MatrixResponse(BaseModel):
    """Full classification matrix with its diagnostic trace.

    Attributes:
        matrix: Every intermediate and final classification value
        trace: Human-readable per-phase summary of the matrix
    """

    matrix: ClassificationMatrix = Field(..., description="Classification matrix")
    trace: list[str] = Field(..., description="Per-phase diagnostic lines")


class HealthResponse(BaseModel):
    """Health check response.

    Attributes:
        status: Service status
        version: API version
    """

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")


class DocumentTypesResponse(BaseModel):
    """Response listing supported document types.

    Attributes:
        types: Document types with descriptions and analysis eligibility
    """

    types: list[dict[str, str | bool]] = Field(..., description="Supported document types")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "types": [
                        {
                            "type": "MEDICAL_BILL",
                            "description": "Patient bill or statement from a healthcare provider",
                            "can_analyze": True,
                        },
                    ]
                }
            ]
        }
    }


class ErrorResponse(BaseModel):
    """Error response model.

    Attributes:
        success: Always False
        error: Error message
    """

    success: bool = Field(default=False, description="Always false for errors")
    error: str = Field(..., description="Error message")
