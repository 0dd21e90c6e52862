"""Request models for API endpoints."""

from typing import Optional

from pydantic import BaseModel, Field


class ClassifyRequest(BaseModel):
    """Request to classify a document from extracted text.

    Attributes:
        extracted_text: Text extracted from the uploaded document
        document_header_text: Optional header/footer text captured separately
    """

    extracted_text: Optional[str] = Field(
        default=None,
        description="Text extracted from the document (required, non-empty)",
        examples=[
            "Patient Statement\nValley Clinic\nDate of Service 03/01/2024\n"
            "CPT 99214 Office Visit\nAmount Due $450.32"
        ],
    )
    document_header_text: Optional[str] = Field(
        default=None,
        description=(
            "Header, footer and notice text (e.g. 'This is not a bill'), "
            "prepended to the extracted text before classification"
        ),
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "extracted_text": "Member ID 123456\nProvider: Valley Medical Center\n"
                    "Office Visit\nPlan Paid $120.00\nAmount you owe $20.00",
                    "document_header_text": "Explanation of Benefits\nThis is not a bill",
                }
            ]
        }
    }
