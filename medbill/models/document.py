"""Document type models and enumerations."""

from enum import Enum


class DocumentType(str, Enum):
    """Document types the classifier can decide between.

    The set is closed: every classification ends in exactly one of these.
    """

    MEDICAL_BILL = "MEDICAL_BILL"
    """Request for payment issued by a healthcare provider."""

    EOB = "EOB"
    """Insurance Explanation of Benefits showing claim adjudication."""

    INVALID = "INVALID"
    """Non-medical or incomplete document."""

    def __str__(self) -> str:
        """Return the string value of the document type."""
        return self.value


# Document type metadata for API responses
DOCUMENT_TYPE_DESCRIPTIONS = {
    DocumentType.MEDICAL_BILL: "Patient bill or statement from a healthcare provider requesting payment",
    DocumentType.EOB: "Explanation of Benefits from an insurance company; not a request for payment",
    DocumentType.INVALID: "Non-medical document or one missing core medical billing information",
}
