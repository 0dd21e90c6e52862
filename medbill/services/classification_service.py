"""Document classification service.

Decides whether extracted document text is a medical bill, an insurance
Explanation of Benefits, or neither. The decision runs in four phases and
the first two can end it early:

1. Disqualification: out-of-domain vocabulary
2. Required elements: patient, provider, service and financial content
3. Competitive scoring: bill score vs EOB score
4. Final determination
"""

from typing import Optional

from loguru import logger

from medbill.core.config import ClassificationThresholds, settings
from medbill.core.detectors import (
    REQUIRED_ELEMENTS,
    check_required_elements,
    find_negative_indicators,
    score_bill,
    score_eob,
)
from medbill.models import (
    ClassificationDebugInfo,
    ClassificationMatrix,
    DocumentClassification,
    DocumentType,
    EOBScore,
    TypeScore,
)

REQUIRED_CATEGORY_COUNT = len(REQUIRED_ELEMENTS)

# Phase confidences
DISQUALIFIED_CONFIDENCE = 90
INSUFFICIENT_CONTENT_CONFIDENCE = 80
EXPLICIT_EOB_CONFIDENCE = 90
SCORED_EOB_BASE_CONFIDENCE = 60
SCORED_EOB_MAX_CONFIDENCE = 85
SCORED_BILL_BASE_CONFIDENCE = 70
SCORED_BILL_MAX_CONFIDENCE = 95
DEFAULT_BILL_CONFIDENCE = 70

DISQUALIFIED_MESSAGE = (
    "This does not appear to be a medical document. Please upload a medical bill "
    "or statement from your healthcare provider."
)
INSUFFICIENT_CONTENT_MESSAGE = (
    "This document does not contain enough medical billing information. "
    "Please upload a complete medical bill or statement."
)
EOB_MESSAGE = (
    "This appears to be an Explanation of Benefits (EOB) from your insurance company. "
    "For best results, upload the actual medical bill from your provider. You can "
    "continue with this EOB, but analysis may be less accurate."
)
MEDICAL_BILL_MESSAGE = "Medical bill detected. Proceeding with analysis..."


class EmptyDocumentError(ValueError):
    """Raised when there is no extracted text to classify."""


class ClassificationService:
    """Service for classifying medical billing documents from extracted text."""

    @staticmethod
    def build_matrix(
        extracted_text: str,
        thresholds: Optional[ClassificationThresholds] = None,
    ) -> ClassificationMatrix:
        """Build the classification matrix for a document.

        Pure function of the text, the indicator tables and the thresholds:
        the same input always yields an identical matrix.

        Args:
            extracted_text: Raw extracted document text
            thresholds: Scoring thresholds (defaults to the built-in values)

        Returns:
            Fully populated classification matrix
        """
        thresholds = thresholds or ClassificationThresholds()
        text = extracted_text.lower()

        # PHASE 1: Disqualification
        negatives, disqualified = find_negative_indicators(
            text, thresholds.disqualification_negative_count
        )
        if disqualified:
            return ClassificationMatrix(
                negative_indicators_found=negatives,
                disqualified=True,
                final_type=DocumentType.INVALID,
                confidence=DISQUALIFIED_CONFIDENCE,
                reasoning=(
                    f"Disqualified: {len(negatives)} strong negative indicators found "
                    f"({', '.join(negatives)})"
                ),
            )

        # PHASE 2: Required elements
        required = check_required_elements(text)
        required_score = required.found_count
        has_minimum = required_score >= thresholds.required_categories_min
        if not has_minimum:
            return ClassificationMatrix(
                negative_indicators_found=negatives,
                required_categories=required,
                required_categories_score=required_score,
                has_minimum_required=False,
                final_type=DocumentType.INVALID,
                confidence=INSUFFICIENT_CONTENT_CONFIDENCE,
                reasoning=(
                    f"Insufficient medical content: only {required_score}/"
                    f"{REQUIRED_CATEGORY_COUNT} required categories found"
                ),
            )

        # PHASE 3: Competitive scoring (both scores are always reported)
        bill_score = score_bill(text, required, thresholds)
        eob_score = score_eob(text, thresholds)

        # PHASE 4: Final determination
        final_type, confidence, reasoning = ClassificationService._determine_type(
            bill_score, eob_score, required_score, thresholds
        )

        return ClassificationMatrix(
            negative_indicators_found=negatives,
            required_categories=required,
            required_categories_score=required_score,
            has_minimum_required=True,
            bill_score=bill_score,
            eob_score=eob_score,
            final_type=final_type,
            confidence=confidence,
            reasoning=reasoning,
        )

    @staticmethod
    def _determine_type(
        bill_score: TypeScore,
        eob_score: EOBScore,
        required_score: int,
        thresholds: ClassificationThresholds,
    ) -> tuple[DocumentType, int, str]:
        """Pick the final type from the competing scores.

        Rules are evaluated in priority order; the first match wins.

        Returns:
            Tuple of (document_type, confidence, reasoning)
        """
        bill_total = bill_score.total
        eob_total = eob_score.total

        # An explicit notice or strong EOB phrase overrides the numbers
        if eob_score.has_not_a_bill_phrase or eob_score.strong_matches:
            if eob_score.has_not_a_bill_phrase:
                reasoning = 'Document explicitly states "this is not a bill"'
            else:
                reasoning = f"Strong EOB indicator found: {eob_score.strong_matches[0].indicator}"
            return DocumentType.EOB, EXPLICIT_EOB_CONFIDENCE, reasoning

        if eob_total > bill_total and eob_total >= thresholds.eob_min_score:
            confidence = min(
                SCORED_EOB_MAX_CONFIDENCE,
                SCORED_EOB_BASE_CONFIDENCE + (eob_total - bill_total) // 2,
            )
            return (
                DocumentType.EOB,
                confidence,
                f"EOB score ({eob_total}) > Bill score ({bill_total})",
            )

        if bill_total >= thresholds.medical_bill_min_score:
            confidence = min(
                SCORED_BILL_MAX_CONFIDENCE, SCORED_BILL_BASE_CONFIDENCE + bill_total // 10
            )
            return (
                DocumentType.MEDICAL_BILL,
                confidence,
                f"Bill score ({bill_total}) meets threshold ({thresholds.medical_bill_min_score})",
            )

        # Passed the required elements gate, so presume a bill
        return (
            DocumentType.MEDICAL_BILL,
            DEFAULT_BILL_CONFIDENCE,
            f"Required medical elements present ({required_score}/{REQUIRED_CATEGORY_COUNT}), "
            "defaulting to medical bill",
        )

    @staticmethod
    def translate(
        matrix: ClassificationMatrix, include_debug: bool = True
    ) -> DocumentClassification:
        """Turn a matrix into the user-facing classification.

        Args:
            matrix: Completed classification matrix
            include_debug: Attach score diagnostics

        Returns:
            Classification with type, confidence, analysis flag and message
        """
        if matrix.final_type == DocumentType.INVALID:
            can_analyze = False
            user_message = (
                DISQUALIFIED_MESSAGE if matrix.disqualified else INSUFFICIENT_CONTENT_MESSAGE
            )
        elif matrix.final_type == DocumentType.EOB:
            can_analyze = True
            user_message = EOB_MESSAGE
        else:
            can_analyze = True
            user_message = MEDICAL_BILL_MESSAGE

        debug = None
        if include_debug:
            debug = ClassificationDebugInfo(
                bill_score=matrix.bill_score.total,
                eob_score=matrix.eob_score.total,
                required_categories=matrix.required_categories_score,
                reasoning=matrix.reasoning,
            )

        return DocumentClassification(
            type=matrix.final_type,
            confidence=matrix.confidence,
            can_analyze=can_analyze,
            user_message=user_message,
            debug=debug,
        )

    @staticmethod
    def combine_text(extracted_text: Optional[str], header_text: Optional[str] = None) -> str:
        """Prepend header/footer notices to the body text.

        Raises:
            EmptyDocumentError: If there is no body text
        """
        if not extracted_text or not extracted_text.strip():
            raise EmptyDocumentError("No extracted text provided")
        if header_text:
            return f"{header_text}\n\n{extracted_text}"
        return extracted_text

    @staticmethod
    def classify(
        extracted_text: Optional[str],
        header_text: Optional[str] = None,
        thresholds: Optional[ClassificationThresholds] = None,
        include_debug: Optional[bool] = None,
    ) -> tuple[ClassificationMatrix, DocumentClassification]:
        """Classify a document and translate the result.

        Args:
            extracted_text: Text extracted from the document
            header_text: Optional header/footer text
            thresholds: Scoring thresholds (defaults to configured values)
            include_debug: Attach diagnostics (defaults to configured value)

        Returns:
            Tuple of (matrix, classification)

        Raises:
            EmptyDocumentError: If extracted_text is missing or blank
        """
        text = ClassificationService.combine_text(extracted_text, header_text)
        thresholds = thresholds or settings.classification
        if include_debug is None:
            include_debug = settings.include_debug_info

        logger.info(
            f"Starting classification | text_length={len(text)} | "
            f"has_header={bool(header_text)}"
        )

        matrix = ClassificationService.build_matrix(text, thresholds)
        classification = ClassificationService.translate(matrix, include_debug=include_debug)

        ClassificationService._log_decision(matrix)
        logger.success(
            f"Classification: {matrix.final_type.value} | confidence={matrix.confidence}% | "
            f"can_analyze={classification.can_analyze}"
        )

        return matrix, classification

    @staticmethod
    def trace(matrix: ClassificationMatrix) -> list[str]:
        """Describe each phase of a matrix as readable lines.

        Args:
            matrix: Classification matrix

        Returns:
            Diagnostic lines, one fact per line
        """
        negatives = matrix.negative_indicators_found
        lines = [
            "PHASE 1 - Disqualification Check:",
            f"  Negative indicators found: {', '.join(negatives) if negatives else 'none'}",
            f"  Disqualified: {matrix.disqualified}",
            "PHASE 2 - Required Elements:",
        ]
        for category, result in matrix.required_categories.items():
            mark = "✓" if result.found else "✗"
            matches = ", ".join(result.matches[:3]) if result.matches else "no matches"
            lines.append(f"  {category.value}: {mark} ({matches})")
        lines.append(f"  Score: {matrix.required_categories_score}/{REQUIRED_CATEGORY_COUNT}")
        lines.append(f"  Has minimum required: {matrix.has_minimum_required}")

        lines.append("PHASE 3 - Type Scoring:")
        for label, score in (("BILL", matrix.bill_score), ("EOB", matrix.eob_score)):
            strong = ", ".join(m.indicator for m in score.strong_matches)
            lines.append(f"  {label} Score: {score.total}")
            lines.append(
                f"    Strong matches: {len(score.strong_matches)}" + (f" ({strong})" if strong else "")
            )
            lines.append(f"    Medium matches: {len(score.medium_matches)}")
            lines.append(f"    Weak matches: {len(score.weak_matches)}")
        lines.append(f'    "Not a bill" phrase: {matrix.eob_score.has_not_a_bill_phrase}')

        lines.append("PHASE 4 - Final Determination:")
        lines.append(f"  Type: {matrix.final_type.value}")
        lines.append(f"  Confidence: {matrix.confidence}%")
        lines.append(f"  Reasoning: {matrix.reasoning}")
        return lines

    @staticmethod
    def _log_decision(matrix: ClassificationMatrix) -> None:
        """Log the classification matrix for debugging."""
        logger.debug("─" * 80)
        logger.debug("CLASSIFICATION MATRIX")
        for line in ClassificationService.trace(matrix):
            logger.debug(line)
        logger.debug("─" * 80)
