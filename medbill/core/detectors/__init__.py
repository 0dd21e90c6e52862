"""Document type detectors."""

from medbill.core.detectors.bill import BILL_INDICATORS, score_bill
from medbill.core.detectors.eob import EOB_INDICATORS, has_not_a_bill_phrase, score_eob
from medbill.core.detectors.negative import NEGATIVE_INDICATORS, find_negative_indicators
from medbill.core.detectors.required import REQUIRED_ELEMENTS, check_required_elements

__all__ = [
    "BILL_INDICATORS",
    "EOB_INDICATORS",
    "NEGATIVE_INDICATORS",
    "REQUIRED_ELEMENTS",
    "find_negative_indicators",
    "check_required_elements",
    "score_bill",
    "score_eob",
    "has_not_a_bill_phrase",
]
