"""Negative indicator detector.

Out-of-domain vocabulary (construction, publishing, dining, housing,
non-medical utilities). Two or more hits disqualify a document before any
medical scoring happens.
"""

import logging

from medbill.core.matching import find_matches

logger = logging.getLogger(__name__)

NEGATIVE_INDICATORS: tuple[str, ...] = (
    "construction",
    "contractor",
    "chapter",
    "isbn",
    "copyright",
    "restaurant",
    "menu",
    "mortgage",
    "lease agreement",
    "rental agreement",
    "plumbing",
    "electrical",
    "roofing",
    "automotive",
    "car repair",
    "home improvement",
    "landscaping",
    "real estate",
    "property tax",
    "utility bill",
    "phone bill",
    "internet bill",
    "cable bill",
)


def find_negative_indicators(text: str, disqualify_at: int) -> tuple[list[str], bool]:
    """Match negative indicators and decide disqualification.

    Args:
        text: Lowercased haystack text
        disqualify_at: Number of matches that disqualifies the document

    Returns:
        Tuple of (matched_terms, disqualified)
    """
    found = find_matches(text, NEGATIVE_INDICATORS)
    disqualified = len(found) >= disqualify_at

    if found:
        logger.debug(f"Negative indicators: {found} | disqualified={disqualified}")

    return found, disqualified
