"""Required element detector.

A complete medical billing document names the patient, the provider, the
service rendered, and the money involved. Each category counts once no
matter how many of its terms match.
"""

import logging

from medbill.core.matching import find_matches
from medbill.models.matrix import (
    RequiredCategories,
    RequiredCategory,
    RequiredCategoryResult,
)

logger = logging.getLogger(__name__)

REQUIRED_ELEMENTS: dict[RequiredCategory, tuple[str, ...]] = {
    RequiredCategory.PATIENT_INFO: (
        "patient name",
        "patient:",
        "member id",
        "account number",
        "medical record",
        "mrn",
        "dob",
        "date of birth",
        "subscriber",
        "dependent",
        "insured",
    ),
    RequiredCategory.PROVIDER_INFO: (
        "provider",
        "physician",
        "doctor",
        "clinic",
        "hospital",
        "npi",
        "tax id",
        "facility",
        "medical center",
        "healthcare",
        "health system",
    ),
    RequiredCategory.MEDICAL_SERVICES: (
        "service date",
        "date of service",
        "procedure",
        "diagnosis",
        "cpt",
        "icd",
        "office visit",
        "exam",
        "treatment",
        "lab",
        "x-ray",
        "radiology",
        "surgery",
    ),
    RequiredCategory.FINANCIAL_INFO: (
        "charge",
        "amount",
        "total",
        "balance",
        "payment",
        "insurance",
        "copay",
        "deductible",
        "billed",
        "cost",
        "fee",
    ),
}


def check_required_elements(text: str) -> RequiredCategories:
    """Match every required-element category against the text.

    Args:
        text: Lowercased haystack text

    Returns:
        Per-category found flags and matched terms
    """
    results = {}
    for category, terms in REQUIRED_ELEMENTS.items():
        matches = find_matches(text, terms)
        results[category.value] = RequiredCategoryResult(found=bool(matches), matches=matches)

    categories = RequiredCategories(**results)
    logger.debug(f"Required categories found: {categories.found_count}/{len(REQUIRED_ELEMENTS)}")
    return categories
