"""Medical bill detector.

Scores payment-request language. Documents that passed the required
elements gate also carry a per-category bonus, so a complete document
leans towards "bill" unless insurance language outweighs it.
"""

import logging

from medbill.core.config import ClassificationThresholds
from medbill.core.matching import find_matches
from medbill.models.matrix import (
    IndicatorMatch,
    IndicatorTier,
    RequiredCategories,
    TypeScore,
)

logger = logging.getLogger(__name__)

BILL_INDICATORS: dict[IndicatorTier, tuple[str, ...]] = {
    IndicatorTier.STRONG: (
        "amount due",
        "payment due",
        "please remit",
        "billing statement",
        "patient statement",
        "account balance",
        "pay this amount",
        "minimum payment",
        "payment options",
        "make a payment",
    ),
    IndicatorTier.MEDIUM: (
        "statement",
        "invoice",
        "charges",
        "balance forward",
        "account summary",
        "statement date",
        "due date",
        "total due",
        "current balance",
    ),
    IndicatorTier.WEAK: (
        "total",
        "subtotal",
        "amount",
        "date of service",
        "service date",
    ),
}


def match_tiers(
    text: str,
    indicators: dict[IndicatorTier, tuple[str, ...]],
    thresholds: ClassificationThresholds,
) -> dict[IndicatorTier, list[IndicatorMatch]]:
    """Match a tiered indicator table, weighting each hit by its tier.

    Args:
        text: Lowercased haystack text
        indicators: Terms per tier
        thresholds: Source of the tier weights

    Returns:
        Matched indicators per tier, in table order
    """
    return {
        tier: [
            IndicatorMatch(indicator=term, weight=thresholds.tier_weight(tier), category=tier)
            for term in find_matches(text, terms)
        ]
        for tier, terms in indicators.items()
    }


def score_bill(
    text: str,
    required: RequiredCategories,
    thresholds: ClassificationThresholds,
) -> TypeScore:
    """Score the text as a medical bill.

    Args:
        text: Lowercased haystack text
        required: Phase 2 required-element results
        thresholds: Weights and bonuses

    Returns:
        Bill score with matches per tier and total
    """
    matches = match_tiers(text, BILL_INDICATORS, thresholds)
    total = sum(m.weight for tier_matches in matches.values() for m in tier_matches)
    total += required.found_count * thresholds.required_category_bonus

    score = TypeScore(
        strong_matches=matches[IndicatorTier.STRONG],
        medium_matches=matches[IndicatorTier.MEDIUM],
        weak_matches=matches[IndicatorTier.WEAK],
        total=total,
    )

    logger.debug(
        f"Bill score: {score.total} | strong={len(score.strong_matches)} "
        f"medium={len(score.medium_matches)} weak={len(score.weak_matches)}"
    )
    return score
