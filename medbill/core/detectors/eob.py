"""Explanation of Benefits detector.

Scores claim adjudication language and looks for the explicit
"not a bill" notice insurers print on EOBs.
"""

import logging

from medbill.core.config import ClassificationThresholds
from medbill.core.detectors.bill import match_tiers
from medbill.models.matrix import EOBScore, IndicatorTier

logger = logging.getLogger(__name__)

EOB_INDICATORS: dict[IndicatorTier, tuple[str, ...]] = {
    IndicatorTier.STRONG: (
        "explanation of benefits",
        "this is not a bill",
        "not a bill",
        "eob",
        "claim summary",
        "claims processed",
        "insurance summary",
        "benefit explanation",
    ),
    IndicatorTier.MEDIUM: (
        "allowed amount",
        "plan paid",
        "insurance paid",
        "member responsibility",
        "what you owe",
        "claim number",
        "processed date",
        "amount covered",
        "coinsurance",
        "copay applied",
        "deductible applied",
        "provider discount",
        "network discount",
    ),
    IndicatorTier.WEAK: (
        "claim",
        "coverage",
        "benefit",
        "network",
        "in-network",
        "out-of-network",
    ),
}

NOT_A_BILL_PHRASES: tuple[str, ...] = ("this is not a bill", "not a bill")


def has_not_a_bill_phrase(text: str) -> bool:
    """Check for an explicit "not a bill" statement.

    Args:
        text: Lowercased haystack text

    Returns:
        True if any "not a bill" phrase occurs
    """
    return any(phrase in text for phrase in NOT_A_BILL_PHRASES)


def score_eob(text: str, thresholds: ClassificationThresholds) -> EOBScore:
    """Score the text as an Explanation of Benefits.

    Args:
        text: Lowercased haystack text
        thresholds: Weights and bonuses

    Returns:
        EOB score with matches per tier, total and the "not a bill" flag
    """
    matches = match_tiers(text, EOB_INDICATORS, thresholds)
    not_a_bill = has_not_a_bill_phrase(text)

    total = sum(m.weight for tier_matches in matches.values() for m in tier_matches)
    if not_a_bill:
        total += thresholds.not_a_bill_bonus

    score = EOBScore(
        strong_matches=matches[IndicatorTier.STRONG],
        medium_matches=matches[IndicatorTier.MEDIUM],
        weak_matches=matches[IndicatorTier.WEAK],
        total=total,
        has_not_a_bill_phrase=not_a_bill,
    )

    logger.debug(
        f"EOB score: {score.total} | strong={len(score.strong_matches)} "
        f"medium={len(score.medium_matches)} weak={len(score.weak_matches)} "
        f"not_a_bill={not_a_bill}"
    )
    return score
