"""Detector and term matcher tests."""

import pytest

from medbill.core.config import ClassificationThresholds
from medbill.core.detectors import (
    BILL_INDICATORS,
    EOB_INDICATORS,
    NEGATIVE_INDICATORS,
    REQUIRED_ELEMENTS,
    check_required_elements,
    find_negative_indicators,
    has_not_a_bill_phrase,
    score_bill,
    score_eob,
)
from medbill.core.matching import find_matches
from medbill.models import (
    IndicatorTier,
    RequiredCategories,
    RequiredCategory,
    RequiredCategoryResult,
)


class TestFindMatches:
    """Term matcher."""

    def test_substring_match(self):
        """A term inside a longer word still counts."""
        assert find_matches("laboratory results", ["lab", "x-ray"]) == ["lab"]

    def test_candidate_order_preserved(self):
        """Results follow the candidate list, not the position in text."""
        assert find_matches("b then a", ["a", "b"]) == ["a", "b"]

    def test_terms_lowered(self):
        assert find_matches("amount due", ["Amount Due"]) == ["Amount Due"]

    def test_no_matches(self):
        assert find_matches("nothing here", ["cpt", "icd"]) == []


class TestIndicatorTables:
    """Static tables."""

    def test_tables_are_lowercase(self):
        tables = [NEGATIVE_INDICATORS]
        tables += list(BILL_INDICATORS.values())
        tables += list(EOB_INDICATORS.values())
        tables += list(REQUIRED_ELEMENTS.values())
        for terms in tables:
            assert all(term == term.lower() for term in terms)

    def test_every_tier_present(self):
        assert set(BILL_INDICATORS) == set(IndicatorTier)
        assert set(EOB_INDICATORS) == set(IndicatorTier)

    def test_every_required_category_present(self):
        assert list(REQUIRED_ELEMENTS) == list(RequiredCategory)


class TestNegativeDetector:
    """Phase 1 detector."""

    def test_two_matches_disqualify(self):
        found, disqualified = find_negative_indicators("mortgage and property tax", 2)
        assert found == ["mortgage", "property tax"]
        assert disqualified is True

    def test_one_match_does_not_disqualify(self):
        found, disqualified = find_negative_indicators("your phone bill", 2)
        assert found == ["phone bill"]
        assert disqualified is False


class TestRequiredDetector:
    """Phase 2 detector."""

    def test_all_categories(self):
        text = "patient name: a. lee | npi 123 | diagnosis z00 | billed $10"
        categories = check_required_elements(text)
        assert categories.found_count == 4
        assert categories.patient_info.matches == ["patient name"]
        assert categories.provider_info.matches == ["npi"]
        assert categories.medical_services.matches == ["diagnosis"]
        assert categories.financial_info.matches == ["billed"]

    def test_category_counts_once(self):
        categories = check_required_elements("hospital clinic physician")
        assert categories.provider_info.matches == ["physician", "clinic", "hospital"]
        assert categories.found_count == 1

    def test_items_order(self):
        categories = check_required_elements("")
        assert [category for category, _ in categories.items()] == list(RequiredCategory)
        assert categories.get(RequiredCategory.PATIENT_INFO).found is False


class TestBillScoring:
    """Bill indicator scoring."""

    def test_tier_weights(self):
        score = score_bill("amount due", RequiredCategories(), ClassificationThresholds())
        assert [m.indicator for m in score.strong_matches] == ["amount due"]
        assert [m.indicator for m in score.weak_matches] == ["amount"]
        assert score.strong_matches[0].weight == 10
        assert score.weak_matches[0].weight == 2
        assert score.weak_matches[0].category == IndicatorTier.WEAK
        assert score.total == 12

    def test_required_category_bonus(self):
        required = RequiredCategories(
            patient_info=RequiredCategoryResult(found=True, matches=["mrn"]),
            financial_info=RequiredCategoryResult(found=True, matches=["fee"]),
        )
        score = score_bill("invoice", required, ClassificationThresholds())
        assert score.medium_matches[0].weight == 5
        assert score.total == 5 + 2 * 15

    def test_custom_weights(self):
        thresholds = ClassificationThresholds(strong_weight=1, weak_weight=0)
        score = score_bill("amount due", RequiredCategories(), thresholds)
        assert score.total == 1


class TestEOBScoring:
    """EOB indicator scoring."""

    def test_not_a_bill_bonus(self):
        score = score_eob("this is not a bill", ClassificationThresholds())
        assert [m.indicator for m in score.strong_matches] == ["this is not a bill", "not a bill"]
        assert score.has_not_a_bill_phrase is True
        assert score.total == 20 + 15

    def test_medium_and_weak(self):
        score = score_eob("plan paid, out-of-network", ClassificationThresholds())
        assert [m.indicator for m in score.medium_matches] == ["plan paid"]
        assert [m.indicator for m in score.weak_matches] == ["network", "out-of-network"]
        assert score.has_not_a_bill_phrase is False
        assert score.total == 5 + 2 + 2

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("this is not a bill", True),
            ("note: not a bill.", True),
            ("this is a bill", False),
        ],
    )
    def test_not_a_bill_phrase(self, text, expected):
        assert has_not_a_bill_phrase(text) is expected


class TestThresholds:
    """Threshold configuration."""

    def test_defaults(self):
        thresholds = ClassificationThresholds()
        assert thresholds.medical_bill_min_score == 30
        assert thresholds.eob_min_score == 25
        assert thresholds.required_categories_min == 3
        assert thresholds.disqualification_negative_count == 2
        assert thresholds.required_category_bonus == 15
        assert thresholds.not_a_bill_bonus == 15

    def test_tier_weight(self):
        thresholds = ClassificationThresholds()
        assert thresholds.tier_weight(IndicatorTier.STRONG) == 10
        assert thresholds.tier_weight(IndicatorTier.MEDIUM) == 5
        assert thresholds.tier_weight(IndicatorTier.WEAK) == 2

    def test_validation(self):
        with pytest.raises(ValueError):
            ClassificationThresholds(required_categories_min=5)
        with pytest.raises(ValueError):
            ClassificationThresholds(disqualification_negative_count=0)
