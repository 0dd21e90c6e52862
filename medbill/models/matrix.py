"""Classification matrix models.

The matrix is the complete record of one classification run: every
intermediate match list and score, plus the final decision. It is built
once per call and never mutated afterwards.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from medbill.models.document import DocumentType


class IndicatorTier(str, Enum):
    """Strength tier of an indicator term."""

    STRONG = "strong"
    MEDIUM = "medium"
    WEAK = "weak"


class RequiredCategory(str, Enum):
    """Coarse content categories every medical billing document should carry."""

    PATIENT_INFO = "patient_info"
    PROVIDER_INFO = "provider_info"
    MEDICAL_SERVICES = "medical_services"
    FINANCIAL_INFO = "financial_info"


class IndicatorMatch(BaseModel):
    """A matched indicator term with its weight.

    Attributes:
        indicator: The matched term
        weight: Points contributed by the term
        category: Tier of the term
    """

    model_config = ConfigDict(frozen=True)

    indicator: str = Field(..., description="Matched indicator term")
    weight: int = Field(..., ge=0, description="Points contributed")
    category: IndicatorTier = Field(..., description="Indicator tier")


class RequiredCategoryResult(BaseModel):
    """Match result for one required-element category."""

    model_config = ConfigDict(frozen=True)

    found: bool = False
    matches: list[str] = Field(default_factory=list)


class RequiredCategories(BaseModel):
    """Match results for all four required-element categories."""

    model_config = ConfigDict(frozen=True)

    patient_info: RequiredCategoryResult = Field(default_factory=RequiredCategoryResult)
    provider_info: RequiredCategoryResult = Field(default_factory=RequiredCategoryResult)
    medical_services: RequiredCategoryResult = Field(default_factory=RequiredCategoryResult)
    financial_info: RequiredCategoryResult = Field(default_factory=RequiredCategoryResult)

    def get(self, category: RequiredCategory) -> RequiredCategoryResult:
        """Get the result for a category."""
        return getattr(self, category.value)

    def items(self) -> list[tuple[RequiredCategory, RequiredCategoryResult]]:
        """List (category, result) pairs in category order."""
        return [(category, self.get(category)) for category in RequiredCategory]

    @property
    def found_count(self) -> int:
        """Number of categories with at least one match."""
        return sum(1 for _, result in self.items() if result.found)


class TypeScore(BaseModel):
    """Weighted evidence for one document type.

    Attributes:
        strong_matches: Matched strong-tier terms
        medium_matches: Matched medium-tier terms
        weak_matches: Matched weak-tier terms
        total: Sum of all matched weights plus applicable bonuses
    """

    model_config = ConfigDict(frozen=True)

    strong_matches: list[IndicatorMatch] = Field(default_factory=list)
    medium_matches: list[IndicatorMatch] = Field(default_factory=list)
    weak_matches: list[IndicatorMatch] = Field(default_factory=list)
    total: int = 0


class EOBScore(TypeScore):
    """Weighted evidence for an Explanation of Benefits."""

    has_not_a_bill_phrase: bool = False


class ClassificationMatrix(BaseModel):
    """Fully computed record of one classification decision."""

    model_config = ConfigDict(frozen=True)

    # Phase 1: Disqualification
    negative_indicators_found: list[str] = Field(default_factory=list)
    disqualified: bool = False

    # Phase 2: Required elements
    required_categories: RequiredCategories = Field(default_factory=RequiredCategories)
    required_categories_score: int = Field(default=0, ge=0, le=4)
    has_minimum_required: bool = False

    # Phase 3: Type scoring
    bill_score: TypeScore = Field(default_factory=TypeScore)
    eob_score: EOBScore = Field(default_factory=EOBScore)

    # Phase 4: Final determination
    final_type: DocumentType = DocumentType.INVALID
    confidence: int = Field(default=0, ge=0, le=100)
    reasoning: str = ""
