"""Application configuration management."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from medbill.models.matrix import IndicatorTier


class ClassificationThresholds(BaseModel):
    """Tunable constants of the classification matrix.

    The defaults are the hand-tuned values the classifier has always used.
    Override them through ``CLASSIFICATION__<FIELD>`` environment variables.
    """

    model_config = ConfigDict(frozen=True)

    medical_bill_min_score: int = Field(
        default=30, ge=0, description="Minimum bill score for a scored MEDICAL_BILL decision"
    )
    eob_min_score: int = Field(
        default=25, ge=0, description="Minimum EOB score for a scored EOB decision"
    )
    required_categories_min: int = Field(
        default=3, ge=0, le=4, description="Required-element categories needed to pass the gate"
    )
    disqualification_negative_count: int = Field(
        default=2, ge=1, description="Negative indicators that disqualify a document"
    )
    required_category_bonus: int = Field(
        default=15, ge=0, description="Bill score bonus per required category found"
    )
    not_a_bill_bonus: int = Field(
        default=15, ge=0, description="EOB score bonus for a 'not a bill' statement"
    )
    strong_weight: int = Field(default=10, ge=0, description="Weight of strong indicators")
    medium_weight: int = Field(default=5, ge=0, description="Weight of medium indicators")
    weak_weight: int = Field(default=2, ge=0, description="Weight of weak indicators")

    def tier_weight(self, tier: IndicatorTier) -> int:
        """Get the point weight for an indicator tier."""
        if tier == IndicatorTier.STRONG:
            return self.strong_weight
        elif tier == IndicatorTier.MEDIUM:
            return self.medium_weight
        elif tier == IndicatorTier.WEAK:
            return self.weak_weight
        raise ValueError(f"Unknown indicator tier: {tier}")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    api_reload: bool = Field(default=False, description="Enable auto-reload")

    # Logging Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_to_file: bool = Field(default=True, description="Write rotated log files")
    log_dir: str = Field(default="logs", description="Directory for log files")

    # Classification Configuration
    include_debug_info: bool = Field(
        default=True, description="Attach score diagnostics to classification responses"
    )
    classification: ClassificationThresholds = Field(
        default_factory=ClassificationThresholds,
        description="Classification matrix thresholds and weights",
    )


# Global settings instance
settings = Settings()
