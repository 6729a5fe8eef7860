from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict


DEFAULT_FOUNDATIONAL_KEYWORDS = [
    "foundation",
    "fundamental",
    "seminal",
    "pioneer",
    "breakthrough",
    "transformer",
    "attention",
    "resnet",
    "bert",
    "gpt",
    "gan",
]


class RecencyTier(BaseModel):
    """Papers at most ``max_days`` old receive ``score``"""
    model_config = ConfigDict(frozen=True)

    max_days: int = Field(..., ge=0)
    score: float = Field(..., ge=0.0, le=1.0)


def _default_recency_tiers() -> List[RecencyTier]:
    return [
        RecencyTier(max_days=30, score=1.0),
        RecencyTier(max_days=90, score=0.7),
        RecencyTier(max_days=365, score=0.4),
    ]


class RankingConfig(BaseModel):
    """Tuning constants for relevance scoring"""
    model_config = ConfigDict(frozen=True)

    # Relevance weights (must sum to 1.0)
    similarity_weight: float = Field(0.5, ge=0.0, le=1.0)
    recency_weight: float = Field(0.3, ge=0.0, le=1.0)
    foundational_weight: float = Field(0.2, ge=0.0, le=1.0)

    # Similarity
    neutral_similarity: float = Field(
        0.5, ge=0.0, le=1.0, description="Used when no liked paper is in the pool"
    )
    norm_scale: float = Field(
        10.0, gt=0.0, description="Vector norm divisor when there is no history"
    )

    # Recency
    recency_tiers: List[RecencyTier] = Field(default_factory=_default_recency_tiers)
    stale_recency_score: float = Field(0.1, ge=0.0, le=1.0)

    # Foundational
    foundational_cutoff: date = date(2020, 1, 1)
    foundational_keywords: List[str] = Field(
        default_factory=lambda: list(DEFAULT_FOUNDATIONAL_KEYWORDS)
    )
    foundational_keyword_score: float = Field(1.0, ge=0.0, le=1.0)
    foundational_default_score: float = Field(0.5, ge=0.0, le=1.0)

    @field_validator("recency_tiers")
    @classmethod
    def sort_tiers(cls, v: List[RecencyTier]) -> List[RecencyTier]:
        return sorted(v, key=lambda tier: tier.max_days)

    @field_validator("foundational_keywords")
    @classmethod
    def lowercase_keywords(cls, v: List[str]) -> List[str]:
        return [kw.lower() for kw in v if kw.strip()]

    @model_validator(mode="after")
    def validate_weights(self) -> "RankingConfig":
        total = self.similarity_weight + self.recency_weight + self.foundational_weight
        if not (0.99 <= total <= 1.01):
            raise ValueError(f"Ranking weights must sum to 1.0, got {total}")
        return self


class ServiceSettings(BaseModel):
    """Recommendation service and server settings"""

    default_max_results: int = Field(50, ge=1, le=1000)
    papers_path: Optional[str] = Field(
        None, description="JSON dump of feed papers served by the API"
    )
    log_level: str = Field("INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    json_logs: bool = True
    host: str = "127.0.0.1"
    port: int = Field(8000, ge=1, le=65535)

    @field_validator("papers_path", mode="before")
    @classmethod
    def unresolved_path_is_none(cls, v):
        # Left as-is by env substitution when the variable is unset
        if isinstance(v, str) and (not v.strip() or v.startswith("${")):
            return None
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v


class AppConfig(BaseModel):
    """Root configuration loaded from YAML"""

    ranking: RankingConfig = Field(default_factory=RankingConfig)
    settings: ServiceSettings = Field(default_factory=ServiceSettings)
