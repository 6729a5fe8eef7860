"""Request/response models for the recommendation endpoint."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from papertime.models.filters import FilterCriteria
from papertime.models.paper import ScoredPaper


class RecommendRequest(BaseModel):
    """Body of POST /api/recommend"""
    model_config = ConfigDict(populate_by_name=True)

    liked_paper_ids: List[str] = Field(default_factory=list, alias="likedPaperIds")
    filters: FilterCriteria = Field(default_factory=FilterCriteria)
    max_results: Optional[int] = Field(None, ge=1, alias="maxResults")

    @field_validator("liked_paper_ids")
    @classmethod
    def drop_blank_ids(cls, v: List[str]) -> List[str]:
        return [paper_id for paper_id in v if paper_id.strip()]


class RecommendResponse(BaseModel):
    """Ranked papers, or an empty list with an explanatory message"""

    papers: List[ScoredPaper] = Field(default_factory=list)
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"papers": [p.to_dict() for p in self.papers]}
        if self.message is not None:
            payload["message"] = self.message
        return payload
