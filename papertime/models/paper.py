from pydantic import BaseModel, Field, ConfigDict
from typing import Annotated, Any, Dict, List, Literal, Optional, Union
from datetime import datetime


class PaperLink(BaseModel):
    """Link attached to a feed entry (abstract page, PDF, DOI)"""
    model_config = ConfigDict(frozen=True)

    href: str
    rel: str = "alternate"
    type: Optional[str] = None


class Paper(BaseModel):
    """A paper record as delivered by the preprint feed.

    Immutable once fetched. The identifier is exposed as ``id`` on the wire
    and as ``paper_id`` in Python.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Identifiers
    paper_id: str = Field(..., alias="id", min_length=1)

    # Content
    title: str = ""
    summary: str = ""
    authors: List[str] = Field(default_factory=list)
    comment: Optional[str] = None

    # Dates
    published: datetime
    updated: Optional[datetime] = None

    # Classification
    categories: List[str] = Field(default_factory=list)
    links: List[PaperLink] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation using the feed's field names."""
        return self.model_dump(mode="json", by_alias=True)


class PaperScores(BaseModel):
    """Score breakdown for a single paper, every component in [0, 1]"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    similarity: float = Field(0.0, ge=0.0, le=1.0, alias="similarityScore")
    recency: float = Field(0.0, ge=0.0, le=1.0, alias="recencyScore")
    foundational: float = Field(0.0, ge=0.0, le=1.0, alias="foundationalScore")
    relevance: float = Field(0.0, ge=0.0, le=1.0, alias="relevanceScore")


class UnscoredPaper(BaseModel):
    """Paper shown without a ranking (e.g. plain filter results)"""
    model_config = ConfigDict(frozen=True)

    kind: Literal["unscored"] = "unscored"
    paper: Paper

    def to_dict(self) -> Dict[str, Any]:
        return self.paper.to_dict()


class ScoredPaper(BaseModel):
    """Paper together with the scores that ranked it"""
    model_config = ConfigDict(frozen=True)

    kind: Literal["scored"] = "scored"
    paper: Paper
    scores: PaperScores

    @property
    def paper_id(self) -> str:
        return self.paper.paper_id

    def to_dict(self) -> Dict[str, Any]:
        """Flatten paper fields and camelCase score fields into one mapping."""
        data = self.paper.to_dict()
        data.update(self.scores.model_dump(by_alias=True))
        return data


# Card variant consumed by renderers; dispatch on the concrete type.
PaperCard = Annotated[Union[UnscoredPaper, ScoredPaper], Field(discriminator="kind")]
