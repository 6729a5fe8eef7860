"""Data models for paper filtering."""

from enum import Enum
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Subject name -> arXiv category codes. A paper matches a subject when one of
# its category tags contains one of the codes.
SUBJECT_CATEGORIES: Dict[str, Tuple[str, ...]] = {
    "Machine Learning": ("cs.LG", "stat.ML"),
    "Computer Vision": ("cs.CV",),
    "Natural Language Processing": ("cs.CL", "cs.AI"),
    "Reinforcement Learning": ("cs.AI", "cs.LG"),
    "Neural Networks": ("cs.NE", "cs.LG"),
    "Information Retrieval": ("cs.IR",),
    "Artificial Intelligence": ("cs.AI",),
    "Robotics": ("cs.RO",),
    "Cryptography": ("cs.CR",),
    "Distributed Systems": ("cs.DC", "cs.DS"),
}


class PaperType(str, Enum):
    CONFERENCE = "conference"
    JOURNAL = "journal"
    PREPRINT = "preprint"
    WORKSHOP = "workshop"

    @classmethod
    def from_label(cls, label: str) -> Optional["PaperType"]:
        """Resolve 'Conference' / 'conference' style labels, None if unknown."""
        try:
            return cls(label.strip().lower())
        except ValueError:
            return None


# Substrings of the (lowercased) comment field that count as evidence for a
# type. PREPRINT has no entry: every feed paper is a candidate preprint.
PAPER_TYPE_KEYWORDS: Dict[PaperType, Tuple[str, ...]] = {
    PaperType.CONFERENCE: ("conference", "cvpr", "iccv", "neurips", "icml", "acl"),
    PaperType.JOURNAL: ("journal", "ieee", "acm"),
    PaperType.WORKSHOP: ("workshop",),
}


class FilterCriteria(BaseModel):
    """User-selected filters. Empty selections disable the matching predicate."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    subjects: Tuple[str, ...] = ()
    paper_types: Tuple[str, ...] = Field((), alias="paperTypes")
    boolean_query: str = Field("", alias="booleanQuery")

    @field_validator("boolean_query", mode="before")
    @classmethod
    def none_query_is_empty(cls, v):
        return "" if v is None else v

    @property
    def is_empty(self) -> bool:
        return (
            not self.subjects
            and not self.paper_types
            and not self.boolean_query.strip()
        )


class FilterStats(BaseModel):
    """Paper filtering statistics"""
    model_config = ConfigDict(protected_namespaces=())

    total_papers_input: int = 0
    rejected_by_subject: int = 0
    rejected_by_type: int = 0
    rejected_by_query: int = 0
    papers_output: int = 0
