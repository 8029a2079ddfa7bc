"""
Base domain models for knowledge analysis.

Knowledge points arrive from the extraction pipeline; relations are
derived from them or created explicitly by a user. Both are immutable
once constructed.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_relation_id() -> str:
    return f"relation-{uuid4().hex[:12]}"


class SourceType(str, Enum):
    """Kind of document a knowledge point was extracted from."""
    PDF = "pdf"
    PPT = "ppt"
    VIDEO = "video"


class RelationType(str, Enum):
    """Types of relations between knowledge points."""
    SIMILAR = "similar"
    PREREQUISITE = "prerequisite"
    EXTENSION = "extension"
    CONTRADICTION = "contradiction"
    PARENT_CHILD = "parent_child"


RELATION_TYPE_LABELS = {
    RelationType.SIMILAR: "Similar content",
    RelationType.PREREQUISITE: "Prerequisite",
    RelationType.EXTENSION: "Extension",
    RelationType.CONTRADICTION: "Contradiction",
    RelationType.PARENT_CHILD: "Parent-child",
}

# Relation types that order a learning path
DEPENDENCY_TYPES = frozenset({RelationType.PREREQUISITE, RelationType.PARENT_CHILD})


def relation_type_label(relation_type: RelationType | str) -> str:
    """Human-readable label for a relation type."""
    try:
        return RELATION_TYPE_LABELS[RelationType(relation_type)]
    except ValueError:
        return "Unknown relation"


class KnowledgePoint(BaseModel):
    """
    An atomic fact or snippet extracted from a course document.

    Tags keep their original order for display; matching treats them
    as a set. An empty category is a valid "uncategorized" bucket.
    """

    id: str = Field(..., description="Unique within a working set")
    content: str = ""
    tags: List[str] = Field(default_factory=list)
    category: str = ""
    confidence: float = Field(default=1.0, description="Extraction quality, 0.0-1.0")

    # Provenance
    source: Optional[str] = None
    source_type: Optional[SourceType] = None
    page: Optional[int] = None
    timestamp: Optional[float] = Field(None, description="Offset in seconds for video sources")

    created_at: datetime = Field(default_factory=_utcnow)

    model_config = {"from_attributes": True, "frozen": True}


class KnowledgeRelation(BaseModel):
    """
    A typed, weighted link between two knowledge points.

    Direction is by convention: for prerequisite and parent-child
    relations the source must be learned before the target.
    """

    id: str = Field(default_factory=new_relation_id)

    source_id: str
    target_id: str
    type: RelationType

    strength: float = Field(default=1.0, description="Clamped to 0.0-1.0")
    description: Optional[str] = None

    created_at: datetime = Field(default_factory=_utcnow)

    model_config = {"from_attributes": True, "frozen": True}

    @field_validator("strength", mode="before")
    @classmethod
    def _clamp_strength(cls, value: float) -> float:
        try:
            strength = float(value)
        except TypeError as e:
            raise ValueError(f"strength must be a number, got {type(value).__name__}") from e
        return min(1.0, max(0.0, strength))

