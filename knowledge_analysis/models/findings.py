"""
Derived analysis results: structural gaps and learning paths.
"""

from dataclasses import dataclass, field
from enum import Enum

from .base import KnowledgePoint


class GapKind(str, Enum):
    """Kinds of structural weakness in a knowledge graph."""
    SPARSE_CATEGORY = "sparse_category"
    UNDERCONNECTED_CATEGORY = "underconnected_category"
    ISOLATED_POINTS = "isolated_points"


@dataclass(frozen=True)
class KnowledgeGap:
    """
    A detected gap in the knowledge graph.

    count means: points in the category (sparse), relations inside the
    category (under-connected), or number of isolated points.
    """
    kind: GapKind
    count: int
    category: str | None = None

    @property
    def message(self) -> str:
        """Human-readable diagnostic."""
        if self.kind == GapKind.SPARSE_CATEGORY:
            return (
                f'Category "{self.category}" has only {self.count} knowledge point(s); '
                "consider adding more related points"
            )
        elif self.kind == GapKind.UNDERCONNECTED_CATEGORY:
            return (
                f'Category "{self.category}" has only {self.count} internal relation(s); '
                "consider linking its knowledge points"
            )
        return (
            f"{self.count} knowledge point(s) have no relations; "
            "consider connecting them to other points"
        )


@dataclass
class LearningPath:
    """A dependency-ordered sequence of knowledge points ending at the targets."""
    target_ids: list[str]
    points: list[KnowledgePoint] = field(default_factory=list)
    has_cycle: bool = False

    @property
    def point_ids(self) -> list[str]:
        return [p.id for p in self.points]

    def __len__(self) -> int:
        return len(self.points)
