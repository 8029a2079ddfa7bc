"""
Graph analytics over knowledge relations.

Implements:
- Degree centrality (key knowledge points)
- Structural gap detection (sparse/under-connected categories,
  isolated points)
"""

import logging
from collections import defaultdict
from typing import Iterable, Sequence

from ..config import AnalysisSettings
from ..models import GapKind, KnowledgeGap, KnowledgePoint, KnowledgeRelation


logger = logging.getLogger(__name__)


class AnalyticsService:
    """
    Analytics service for the relation graph.

    Provides key-node ranking and gap detection.
    """

    def __init__(self, settings: AnalysisSettings | None = None) -> None:
        self._settings = settings or AnalysisSettings()

    # ─────────────────────────────────────────────────────────────────────────
    # Centrality
    # ─────────────────────────────────────────────────────────────────────────

    def compute_degrees(self, relations: Iterable[KnowledgeRelation]) -> dict[str, int]:
        """
        Count relations touching each point ID.

        Both endpoints are counted. Keys are in first-seen order.
        """
        degrees: dict[str, int] = {}
        for relation in relations:
            for point_id in (relation.source_id, relation.target_id):
                degrees[point_id] = degrees.get(point_id, 0) + 1
        return degrees

    def find_key_points(
        self,
        relations: Iterable[KnowledgeRelation],
        limit: int = 5
    ) -> list[str]:
        """
        IDs of the most connected points, highest degree first.

        Ties keep first-seen order (sorted() is stable).
        """
        if limit <= 0:
            return []
        degrees = self.compute_degrees(relations)
        ranked = sorted(degrees.items(), key=lambda item: item[1], reverse=True)
        return [point_id for point_id, _ in ranked[:limit]]

    # ─────────────────────────────────────────────────────────────────────────
    # Gap Detection
    # ─────────────────────────────────────────────────────────────────────────

    def detect_gaps(
        self,
        points: Sequence[KnowledgePoint],
        relations: Sequence[KnowledgeRelation]
    ) -> list[KnowledgeGap]:
        """
        Detect structural gaps in the knowledge graph.

        Identifies:
        - Sparse categories (fewer than min_category_size points)
        - Under-connected categories (fewer internal relations than a
          spanning tree needs)
        - Isolated points (no relations at all), as one aggregate finding

        Findings have no meaningful order.
        """
        min_size = self._settings.min_category_size
        gaps: list[KnowledgeGap] = []

        by_category: dict[str, set[str]] = defaultdict(set)
        for point in points:
            by_category[point.category].add(point.id)

        for category, member_ids in by_category.items():
            size = len(member_ids)
            if size < min_size:
                gaps.append(KnowledgeGap(GapKind.SPARSE_CATEGORY, size, category))
                continue

            internal = sum(
                1 for r in relations
                if r.source_id in member_ids and r.target_id in member_ids
            )
            if internal < size - 1:
                gaps.append(KnowledgeGap(GapKind.UNDERCONNECTED_CATEGORY, internal, category))

        connected: set[str] = set()
        for relation in relations:
            connected.add(relation.source_id)
            connected.add(relation.target_id)

        isolated = [p for p in points if p.id not in connected]
        if isolated:
            gaps.append(KnowledgeGap(GapKind.ISOLATED_POINTS, len(isolated)))

        logger.debug(f"Detected {len(gaps)} gap(s) across {len(by_category)} categories")
        return gaps


def find_key_points(relations: Iterable[KnowledgeRelation], limit: int = 5) -> list[str]:
    """IDs of the most connected points, highest degree first."""
    return AnalyticsService().find_key_points(relations, limit)


def compute_degrees(relations: Iterable[KnowledgeRelation]) -> dict[str, int]:
    """Relation count per point ID."""
    return AnalyticsService().compute_degrees(relations)


def detect_gaps(
    points: Sequence[KnowledgePoint],
    relations: Sequence[KnowledgeRelation],
    settings: AnalysisSettings | None = None
) -> list[KnowledgeGap]:
    """Structural gaps of a knowledge graph."""
    return AnalyticsService(settings).detect_gaps(points, relations)
