"""
Relation Service - derives and validates relations between knowledge points.

Implements:
- Automatic relation extraction (content similarity + tag overlap)
- Validated manual relation creation
- Related-point recommendation

Both extraction passes compare every unordered pair, so extraction is
O(n^2) in the number of points. Intended for working sets of tens to a
few hundred points.
"""

import logging
from collections import defaultdict
from typing import Iterable, Optional, Sequence

from ..config import AnalysisSettings
from ..errors import InvalidReferenceError
from ..models import KnowledgePoint, KnowledgeRelation, RelationType
from .similarity import overlap_score, similarity


logger = logging.getLogger(__name__)

SIMILAR_CONTENT_DESCRIPTION = "Automatically detected similar content"


def _unique_tags(point: KnowledgePoint) -> list[str]:
    return list(dict.fromkeys(point.tags))


class RelationService:
    """
    Extracts relations from a collection of knowledge points.

    Thresholds and keyword markers come from AnalysisSettings.
    """

    def __init__(self, settings: AnalysisSettings | None = None) -> None:
        self._settings = settings or AnalysisSettings()

    @property
    def settings(self) -> AnalysisSettings:
        return self._settings

    # =========================================================
    # EXTRACTION
    # =========================================================

    def analyze(self, points: Sequence[KnowledgePoint]) -> list[KnowledgeRelation]:
        """
        Derive relations between all pairs of points.

        Runs the intra-category similarity pass and the tag overlap pass
        and concatenates their results. A pair may be related by both
        passes; such duplicates are kept unless deduplicate_relations
        is enabled.
        """
        if len(points) < 2:
            return []

        similar = self._similarity_pass(points)
        tagged = self._tag_overlap_pass(points)
        logger.debug(
            f"Extracted {len(similar)} similarity and {len(tagged)} tag relations "
            f"from {len(points)} points"
        )

        relations = similar + tagged
        if self._settings.deduplicate_relations:
            relations = deduplicate(relations)
        return relations

    def _similarity_pass(self, points: Sequence[KnowledgePoint]) -> list[KnowledgeRelation]:
        """Similar relations between points of the same category."""
        threshold = self._settings.similarity_threshold
        min_length = self._settings.min_token_length

        by_category: dict[str, list[KnowledgePoint]] = defaultdict(list)
        for point in points:
            by_category[point.category].append(point)

        relations = []
        for group in by_category.values():
            for i, point_a in enumerate(group):
                for point_b in group[i + 1:]:
                    score = similarity(point_a.content, point_b.content, min_length)
                    if score > threshold:
                        relations.append(KnowledgeRelation(
                            source_id=point_a.id,
                            target_id=point_b.id,
                            type=RelationType.SIMILAR,
                            strength=score,
                            description=SIMILAR_CONTENT_DESCRIPTION,
                        ))
        return relations

    def _tag_overlap_pass(self, points: Sequence[KnowledgePoint]) -> list[KnowledgeRelation]:
        """Relations between any two points sharing enough tags."""
        tags = [_unique_tags(p) for p in points]

        relations = []
        for i, point_a in enumerate(points):
            for j in range(i + 1, len(points)):
                point_b = points[j]
                tags_b = set(tags[j])
                common = [tag for tag in tags[i] if tag in tags_b]
                score = overlap_score(set(tags[i]), tags_b)

                if len(common) >= self._settings.min_common_tags \
                        and score > self._settings.tag_overlap_threshold:
                    relations.append(KnowledgeRelation(
                        source_id=point_a.id,
                        target_id=point_b.id,
                        type=self.classify_tags(common),
                        strength=score,
                        description=f"Common tags: {', '.join(common)}",
                    ))
        return relations

    def classify_tags(self, common_tags: Iterable[str]) -> RelationType:
        """
        Pick a relation type from shared tags.

        Foundational markers win over advanced ones; anything else is
        plain similarity.
        """
        lowered = [tag.lower() for tag in common_tags]

        def has_marker(keywords: list[str]) -> bool:
            return any(k.lower() in tag for tag in lowered for k in keywords)

        if has_marker(self._settings.foundational_keywords):
            return RelationType.PREREQUISITE
        elif has_marker(self._settings.advanced_keywords):
            return RelationType.EXTENSION
        return RelationType.SIMILAR

    # =========================================================
    # MANUAL CREATION
    # =========================================================

    def create(
        self,
        points: Iterable[KnowledgePoint],
        source_id: str,
        target_id: str,
        relation_type: RelationType,
        strength: float = 1.0,
        description: Optional[str] = None,
    ) -> KnowledgeRelation:
        """
        Create a relation after validating both endpoints.

        Raises:
            InvalidReferenceError: If an endpoint is missing from points
                or source and target are the same point
        """
        known = {p.id for p in points}
        if source_id not in known or target_id not in known:
            missing = source_id if source_id not in known else target_id
            raise InvalidReferenceError(source_id, target_id, f"unknown point {missing}")
        if source_id == target_id:
            raise InvalidReferenceError(source_id, target_id, "self-relation")

        relation = KnowledgeRelation(
            source_id=source_id,
            target_id=target_id,
            type=RelationType(relation_type),
            strength=strength,
            description=description,
        )
        logger.info(f"Created {relation.type.value} relation: {source_id} -> {target_id}")
        return relation

    # =========================================================
    # RECOMMENDATION
    # =========================================================

    def recommend(
        self,
        point_id: str,
        points: Sequence[KnowledgePoint],
        limit: int = 5,
    ) -> list[KnowledgePoint]:
        """
        Rank other points by relevance to one point.

        Relevance combines content similarity, tag overlap and a bonus
        for sharing the category. Unknown point_id gives [].
        """
        current = next((p for p in points if p.id == point_id), None)
        if current is None or limit <= 0:
            return []

        s = self._settings
        current_tags = set(current.tags)

        scored: list[tuple[KnowledgePoint, float]] = []
        for point in points:
            if point.id == point_id:
                continue
            score = (
                similarity(current.content, point.content, s.min_token_length) * s.content_weight
                + overlap_score(current_tags, set(point.tags)) * s.tag_weight
                + (s.category_bonus if point.category == current.category else 0.0)
            )
            scored.append((point, score))

        scored.sort(key=lambda x: x[1], reverse=True)
        return [point for point, _ in scored[:limit]]


def deduplicate(relations: Iterable[KnowledgeRelation]) -> list[KnowledgeRelation]:
    """
    Merge relations sharing (source_id, target_id, type).

    The strongest relation of each group is kept, at the position of the
    group's first occurrence. Ties keep the earlier relation.
    """
    best: dict[tuple[str, str, RelationType], KnowledgeRelation] = {}
    for relation in relations:
        key = (relation.source_id, relation.target_id, relation.type)
        kept = best.get(key)
        if kept is None or relation.strength > kept.strength:
            best[key] = relation
    return list(best.values())


def analyze_relations(
    points: Sequence[KnowledgePoint],
    settings: AnalysisSettings | None = None
) -> list[KnowledgeRelation]:
    """Derive relations between knowledge points."""
    return RelationService(settings).analyze(points)


def create_relation(
    points: Iterable[KnowledgePoint],
    source_id: str,
    target_id: str,
    relation_type: RelationType,
    strength: float = 1.0,
    description: Optional[str] = None,
) -> KnowledgeRelation:
    """Create a validated relation between two points of the working set."""
    return RelationService().create(
        points, source_id, target_id, relation_type, strength, description
    )


def recommend_related(
    point_id: str,
    points: Sequence[KnowledgePoint],
    limit: int = 5,
    settings: AnalysisSettings | None = None
) -> list[KnowledgePoint]:
    """Points most relevant to point_id, most relevant first."""
    return RelationService(settings).recommend(point_id, points, limit)
