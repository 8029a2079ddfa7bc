"""
Graph Service - builds the node/edge view of points and relations.
"""

import logging
from typing import Iterable, Optional, Sequence

from ..models import (
    GraphEdge,
    GraphNode,
    KnowledgeGraph,
    KnowledgePoint,
    KnowledgeRelation,
    RelationType,
    relation_type_label,
)


logger = logging.getLogger(__name__)

LABEL_LENGTH = 20
NODE_VALUE_SCALE = 10
EDGE_VALUE_SCALE = 3


def node_label(content: str, length: int = LABEL_LENGTH) -> str:
    """Truncated content used as a node caption."""
    if len(content) > length:
        return content[:length] + "..."
    return content


class GraphService:
    """
    Converts knowledge points and relations into a KnowledgeGraph.

    Only points touched by at least one kept relation become nodes;
    isolated points are reported by gap detection instead.
    """

    def build(
        self,
        points: Sequence[KnowledgePoint],
        relations: Iterable[KnowledgeRelation],
        active_types: Optional[Iterable[RelationType]] = None,
    ) -> KnowledgeGraph:
        """
        Build a graph view filtered to the active relation types.

        Args:
            points: Working set of knowledge points
            relations: Relations between them
            active_types: Relation types to show (None shows all)

        Returns:
            KnowledgeGraph whose edges all connect nodes of the same graph
        """
        active = set(RelationType) if active_types is None else {RelationType(t) for t in active_types}
        known = {p.id for p in points}

        edges: list[GraphEdge] = []
        touched: set[str] = set()
        dangling = 0

        for relation in relations:
            if relation.type not in active:
                continue
            if relation.source_id not in known or relation.target_id not in known:
                dangling += 1
                continue

            touched.add(relation.source_id)
            touched.add(relation.target_id)
            edges.append(GraphEdge(
                source=relation.source_id,
                target=relation.target_id,
                value=relation.strength * EDGE_VALUE_SCALE,
                label=relation_type_label(relation.type),
                type=relation.type,
            ))

        if dangling:
            logger.warning(f"Skipped {dangling} relation(s) referencing unknown points")

        nodes = [
            GraphNode(
                id=point.id,
                label=node_label(point.content),
                category=point.category,
                value=point.confidence * NODE_VALUE_SCALE,
                tags=list(point.tags),
            )
            for point in points
            if point.id in touched
        ]

        return KnowledgeGraph(nodes=nodes, edges=edges)


def build_graph(
    points: Sequence[KnowledgePoint],
    relations: Iterable[KnowledgeRelation],
    active_types: Optional[Iterable[RelationType]] = None,
) -> KnowledgeGraph:
    """Node/edge view of points and relations of the active types."""
    return GraphService().build(points, relations, active_types)
