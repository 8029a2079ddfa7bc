"""
Knowledge Analysis Domain Models.

Pydantic models for points, relations and graph views, plus plain
dataclasses for derived findings.
"""

from .base import (
    KnowledgePoint,
    KnowledgeRelation,
    RelationType,
    SourceType,
    DEPENDENCY_TYPES,
    relation_type_label,
)

from .graph import (
    GraphNode,
    GraphEdge,
    KnowledgeGraph,
)

from .findings import (
    GapKind,
    KnowledgeGap,
    LearningPath,
)

__all__ = [
    # Base models
    "KnowledgePoint",
    "KnowledgeRelation",
    # Enums
    "RelationType",
    "SourceType",
    "DEPENDENCY_TYPES",
    "relation_type_label",
    # Graph view
    "GraphNode",
    "GraphEdge",
    "KnowledgeGraph",
    # Findings
    "GapKind",
    "KnowledgeGap",
    "LearningPath",
]
