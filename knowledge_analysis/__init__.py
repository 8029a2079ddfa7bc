"""
Knowledge Analysis Library.

Derives relations between extracted knowledge points and analyses the
resulting graph: similarity scoring, relation extraction, graph views,
key-node ranking, gap detection and learning-path generation.

Quick Start:
    from knowledge_analysis import KnowledgePoint, analyze_relations, generate_path

    points = [
        KnowledgePoint(id="kp-1", content="Variables store values", category="python"),
        KnowledgePoint(id="kp-2", content="Functions take values", category="python"),
    ]
    relations = analyze_relations(points)
    path = generate_path(points, relations, ["kp-2"])

All analysis functions are pure: they read the collections passed in and
return new results.
"""

from .config import AnalysisSettings

from .errors import (
    KnowledgeAnalysisError,
    InvalidReferenceError,
    CyclicDependencyError,
    StorageError,
)

from .models import (
    KnowledgePoint,
    KnowledgeRelation,
    RelationType,
    SourceType,
    relation_type_label,
    GraphNode,
    GraphEdge,
    KnowledgeGraph,
    GapKind,
    KnowledgeGap,
    LearningPath,
)

from .services import (
    similarity,
    tokenize,
    analyze_relations,
    create_relation,
    recommend_related,
    build_graph,
    find_key_points,
    compute_degrees,
    detect_gaps,
    generate_path,
    RelationService,
    GraphService,
    AnalyticsService,
    LearningPathGenerator,
)

from .storage import (
    Repository,
    InMemoryRepository,
    JsonFileRepository,
)

from .repository import KnowledgeAnalysisRepository

__all__ = [
    # Config
    "AnalysisSettings",
    # Errors
    "KnowledgeAnalysisError",
    "InvalidReferenceError",
    "CyclicDependencyError",
    "StorageError",
    # Models
    "KnowledgePoint",
    "KnowledgeRelation",
    "RelationType",
    "SourceType",
    "relation_type_label",
    "GraphNode",
    "GraphEdge",
    "KnowledgeGraph",
    "GapKind",
    "KnowledgeGap",
    "LearningPath",
    # Operations
    "similarity",
    "tokenize",
    "analyze_relations",
    "create_relation",
    "recommend_related",
    "build_graph",
    "find_key_points",
    "compute_degrees",
    "detect_gaps",
    "generate_path",
    # Services
    "RelationService",
    "GraphService",
    "AnalyticsService",
    "LearningPathGenerator",
    # Storage
    "Repository",
    "InMemoryRepository",
    "JsonFileRepository",
    # Repository
    "KnowledgeAnalysisRepository",
]
