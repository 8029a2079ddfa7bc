"""
Services layer for Knowledge Analysis.

Each service is a stateless computation over collections passed in by
the caller. The module-level functions use default settings.
"""

from .similarity import similarity, tokenize
from .relation_service import (
    RelationService,
    analyze_relations,
    create_relation,
    deduplicate,
    recommend_related,
)
from .graph_service import GraphService, build_graph
from .analytics_service import (
    AnalyticsService,
    compute_degrees,
    detect_gaps,
    find_key_points,
)
from .path_service import LearningPathGenerator, generate_path

__all__ = [
    "similarity",
    "tokenize",
    "RelationService",
    "analyze_relations",
    "create_relation",
    "deduplicate",
    "recommend_related",
    "GraphService",
    "build_graph",
    "AnalyticsService",
    "compute_degrees",
    "detect_gaps",
    "find_key_points",
    "LearningPathGenerator",
    "generate_path",
]
