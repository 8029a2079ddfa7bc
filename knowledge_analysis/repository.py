"""
Unified repository interface for Knowledge Analysis.

Provides a single facade for:
- Knowledge point and relation storage
- Relation extraction and manual relation creation
- Graph views, key points and gap detection
- Learning paths and recommendations

This is the main entry point for applications. Every analysis call
loads the stored collections and passes them to the pure services.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence

from .config import AnalysisSettings
from .models import (
    KnowledgeGap,
    KnowledgeGraph,
    KnowledgePoint,
    KnowledgeRelation,
    LearningPath,
    RelationType,
)
from .services import AnalyticsService, GraphService, LearningPathGenerator, RelationService
from .storage import InMemoryRepository, JsonFileRepository, Repository


logger = logging.getLogger(__name__)

POINTS_FILE = "knowledge_points.json"
RELATIONS_FILE = "knowledge_relations.json"


class KnowledgeAnalysisRepository:
    """
    Unified Knowledge Analysis repository.

    Configuration via AnalysisSettings (see knowledge_analysis.config):
    - KNOWLEDGE_ANALYSIS_MODE: 'memory' for testing, 'file' for JSON files
    - KNOWLEDGE_ANALYSIS_DATA_DIR: directory holding the JSON files
    """

    def __init__(
        self,
        point_store: Repository[KnowledgePoint] | None = None,
        relation_store: Repository[KnowledgeRelation] | None = None,
        settings: AnalysisSettings | None = None,
        mode: str | None = None
    ) -> None:
        """
        Initialize the repository.

        Args:
            point_store: Override knowledge point storage
            relation_store: Override relation storage
            settings: Analysis settings (defaults to the environment)
            mode: 'memory' or 'file' (overrides settings.mode)
        """
        self._settings = settings or AnalysisSettings.from_env()
        self._mode = mode or self._settings.mode

        if self._mode == "file":
            data_dir = Path(self._settings.data_dir)
            self._points = point_store or JsonFileRepository(data_dir / POINTS_FILE, KnowledgePoint)
            self._relations = relation_store or JsonFileRepository(
                data_dir / RELATIONS_FILE, KnowledgeRelation
            )
        else:
            self._points = point_store or InMemoryRepository()
            self._relations = relation_store or InMemoryRepository()

        self._relation_service = RelationService(self._settings)
        self._graph_service = GraphService()
        self._analytics = AnalyticsService(self._settings)
        self._paths = LearningPathGenerator(self._settings)

        logger.info(f"KnowledgeAnalysisRepository initialized in '{self._mode}' mode")

    @property
    def settings(self) -> AnalysisSettings:
        return self._settings

    # ─────────────────────────────────────────────────────────────────────────
    # Storage
    # ─────────────────────────────────────────────────────────────────────────

    def get_points(self) -> list[KnowledgePoint]:
        return self._points.load()

    def save_points(self, points: Sequence[KnowledgePoint]) -> None:
        """Replace the stored knowledge points."""
        self._points.save(points)

    def get_relations(self) -> list[KnowledgeRelation]:
        return self._relations.load()

    # ─────────────────────────────────────────────────────────────────────────
    # Relations
    # ─────────────────────────────────────────────────────────────────────────

    def analyze(self) -> list[KnowledgeRelation]:
        """
        Extract relations from the stored points.

        The result replaces the stored relation set, including any
        relations previously created by hand.
        """
        points = self.get_points()
        relations = self._relation_service.analyze(points)
        self._relations.save(relations)
        logger.info(f"Analyzed {len(points)} points: {len(relations)} relation(s)")
        return relations

    def add_relation(
        self,
        source_id: str,
        target_id: str,
        relation_type: RelationType,
        strength: float = 1.0,
        description: Optional[str] = None,
    ) -> KnowledgeRelation:
        """
        Create a validated relation and append it to the stored set.

        Raises:
            InvalidReferenceError: If an endpoint is unknown or both are equal
        """
        relation = self._relation_service.create(
            self.get_points(), source_id, target_id, relation_type, strength, description
        )
        self._relations.save(self.get_relations() + [relation])
        return relation

    def recommend(self, point_id: str, limit: int = 5) -> list[KnowledgePoint]:
        """Stored points most relevant to point_id."""
        return self._relation_service.recommend(point_id, self.get_points(), limit)

    # ─────────────────────────────────────────────────────────────────────────
    # Analysis
    # ─────────────────────────────────────────────────────────────────────────

    def graph(self, active_types: Optional[Iterable[RelationType]] = None) -> KnowledgeGraph:
        """Graph view of the stored points and relations."""
        return self._graph_service.build(self.get_points(), self.get_relations(), active_types)

    def key_points(self, limit: int = 5) -> list[str]:
        """IDs of the most connected stored points."""
        return self._analytics.find_key_points(self.get_relations(), limit)

    def gaps(self) -> list[KnowledgeGap]:
        """Structural gaps of the stored knowledge graph."""
        return self._analytics.detect_gaps(self.get_points(), self.get_relations())

    def learning_path(self, target_ids: Sequence[str]) -> LearningPath:
        """Learning path to the given targets over the stored relations."""
        return self._paths.build(self.get_points(), self.get_relations(), target_ids)
