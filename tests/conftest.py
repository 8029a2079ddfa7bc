"""
Pytest configuration for Knowledge Analysis tests.

Provides shared fixtures for unit tests and BDD step definitions.
"""

import pytest
import sys
from pathlib import Path

# Make the package importable without installation
root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path))

from knowledge_analysis import (
    AnalysisSettings,
    KnowledgeAnalysisRepository,
    KnowledgePoint,
    KnowledgeRelation,
    RelationType,
)


def make_point(point_id, content="", category="general", tags=None, confidence=1.0):
    """Build a knowledge point with test defaults."""
    return KnowledgePoint(
        id=point_id,
        content=content or f"Knowledge point {point_id}",
        category=category,
        tags=tags or [],
        confidence=confidence,
    )


def prereq(source_id, target_id, relation_type=RelationType.PREREQUISITE):
    """source_id must be learned before target_id."""
    return KnowledgeRelation(source_id=source_id, target_id=target_id, type=relation_type)


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return AnalysisSettings()


@pytest.fixture
def repository(settings):
    """Knowledge analysis repository with in-memory stores."""
    return KnowledgeAnalysisRepository(settings=settings, mode="memory")


@pytest.fixture
def science_points():
    """Five science points with identical content."""
    return [
        make_point(
            f"sci-{i}",
            content="Photosynthesis converts light energy into chemical energy",
            category="science",
        )
        for i in range(1, 6)
    ]


@pytest.fixture
def chain_points():
    """Points A, B, C for prerequisite chains."""
    return [
        make_point("A", "Counting numbers", "math"),
        make_point("B", "Addition of numbers", "math"),
        make_point("C", "Multiplication as repeated addition", "math"),
    ]
