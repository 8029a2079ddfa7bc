"""
Analysis settings.

Defaults reproduce the thresholds of the desktop application. Every value
can be overridden from the environment:

    KNOWLEDGE_ANALYSIS_MODE=file
    KNOWLEDGE_ANALYSIS_DATA_DIR=./data
    KNOWLEDGE_ANALYSIS_SIMILARITY_THRESHOLD=0.5
    KNOWLEDGE_ANALYSIS_TAG_OVERLAP_THRESHOLD=0.4
    KNOWLEDGE_ANALYSIS_DEDUPLICATE=false
    KNOWLEDGE_ANALYSIS_STRICT_CYCLES=false
    KNOWLEDGE_ANALYSIS_FOUNDATIONAL_KEYWORDS=basic,intro
    KNOWLEDGE_ANALYSIS_ADVANCED_KEYWORDS=advanced
"""

import os
from typing import List

from pydantic import BaseModel, Field


ENV_PREFIX = "KNOWLEDGE_ANALYSIS_"

DEFAULT_FOUNDATIONAL_KEYWORDS = ["基础", "入门", "basic", "fundamental", "intro"]
DEFAULT_ADVANCED_KEYWORDS = ["进阶", "延伸", "advanced", "extension"]


class AnalysisSettings(BaseModel):
    """Tunable thresholds and switches for the analysis services."""

    # Storage
    mode: str = Field(default="memory", description="memory|file")
    data_dir: str = Field(default="data")

    # Similarity scorer
    min_token_length: int = Field(default=3, ge=1)

    # Relation extractor
    similarity_threshold: float = Field(default=0.5, ge=0.0, le=1.0)
    tag_overlap_threshold: float = Field(default=0.4, ge=0.0, le=1.0)
    min_common_tags: int = Field(default=2, ge=1)
    foundational_keywords: List[str] = Field(
        default_factory=lambda: list(DEFAULT_FOUNDATIONAL_KEYWORDS)
    )
    advanced_keywords: List[str] = Field(
        default_factory=lambda: list(DEFAULT_ADVANCED_KEYWORDS)
    )
    deduplicate_relations: bool = False

    # Recommendation weights
    content_weight: float = 0.6
    tag_weight: float = 0.3
    category_bonus: float = 0.2

    # Gap detector
    min_category_size: int = Field(default=3, ge=1)

    # Learning paths
    strict_cycles: bool = False

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "AnalysisSettings":
        """Build settings from KNOWLEDGE_ANALYSIS_* environment variables."""
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        for name in cls.model_fields:
            raw = env.get(ENV_PREFIX + name.upper())
            if raw is None:
                continue
            if name.endswith("_keywords"):
                values[name] = [k.strip() for k in raw.split(",") if k.strip()]
            else:
                values[name] = raw

        raw = env.get(ENV_PREFIX + "DEDUPLICATE")
        if raw is not None and "deduplicate_relations" not in values:
            values["deduplicate_relations"] = raw

        return cls.model_validate(values)
