"""
Graph view models.

A rendering-agnostic node/edge representation of knowledge points and
their relations. Values are sizing hints for whatever draws the graph.
"""

from typing import List

from pydantic import BaseModel, Field

from .base import RelationType


class GraphNode(BaseModel):
    """A knowledge point as a graph node."""

    id: str
    label: str
    category: str
    value: float = Field(..., description="Node size hint (confidence * 10)")
    tags: List[str] = Field(default_factory=list)


class GraphEdge(BaseModel):
    """A relation as a graph edge."""

    source: str
    target: str
    value: float = Field(..., description="Edge weight hint (strength * 3)")
    label: str
    type: RelationType


class KnowledgeGraph(BaseModel):
    """Nodes and edges of one graph view. Every edge endpoint is a node."""

    nodes: List[GraphNode] = Field(default_factory=list)
    edges: List[GraphEdge] = Field(default_factory=list)

    @property
    def node_ids(self) -> set[str]:
        return {node.id for node in self.nodes}

    def is_empty(self) -> bool:
        return not self.nodes
