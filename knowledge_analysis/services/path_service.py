"""
Learning path generation over prerequisite relations.

Implements:
- Dependency map construction (prerequisite and parent-child relations)
- Post-order depth-first traversal from the requested targets
- Cycle reporting

A prerequisite always appears before anything that depends on it,
provided the dependency relations are acyclic. On cyclic input the
traversal still terminates, but whichever cycle member is reached first
is emitted before a dependency that also depends on it. Set
strict_cycles to raise CyclicDependencyError instead.
"""

import logging
from typing import Iterable, Iterator, Sequence

from ..config import AnalysisSettings
from ..errors import CyclicDependencyError
from ..models import DEPENDENCY_TYPES, KnowledgePoint, KnowledgeRelation, LearningPath


logger = logging.getLogger(__name__)


class LearningPathGenerator:
    """
    Orders knowledge points so that every prerequisite comes first.
    """

    def __init__(self, settings: AnalysisSettings | None = None) -> None:
        self._settings = settings or AnalysisSettings()

    def dependency_map(
        self,
        points: Sequence[KnowledgePoint],
        relations: Iterable[KnowledgeRelation]
    ) -> dict[str, list[str]]:
        """
        Map each point ID to the IDs it depends on, in relation order.

        A prerequisite or parent-child relation makes its target depend
        on its source. Relations touching unknown points are ignored.
        """
        graph: dict[str, list[str]] = {p.id: [] for p in points}
        for relation in relations:
            if relation.type not in DEPENDENCY_TYPES:
                continue
            if relation.source_id not in graph or relation.target_id not in graph:
                continue
            graph[relation.target_id].append(relation.source_id)
        return graph

    def build(
        self,
        points: Sequence[KnowledgePoint],
        relations: Iterable[KnowledgeRelation],
        target_ids: Sequence[str],
        strict: bool | None = None,
    ) -> LearningPath:
        """
        Build the learning path leading to the given targets.

        Args:
            points: Working set of knowledge points
            relations: Relations between them
            target_ids: Points to learn, in priority order. Unknown IDs
                are skipped.
            strict: Raise on cycles (defaults to settings.strict_cycles)

        Returns:
            LearningPath with all transitive prerequisites followed by
            the targets, without duplicates

        Raises:
            CyclicDependencyError: If strict and a cycle is reachable
        """
        if strict is None:
            strict = self._settings.strict_cycles

        by_id: dict[str, KnowledgePoint] = {}
        for point in points:
            by_id.setdefault(point.id, point)

        graph = self.dependency_map(points, relations)
        visited: set[str] = set()
        order: list[str] = []
        has_cycle = False

        for target_id in target_ids:
            if target_id not in by_id or target_id in visited:
                continue
            for cycle in self._visit(target_id, graph, visited, order):
                if strict:
                    raise CyclicDependencyError(cycle)
                has_cycle = True
                logger.warning(f"Cycle in prerequisite relations: {' -> '.join(cycle)}")

        emitted = set(order)
        for target_id in target_ids:
            if target_id in by_id and target_id not in emitted:
                order.append(target_id)
                emitted.add(target_id)

        return LearningPath(
            target_ids=list(target_ids),
            points=[by_id[point_id] for point_id in order],
            has_cycle=has_cycle,
        )

    def _visit(
        self,
        start: str,
        graph: dict[str, list[str]],
        visited: set[str],
        order: list[str]
    ) -> Iterator[list[str]]:
        """
        Post-order DFS from start, appending to order.

        Iterative so long prerequisite chains cannot exhaust the
        recursion limit. Yields each cycle found as a list of IDs.
        """
        visited.add(start)
        stack: list[tuple[str, Iterator[str]]] = [(start, iter(graph[start]))]
        on_stack = {start}

        while stack:
            node, deps = stack[-1]
            for dep in deps:
                if dep in on_stack:
                    path = [n for n, _ in stack]
                    yield path[path.index(dep):] + [dep]
                elif dep not in visited:
                    visited.add(dep)
                    on_stack.add(dep)
                    stack.append((dep, iter(graph[dep])))
                    break
            else:
                stack.pop()
                on_stack.discard(node)
                order.append(node)


def generate_path(
    points: Sequence[KnowledgePoint],
    relations: Iterable[KnowledgeRelation],
    target_ids: Sequence[str],
    strict: bool = False,
) -> list[KnowledgePoint]:
    """Targets and all their transitive prerequisites, prerequisites first."""
    return LearningPathGenerator().build(points, relations, target_ids, strict).points
