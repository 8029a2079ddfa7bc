"""
Step definitions for Relation Analysis and Learning Path scenarios.

Features: relation_analysis.feature, learning_path.feature

Implements BDD steps for:
- Knowledge point setup
- Relation extraction, graph view and key points
- Gap detection
- Learning path generation
"""

from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, when, then, parsers

from knowledge_analysis import (
    CyclicDependencyError,
    GapKind,
    KnowledgeGap,
    KnowledgePoint,
    KnowledgeRelation,
    RelationType,
    analyze_relations,
    build_graph,
    detect_gaps,
    find_key_points,
    generate_path,
)


def split_ids(text: str) -> list[str]:
    return [part.strip() for part in text.split(",") if part.strip()]


# ─────────────────────────────────────────────────────────────────────────────
# Shared Context
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class AnalysisContext:
    """Shared state across steps of one scenario."""
    points: list[KnowledgePoint] = field(default_factory=list)
    relations: list[KnowledgeRelation] = field(default_factory=list)
    gaps: list[KnowledgeGap] = field(default_factory=list)
    path: list[KnowledgePoint] = field(default_factory=list)
    error: Exception | None = None


@pytest.fixture
def ctx():
    """Fresh context for each scenario."""
    return AnalysisContext()


# ─────────────────────────────────────────────────────────────────────────────
# Given
# ─────────────────────────────────────────────────────────────────────────────

@given(parsers.parse('knowledge points "{ids}" in category "{category}"'))
def named_points(ctx, ids, category):
    ctx.points = [
        KnowledgePoint(id=point_id, content=f"Topic {point_id}", category=category)
        for point_id in split_ids(ids)
    ]


@given(parsers.parse('{count:d} knowledge points in category "{category}" with {variant} content'))
def numbered_points(ctx, count, category, variant):
    for i in range(1, count + 1):
        if variant == "identical":
            content = "Photosynthesis converts light energy into chemical energy"
        else:
            content = f"subject{i} lesson{i} material{i}"
        ctx.points.append(KnowledgePoint(id=f"{category}-{i}", content=content, category=category))


@given(parsers.parse('"{source}" is a prerequisite of "{target}"'))
def prerequisite_relation(ctx, source, target):
    ctx.relations.append(KnowledgeRelation(
        source_id=source,
        target_id=target,
        type=RelationType.PREREQUISITE,
    ))


# ─────────────────────────────────────────────────────────────────────────────
# When
# ─────────────────────────────────────────────────────────────────────────────

@when("relations are analyzed")
def relations_analyzed(ctx):
    ctx.relations = analyze_relations(ctx.points)
    ctx.gaps = detect_gaps(ctx.points, ctx.relations)


@when(parsers.parse('I request a learning path to "{targets}"'))
def request_path(ctx, targets):
    ctx.path = generate_path(ctx.points, ctx.relations, split_ids(targets))


@when(parsers.parse('I request a strict learning path to "{targets}"'))
def request_strict_path(ctx, targets):
    try:
        ctx.path = generate_path(ctx.points, ctx.relations, split_ids(targets), strict=True)
    except CyclicDependencyError as e:
        ctx.error = e


# ─────────────────────────────────────────────────────────────────────────────
# Then
# ─────────────────────────────────────────────────────────────────────────────

@then(parsers.parse('{count:d} "{relation_type}" relations are found with strength {strength:f}'))
def relations_found(ctx, count, relation_type, strength):
    assert len(ctx.relations) == count
    for relation in ctx.relations:
        assert relation.type == RelationType(relation_type)
        assert relation.strength == pytest.approx(strength)


@then("no relations are found")
def no_relations(ctx):
    assert ctx.relations == []


@then(parsers.parse("the graph has {nodes:d} nodes and {edges:d} edges"))
def graph_size(ctx, nodes, edges):
    graph = build_graph(ctx.points, ctx.relations)
    assert len(graph.nodes) == nodes
    assert len(graph.edges) == edges


@then("the key point is the first point")
def key_point_is_first(ctx):
    assert find_key_points(ctx.relations, 1) == [ctx.points[0].id]


@then(parsers.parse('a "{kind}" gap is reported for "{category}"'))
def gap_reported(ctx, kind, category):
    assert any(
        gap.kind == GapKind(kind) and gap.category == category
        for gap in ctx.gaps
    )


@then(parsers.parse("an isolated points gap counts {count:d} points"))
def isolated_gap(ctx, count):
    isolated = [g for g in ctx.gaps if g.kind == GapKind.ISOLATED_POINTS]
    assert len(isolated) == 1
    assert isolated[0].count == count


@then(parsers.parse('the path is "{expected}"'))
def path_is(ctx, expected):
    assert [p.id for p in ctx.path] == split_ids(expected)


@then("a cyclic dependency error is raised")
def cyclic_error(ctx):
    assert isinstance(ctx.error, CyclicDependencyError)
