# tests/core/engine/test_planner_levels.py
"""
Testes do nivelamento determinístico do planner.

Os testes asseguram que:
- builders sem produtores de seus insumos ficam no nível 0
- o nível de um builder é 1 + o nível mais profundo de seus produtores
- empates dentro de um nível são ordenados pelo nome
- `build_flow` monta a FlowDefinition com alvo e transientes
"""

import pytest

from builderflow.core.engine.planner import build_flow, plan_levels
from builderflow.core.exceptions import FlowDefinitionError
from builderflow.core.model.meta import DataBuilderMeta


def _names(graph):
    return [[m.name for m in level] for level in graph.levels]


def test_levels_follow_produced_keys():
    metas = [
        DataBuilderMeta.of("report", {"score", "profile"}, "report"),
        DataBuilderMeta.of("score", {"profile"}, "score"),
        DataBuilderMeta.of("profile", {"user"}, "profile"),
        DataBuilderMeta.of("audit", {"user"}, "audit"),
    ]

    graph = plan_levels(metas)

    assert _names(graph) == [["audit", "profile"], ["score"], ["report"]]


def test_same_input_same_levels():
    metas = [
        DataBuilderMeta.of("b", {"x"}, "y"),
        DataBuilderMeta.of("a", {"x"}, "z"),
        DataBuilderMeta.of("c", {"y", "z"}, "w"),
    ]
    assert _names(plan_levels(metas)) == _names(plan_levels(list(reversed(metas))))
    assert _names(plan_levels(metas)) == [["a", "b"], ["c"]]


def test_builders_without_output_are_leveled():
    metas = [
        DataBuilderMeta.of("sink", {"y"}),
        DataBuilderMeta.of("make_y", {"x"}, "y"),
    ]
    assert _names(plan_levels(metas)) == [["make_y"], ["sink"]]


def test_empty_input_produces_empty_graph():
    graph = plan_levels([])
    assert graph.levels == ()
    assert len(graph) == 0


def test_graph_exposes_levels_only_through_levels():
    graph = plan_levels([DataBuilderMeta.of("a", {"x"}, "y")])
    assert list(graph) == list(graph.levels)
    assert not hasattr(graph, "dependency_hierarchy")


def test_build_flow_sets_target_and_transients():
    flow = build_flow(
        "checkout",
        [DataBuilderMeta.of("price", {"cart"}, "total"), DataBuilderMeta.of("order", {"total"}, "order")],
        target="order",
        transients=["total"],
    )

    assert flow.name == "checkout"
    assert flow.target == "order"
    assert flow.transients == frozenset({"total"})
    assert flow.graph.names() == ["price", "order"]


def test_transient_target_is_kept_when_not_strict():
    flow = build_flow("f", [DataBuilderMeta.of("b", {"a"}, "t")], target="t", transients=["t"])
    assert flow.is_transient("t")


def test_strict_target_rejects_transient_target():
    with pytest.raises(FlowDefinitionError) as exc_info:
        build_flow(
            "f",
            [DataBuilderMeta.of("b", {"a"}, "t")],
            target="t",
            transients=["t"],
            strict_target=True,
        )

    assert exc_info.value.details["target"] == "t"
    assert exc_info.value.to_payload().type == "FLOW_DEFINITION_ERROR"
