"""Tests for the Kruskal minimum spanning forest algorithm."""
import itertools
import logging
import random
from typing import List, Tuple

import pytest

from mstgraph.exceptions import (
    InvalidArgumentError,
    InvalidCollaboratorError,
    KruskalError,
    MSTGraphError,
)
from mstgraph.graph.adjacency_matrix import Graph
from mstgraph.graph.advanced.mst import KruskalMST, edge_relation, kruskal
from mstgraph.graph.edge import Edge, EdgeClass


def _build_graph(capacity: int, edges: List[Tuple[int, int, float]]) -> Graph:
    graph = Graph(capacity)
    for v1, v2, w in edges:
        assert graph.add_edge(v1, v2, w)
    return graph


def _selected_pairs(graph: Graph):
    return {
        frozenset((e.v1, e.v2))
        for e in graph.edges()
        if e.classification is EdgeClass.SELECTED
    }


def _components(vertices, pairs) -> int:
    parent = {v: v for v in vertices}

    def find(x):
        while parent[x] != x:
            x = parent[x]
        return x

    for a, b in pairs:
        parent[find(a)] = find(b)
    return len({find(v) for v in vertices})


def _brute_force_min_weight(graph: Graph) -> float:
    vertices = graph.vertices()
    edges = list(graph.edges())
    best = None
    for combo in itertools.combinations(edges, len(vertices) - 1):
        pairs = [(e.v1, e.v2) for e in combo]
        if _components(vertices, pairs) == 1:
            total = sum(e.weight for e in combo)
            best = total if best is None else min(best, total)
    return best


def test_kruskal_four_cycle_scenario() -> None:
    graph = _build_graph(4, [(0, 1, 1.0), (1, 2, 2.0), (2, 3, 1.0), (0, 3, 5.0)])
    result = KruskalMST().execute(graph)

    assert _selected_pairs(graph) == {
        frozenset({0, 1}),
        frozenset({2, 3}),
        frozenset({1, 2}),
    }
    assert graph.get_edge(0, 3).classification is EdgeClass.REJECTED
    assert result.total_weight == 4.0
    assert [frozenset((e.v1, e.v2)) for e in result.rejected] == [frozenset({0, 3})]
    assert result.selected[-1].key == (2, 1)


def test_kruskal_negative_weights() -> None:
    graph = _build_graph(
        4, [(0, 1, -1), (0, 2, 4), (1, 2, 2), (1, 3, 3), (2, 3, -2)]
    )
    result = kruskal(graph)
    assert _selected_pairs(graph) == {
        frozenset({2, 3}),
        frozenset({0, 1}),
        frozenset({1, 2}),
    }
    assert result.total_weight == -1


def test_kruskal_disconnected_graph_builds_forest() -> None:
    graph = _build_graph(
        7,
        [(0, 1, 1.0), (1, 2, 1.0), (0, 2, 3.0), (4, 5, 2.0), (5, 6, 1.0), (4, 6, 1.5)],
    )
    graph.add_vertex(3)
    result = kruskal(graph)

    # |SELECTED| = 顶点数 - 连通分量数
    assert len(result.selected) == graph.vertex_count() - 3
    assert len(result.selected) + len(result.rejected) == graph.edge_count()
    assert result.total_weight == pytest.approx(4.5)


def test_kruskal_classifies_every_edge() -> None:
    graph = _build_graph(3, [(0, 1, 1.0), (1, 2, 1.0), (0, 2, 1.0)])
    kruskal(graph)
    classes = [e.classification for e in graph.edges()]
    assert classes.count(EdgeClass.SELECTED) == 2
    assert classes.count(EdgeClass.REJECTED) == 1


def test_kruskal_graph_without_edges() -> None:
    graph = Graph(3)
    graph.add_vertex(1)
    result = kruskal(graph)
    assert result.selected == []
    assert result.total_weight == 0.0


@pytest.mark.parametrize("heap_sizing", ["exact", "quadratic"])
def test_kruskal_matches_brute_force_on_random_graphs(heap_sizing) -> None:
    rng = random.Random(42)
    for _ in range(25):
        n = rng.randint(2, 6)
        graph = Graph(n)
        # 先连成一条随机路径保证连通，再补充随机边
        order = list(range(n))
        rng.shuffle(order)
        for a, b in zip(order, order[1:]):
            graph.add_edge(a, b, rng.randint(1, 9))
        for a, b in itertools.combinations(range(n), 2):
            if not graph.has_edge(a, b) and rng.random() < 0.5:
                graph.add_edge(a, b, rng.randint(1, 9))

        result = kruskal(graph, heap_sizing=heap_sizing)
        pairs = [(e.v1, e.v2) for e in result.selected]
        assert len(pairs) == n - 1
        assert _components(graph.vertices(), pairs) == 1
        assert result.total_weight == pytest.approx(_brute_force_min_weight(graph))


def test_kruskal_traces_through_given_logger(caplog) -> None:
    graph = _build_graph(3, [(0, 1, 1.0), (1, 2, 2.0)])
    trace = logging.getLogger("tests.kruskal.trace")
    with caplog.at_level(logging.DEBUG, logger="tests.kruskal.trace"):
        kruskal(graph, logger=trace)
    messages = [r.getMessage() for r in caplog.records if r.name == "tests.kruskal.trace"]
    assert any("union: 0 U 1" in m or "union: 1 U 0" in m for m in messages)
    assert messages[-1].startswith("Leaving kruskal")


def test_kruskal_rejects_invalid_input() -> None:
    with pytest.raises(InvalidCollaboratorError):
        kruskal(None)
    with pytest.raises(InvalidArgumentError):
        KruskalMST(heap_sizing="tiny")


def test_kruskal_errors_share_the_package_base() -> None:
    # callers can catch every precondition failure with one except clause
    for call in (lambda: kruskal(None), lambda: KruskalMST(heap_sizing="tiny")):
        with pytest.raises(MSTGraphError):
            call()
    with pytest.raises(TypeError):
        kruskal("not a graph")
    with pytest.raises(ValueError):
        KruskalMST(heap_sizing="")


def test_kruskal_allocation_failure_is_fatal(monkeypatch) -> None:
    from mstgraph.graph.advanced import mst

    def broken_heap(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(mst, "PriorityHeap", broken_heap)
    graph = _build_graph(3, [(0, 1, 1.0)])
    with pytest.raises(KruskalError):
        kruskal(graph)


def test_edge_relation_gives_min_heap_order() -> None:
    light, heavy = Edge(0, 1, 1.0), Edge(1, 2, 2.0)
    assert edge_relation(heavy, light)
    assert not edge_relation(light, heavy)
