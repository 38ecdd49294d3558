"""Tests for search/depth_first.py and search/results.py"""

import logging
from types import MappingProxyType

import pytest

from pgm_graph.exceptions import TraversalCancelled, VertexNotFound
from pgm_graph.model import Edge, EdgeType, Graph, Node
from pgm_graph.ops import incident_edges, out_edges
from pgm_graph.search import CycleInfo, DepthFirstResult, depth_first_search
from pgm_graph.search.depth_first import _TraversalContext


def mk_node(n_id: str) -> Node:
    return Node.empty(n_id)


def mk_uedge(n1_id: str, n2_id: str, e_id: str) -> Edge:
    return Edge.from_ids(e_id, EdgeType.UNDIRECTED, n1_id, n2_id)


def mk_dedge(n1_id: str, n2_id: str, e_id: str) -> Edge:
    return Edge.from_ids(e_id, EdgeType.DIRECTED, n1_id, n2_id)


def undirected_search(graph: Graph, **kwargs) -> DepthFirstResult:
    return depth_first_search(graph, incident_edges(graph), **kwargs)


def mk_star() -> Graph:
    """Star around n2 and the isolated n5."""
    return Graph.from_edge_and_node_set(
        [mk_uedge("n1", "n2", "e1"), mk_uedge("n2", "n3", "e2"), mk_uedge("n2", "n4", "e3")],
        [mk_node("n5")],
    )


def mk_triangle() -> Graph:
    return Graph.from_edge_set(
        [mk_uedge("n1", "n2", "e12"), mk_uedge("n2", "n3", "e23"), mk_uedge("n3", "n1", "e31")]
    )


def mk_gibbons() -> Graph:
    """Alan Gibbons, Algorithmic graph theory 1985, p. 22, fig. 1.16"""
    nodes = [mk_node(f"n{i}") for i in range(1, 14)]
    edges = [
        mk_uedge("n1", "n4", "n1n4"),
        mk_uedge("n1", "n3", "n1n3"),
        mk_uedge("n1", "n2", "n1n2"),
        mk_uedge("n1", "n5", "n1n5"),
        mk_uedge("n1", "n6", "n1n6"),
        mk_uedge("n1", "n7", "n1n7"),
        mk_uedge("n1", "n8", "n1n8"),
        mk_uedge("n8", "n2", "n8n2"),
        mk_uedge("n9", "n10", "n9n10"),
        mk_uedge("n9", "n13", "n9n13"),
        mk_uedge("n10", "n11", "n10n11"),
        mk_uedge("n10", "n12", "n10n12"),
    ]
    return Graph.from_edge_and_node_set(edges, nodes)


def mk_grid(side: int) -> Graph:
    """Square lattice of side x side vertices, one cycle per unit square."""
    edges = []
    for row in range(side):
        for col in range(side):
            here = f"v{row:03d}_{col:03d}"
            if col + 1 < side:
                edges.append(mk_uedge(here, f"v{row:03d}_{col + 1:03d}", f"h{row:03d}_{col:03d}"))
            if row + 1 < side:
                edges.append(mk_uedge(here, f"v{row + 1:03d}_{col:03d}", f"d{row:03d}_{col:03d}"))
    return Graph.from_edge_set(edges)


class TestComponents:
    def test_star_with_isolated_vertex(self):
        result = undirected_search(mk_star(), check_cycle=True, start=mk_node("n1"))
        assert result.component_count() == 2
        assert result.nb_component == 2
        assert result.components() == {
            "n1": frozenset({"n1", "n2", "n3", "n4"}),
            "n5": frozenset({"n5"}),
        }
        assert not result.has_cycle()
        assert result.cycles() == {}

    def test_forest(self):
        result = undirected_search(mk_star(), start=mk_node("n1"))
        forest = result.forest()
        assert {edge.id for edge in forest["n1"]} == {"e1", "e2", "e3"}
        assert forest["n5"] == frozenset()

    def test_component_of(self):
        result = undirected_search(mk_star())
        assert result.component_of("n4") == "n1"
        assert result.component_of("n5") == "n5"
        with pytest.raises(VertexNotFound, match="'n9'"):
            result.component_of("n9")

    def test_start_changes_root(self):
        result = undirected_search(mk_star(), start=mk_node("n3"))
        assert set(result.components()) == {"n3", "n5"}
        assert result.predecessors()["n3"] is None
        assert result.predecessors()["n2"] == "n3"

    def test_directed_reachability(self):
        """With out_edges a vertex only reaches what its edges point to."""
        graph = Graph.from_edge_set([mk_dedge("c", "a", "ca")])
        result = depth_first_search(graph, out_edges(graph))
        assert result.components() == {"a": frozenset({"a"}), "c": frozenset({"c"})}

    def test_empty_graph(self):
        result = undirected_search(Graph.empty("g"), check_cycle=True)
        assert result.component_count() == 0
        assert result.components() == {}
        assert result.forest() == {}
        assert result.discover_times() == {}
        assert result.finish_times() == {}
        assert not result.has_cycle()

    def test_bad_start(self):
        with pytest.raises(VertexNotFound, match="vertex 'n9' not found"):
            undirected_search(mk_star(), start=mk_node("n9"))


class TestGibbons:
    @pytest.fixture
    def result(self) -> DepthFirstResult:
        return undirected_search(mk_gibbons(), check_cycle=True)

    def test_components(self, result):
        components = result.components()
        assert set(components) == {"n1", "n10"}
        assert components["n1"] == frozenset(f"n{i}" for i in range(1, 9))
        assert components["n10"] == frozenset({"n9", "n10", "n11", "n12", "n13"})

    def test_timestamps(self, result):
        discover, finish = result.discover_times(), result.finish_times()
        assert (discover["n1"], finish["n1"]) == (1, 16)
        assert (discover["n2"], finish["n2"]) == (2, 5)
        assert (discover["n8"], finish["n8"]) == (3, 4)
        assert (discover["n10"], finish["n10"]) == (17, 26)
        assert (discover["n13"], finish["n13"]) == (23, 24)

    def test_single_cycle(self, result):
        assert result.cycle_list() == (
            CycleInfo(
                ancestor="n1",
                descendant="n8",
                edge_id="n1n8",
                ancestor_discover_time=1,
                ancestor_finish_time=16,
                descendant_finish_time=4,
            ),
        )
        assert set(result.cycles()) == {"n8"}

    def test_cycle_vertices(self, result):
        (info,) = result.cycle_list()
        assert result.cycle_vertices(info) == ("n1", "n2", "n8")

    def test_trees(self, result):
        trees = result.trees()
        assert trees["n1"]["n1"] is None
        assert trees["n1"]["n8"] == "n2"
        assert trees["n10"]["n13"] == "n9"
        assert "n9" not in trees["n1"]

    def test_tree_of_reproduces_predecessors(self, result):
        predecessors = result.predecessors()
        for component_id, members in result.components().items():
            tree = result.tree_of(component_id)
            assert tree.root().id == component_id
            for vertex_id in members:
                parent = tree.parent_of(mk_node(vertex_id))
                assert (None if parent is None else parent.id) == predecessors[vertex_id]

    def test_tree_of_unknown(self, result):
        with pytest.raises(VertexNotFound):
            result.tree_of("n2")

    def test_no_cycles_without_check(self):
        result = undirected_search(mk_gibbons())
        assert not result.has_cycle()
        assert result.component_count() == 2


class TestCycles:
    def test_triangle(self):
        result = undirected_search(mk_triangle(), check_cycle=True, start=mk_node("n1"))
        (info,) = result.cycle_list()
        assert (info.ancestor, info.descendant, info.edge_id) == ("n1", "n3", "e31")
        assert result.cycle_vertices(info) == ("n1", "n2", "n3")

    def test_self_loop(self):
        graph = Graph.from_edge_set([mk_uedge("n1", "n1", "loop")])
        result = undirected_search(graph, check_cycle=True)
        (info,) = result.cycle_list()
        assert info.ancestor == info.descendant == "n1"
        assert info.ancestor_discover_time == 1
        assert info.descendant_finish_time == 2
        assert result.cycle_vertices(info) == ("n1",)

    def test_parallel_edges(self):
        graph = Graph.from_edge_set([mk_uedge("a", "b", "p1"), mk_uedge("a", "b", "p2")])
        result = undirected_search(graph, check_cycle=True)
        (info,) = result.cycle_list()
        assert (info.ancestor, info.descendant, info.edge_id) == ("a", "b", "p2")

    def test_directed_two_cycle(self):
        graph = Graph.from_edge_set([mk_dedge("a", "b", "ab"), mk_dedge("b", "a", "ba")])
        result = depth_first_search(graph, out_edges(graph), check_cycle=True)
        (info,) = result.cycle_list()
        assert (info.ancestor, info.descendant) == ("a", "b")

    def test_directed_acyclic(self):
        """Forward and cross edges are not back edges."""
        graph = Graph.from_edge_set(
            [mk_dedge("a", "b", "ab"), mk_dedge("a", "c", "ac"), mk_dedge("b", "c", "bc"), mk_dedge("d", "c", "dc")]
        )
        result = depth_first_search(graph, out_edges(graph), check_cycle=True)
        assert not result.has_cycle()

    def test_directed_cycle(self):
        graph = Graph.from_edge_set(
            [mk_dedge("a", "b", "ab"), mk_dedge("b", "c", "bc"), mk_dedge("c", "a", "ca")]
        )
        result = depth_first_search(graph, out_edges(graph), check_cycle=True)
        (info,) = result.cycle_list()
        assert result.cycle_vertices(info) == ("a", "b", "c")

    def test_cycles_grouped_by_descendant(self):
        graph = Graph.from_edge_set(
            [mk_uedge("a", "b", "ab"), mk_uedge("b", "c", "bc"), mk_uedge("c", "a", "ca"), mk_uedge("c", "c", "cc")]
        )
        result = undirected_search(graph, check_cycle=True)
        assert [info.edge_id for info in result.cycles()["c"]] == ["ca", "cc"]

    def test_back_edges_found_without_walking_predecessors(self):
        """A dense grid is walked with check_cycle on and no predecessor lookups."""

        class CountingList(list):
            reads = 0

            def __getitem__(self, key):
                CountingList.reads += 1
                return super().__getitem__(key)

        grid = mk_grid(40)
        context = _TraversalContext(grid, incident_edges(grid), check_cycle=True, should_stop=None)
        context.pred = CountingList(context.pred)
        context.run(None)
        assert CountingList.reads == 0

        result = context.result()
        assert len(result.cycle_list()) == grid.size() - grid.order() + 1
        assert result.component_count() == 1


class TestGenerators:
    def test_foreign_edges_are_skipped(self):
        """Edges the vertex is not an end of are ignored instead of aborting the walk."""
        graph = Graph.from_edge_and_node_set([], [mk_node("a"), mk_node("b")])
        stray = mk_uedge("p", "q", "stray")
        result = depth_first_search(graph, lambda node: frozenset({stray}), check_cycle=True)
        assert result.component_count() == 2
        assert not result.has_cycle()

    def test_edges_leaving_the_graph_are_skipped(self):
        graph = Graph.from_edge_and_node_set([], [mk_node("a")])
        outside = mk_uedge("a", "z", "az")
        result = depth_first_search(graph, lambda node: frozenset({outside}))
        assert set(result.discover_times()) == {"a"}


class TestCancellation:
    def test_stop_immediately(self):
        with pytest.raises(TraversalCancelled):
            undirected_search(mk_star(), should_stop=lambda: True)

    def test_stop_after_some_vertices(self):
        seen = []

        def should_stop() -> bool:
            seen.append(None)
            return len(seen) > 3

        with pytest.raises(TraversalCancelled, match="stopped"):
            undirected_search(mk_star(), should_stop=should_stop)
        assert len(seen) == 4

    def test_never_stop(self):
        result = undirected_search(mk_star(), should_stop=lambda: False)
        assert result.component_count() == 2


class TestResult:
    def test_determinism(self):
        first = undirected_search(mk_gibbons(), check_cycle=True, start=mk_node("n9"))
        second = undirected_search(mk_gibbons(), check_cycle=True, start=mk_node("n9"))
        assert first.discover_times() == second.discover_times()
        assert first.finish_times() == second.finish_times()
        assert first.forest() == second.forest()
        assert first.cycle_list() == second.cycle_list()
        assert first.id != second.id

    def test_mappings_are_read_only(self):
        result = undirected_search(mk_star())
        assert isinstance(result.discover_times(), MappingProxyType)
        with pytest.raises(TypeError):
            result.components()["n1"] = frozenset()
        with pytest.raises(TypeError):
            result.trees()["n1"]["n1"] = "n2"

    def test_logging(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pgm_graph.search.depth_first"):
            undirected_search(mk_triangle(), check_cycle=True)
        messages = [record.getMessage() for record in caplog.records]
        assert any("New tree rooted at 'n1'" in message for message in messages)
        assert any("Back edge 'e31'" in message for message in messages)
        assert any("1 component(s), 1 back edge(s)" in message for message in messages)
