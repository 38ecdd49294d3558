"""Tests for utils/union_find.py and utils/traversal.py"""

from pgm_graph.model import Edge, EdgeType, Graph, Node
from pgm_graph.utils import (
    UnionFind,
    breadth_first_levels,
    connected_components,
    depth_first_preorder,
    graph_union_find,
)


class TestUnionFind:
    def test_singletons(self):
        uf = UnionFind(["a", "b", "c"])
        assert uf.set_count() == 3
        assert uf.find("a") != uf.find("b")

    def test_union_and_find(self):
        uf = UnionFind[str]()
        uf.union("a", "b")
        uf.union("c", "d")
        assert uf.find("a") == uf.find("b")
        assert uf.find("b") != uf.find("c")
        uf.union("b", "d")
        assert uf.find("a") == uf.find("c")
        assert uf.set_count() == 1

    def test_unknown_element_becomes_singleton(self):
        uf = UnionFind(["a"])
        assert uf.find("x") == "x"
        assert uf.set_count() == 2

    def test_union_returns_representative(self):
        uf = UnionFind[str]()
        root = uf.union("a", "b")
        assert uf.find("a") == root
        assert uf.find("b") == root
        assert uf.union("a", "b") == root

    def test_larger_set_keeps_its_representative(self):
        uf = UnionFind[str]()
        uf.union("a", "b")
        root = uf.union("a", "c")
        assert uf.union("z", "a") == root

    def test_long_chain(self):
        """Repeated merges of singletons into one set stay consistent."""
        uf = UnionFind(range(100))
        for i in range(99):
            uf.union(i + 1, i)
        assert uf.set_count() == 1
        assert len({uf.find(i) for i in range(100)}) == 1

    def test_groups(self):
        uf = UnionFind(["a", "b", "c"])
        uf.union("a", "c")
        assert sorted(sorted(group) for group in uf.groups()) == [["a", "c"], ["b"]]


class TestGraphComponents:
    def test_graph_union_find(self):
        graph = Graph.from_edge_and_node_set(
            [Edge.from_ids("e1", EdgeType.UNDIRECTED, "n1", "n2")], [Node("n3")]
        )
        uf = graph_union_find(graph)
        assert uf.find("n1") == uf.find("n2")
        assert uf.set_count() == 2

    def test_connected_components_ignore_orientation(self):
        graph = Graph.from_edge_set(
            [
                Edge.from_ids("e1", EdgeType.DIRECTED, "a", "b"),
                Edge.from_ids("e2", EdgeType.DIRECTED, "c", "b"),
                Edge.from_ids("e3", EdgeType.DIRECTED, "d", "d"),
            ]
        )
        assert connected_components(graph) == frozenset(
            {frozenset({"a", "b", "c"}), frozenset({"d"})}
        )

    def test_empty(self):
        assert connected_components(Graph.empty("g")) == frozenset()


class TestTraversals:
    children = {"r": ["a", "b"], "a": ["c"], "b": [], "c": []}

    def test_breadth_first_levels(self):
        levels = list(breadth_first_levels(self.children.__getitem__, "r"))
        assert levels == [("r", 0), ("a", 1), ("b", 1), ("c", 2)]

    def test_depth_first_preorder(self):
        order = list(depth_first_preorder(self.children.__getitem__, "r"))
        assert order == ["r", "a", "c", "b"]

    def test_no_root(self):
        assert list(breadth_first_levels(self.children.__getitem__, None)) == []
        assert list(depth_first_preorder(self.children.__getitem__, None)) == []
