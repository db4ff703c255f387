"""Tests for the graph model."""

import networkx as nx
import pytest

from vertex_coloring.exceptions import FrozenGraphError, InvalidEdgeError
from vertex_coloring.graph import Edge, Graph


class TestEdge:
    def test_unordered_equality(self):
        assert Edge(1, 2) == Edge(2, 1)
        assert hash(Edge(1, 2)) == hash(Edge(2, 1))
        assert len({Edge(1, 2), Edge(2, 1)}) == 1

    def test_distinct_edges(self):
        assert Edge(1, 2) != Edge(1, 3)

    def test_endpoints(self):
        assert Edge("a", "b").endpoints() == ("a", "b")


class TestGraph:
    def test_empty(self):
        g = Graph()
        assert g.vertex_set() == set()
        assert g.edge_set() == set()
        assert len(g) == 0

    def test_add_vertex_and_edge(self):
        g = Graph()
        g.add_vertex(1)
        g.add_vertex(2)
        e = g.add_edge(1, 2)
        assert g.vertex_set() == {1, 2}
        assert g.edge_set() == {Edge(1, 2)}
        assert set(g.edge_endpoints(e)) == {1, 2}
        assert g.has_edge(2, 1)

    def test_readding_vertex_is_noop(self):
        g = Graph()
        g.add_vertex("x")
        g.add_vertex("x")
        assert g.number_of_vertices() == 1

    def test_duplicate_edge_is_noop(self):
        g = Graph.from_edges([1, 2, 3], [(1, 2), (2, 3)])
        before = len(g.edge_set())
        g.add_edge(1, 2)
        g.add_edge(2, 1)
        assert len(g.edge_set()) == before
        assert g.degree(1) == 1

    def test_edge_to_missing_vertex(self):
        g = Graph()
        g.add_vertex(1)
        with pytest.raises(InvalidEdgeError) as exc_info:
            g.add_edge(1, 9)
        assert exc_info.value.missing == (9,)
        assert g.number_of_edges() == 0
        assert g.vertex_set() == {1}

    def test_edge_with_both_endpoints_missing(self):
        with pytest.raises(InvalidEdgeError) as exc_info:
            Graph().add_edge("a", "b")
        assert set(exc_info.value.missing) == {"a", "b"}

    def test_invalid_edge_is_value_error(self):
        with pytest.raises(ValueError):
            Graph().add_edge(0, 1)

    def test_insertion_order_preserved(self):
        g = Graph.from_edges([3, 1, 2], [])
        assert g.vertices() == [3, 1, 2]
        assert list(g) == [3, 1, 2]

    def test_neighbors_and_degree(self):
        g = Graph.from_edges(range(4), [(0, 1), (0, 2), (0, 3)])
        assert set(g.neighbors(0)) == {1, 2, 3}
        assert g.degree(0) == 3
        assert g.degree(3) == 1

    def test_contains(self):
        g = Graph.from_edges([1], [])
        assert 1 in g
        assert 2 not in g


class TestFreeze:
    def test_freeze_blocks_mutation(self):
        g = Graph.from_edges([1, 2], [(1, 2)]).freeze()
        assert g.is_frozen
        with pytest.raises(FrozenGraphError):
            g.add_vertex(3)
        with pytest.raises(FrozenGraphError):
            g.add_edge(1, 2)

    def test_freeze_returns_self(self):
        g = Graph()
        assert g.freeze() is g

    def test_networkx_view_is_read_only(self):
        g = Graph.from_edges([1, 2], [(1, 2)])
        view = g.to_networkx()
        with pytest.raises(nx.NetworkXError):
            view.add_edge(2, 3)
        assert g.vertex_set() == {1, 2}


class TestFromNetworkx:
    def test_roundtrip_counts(self):
        G = nx.petersen_graph()
        g = Graph.from_networkx(G)
        assert g.number_of_vertices() == 10
        assert g.number_of_edges() == 15

    def test_rejects_directed(self):
        with pytest.raises(ValueError):
            Graph.from_networkx(nx.DiGraph([(0, 1)]))
