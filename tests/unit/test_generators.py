"""Tests for the Gnp and complete graph generators."""

import numpy as np
import pytest

from vertex_coloring.exceptions import NonDeterminismError
from vertex_coloring.generators import (
    as_rng,
    assert_reproducible,
    complete_graph,
    gnp_random_graph,
    spawn_rngs,
)
from vertex_coloring.graph import Graph


class TestCompleteGraph:
    @pytest.mark.parametrize("n", [0, 1, 2, 5, 20])
    def test_edge_count(self, n):
        g = complete_graph(n)
        assert g.vertex_set() == set(range(n))
        assert g.number_of_edges() == n * (n - 1) // 2

    def test_vertex_name(self):
        g = complete_graph(3, vertex_name=lambda i: f"v{i}")
        assert g.vertex_set() == {"v0", "v1", "v2"}
        assert g.has_edge("v0", "v2")

    def test_non_injective_name_rejected(self):
        with pytest.raises(ValueError):
            complete_graph(3, vertex_name=lambda i: 0)

    def test_negative_order_rejected(self):
        with pytest.raises(ValueError):
            complete_graph(-1)

    def test_frozen(self):
        assert complete_graph(4).is_frozen


class TestGnpRandomGraph:
    def test_vertices(self):
        g = gnp_random_graph(20, 0.35, rng=17)
        assert g.vertex_set() == set(range(20))
        assert g.is_frozen

    def test_p_zero_is_edgeless(self):
        g = gnp_random_graph(15, 0.0, rng=1)
        assert g.number_of_edges() == 0

    def test_p_one_is_complete(self):
        g = gnp_random_graph(12, 1.0, rng=1)
        assert g.edge_set() == complete_graph(12).edge_set()

    def test_no_self_loops_by_default(self):
        g = gnp_random_graph(10, 1.0, rng=3)
        assert all(u != v for u, v in (e.endpoints() for e in g.edge_set()))

    def test_loops_flag(self):
        g = gnp_random_graph(4, 1.0, rng=3, loops=True)
        assert all(g.has_edge(v, v) for v in range(4))

    def test_same_seed_same_graph(self):
        a = gnp_random_graph(20, 0.35, rng=np.random.default_rng(17))
        b = gnp_random_graph(20, 0.35, rng=np.random.default_rng(17))
        assert a.edge_set() == b.edge_set()

    def test_different_seeds_differ(self):
        a = gnp_random_graph(30, 0.5, rng=1)
        b = gnp_random_graph(30, 0.5, rng=2)
        assert a.edge_set() != b.edge_set()

    def test_caller_owns_generator_state(self):
        rng = np.random.default_rng(17)
        first = gnp_random_graph(20, 0.35, rng=rng)
        second = gnp_random_graph(20, 0.35, rng=rng)
        # the second call continues the stream instead of restarting it
        assert first.edge_set() != second.edge_set()

    def test_edge_density_roughly_p(self):
        n, p = 60, 0.3
        g = gnp_random_graph(n, p, rng=5)
        pairs = n * (n - 1) / 2
        assert abs(g.number_of_edges() / pairs - p) < 0.05

    @pytest.mark.parametrize("p", [-0.1, 1.5])
    def test_bad_probability(self, p):
        with pytest.raises(ValueError, match="probability"):
            gnp_random_graph(5, p, rng=0)

    def test_vertex_name(self):
        g = gnp_random_graph(5, 1.0, rng=0, vertex_name=lambda i: i + 1)
        assert g.vertex_set() == {1, 2, 3, 4, 5}


class TestRandomSource:
    def test_generator_passthrough(self):
        rng = np.random.default_rng(0)
        assert as_rng(rng) is rng

    def test_int_seed(self):
        assert as_rng(5).random() == as_rng(5).random()

    def test_unseeded(self):
        assert isinstance(as_rng(None), np.random.Generator)

    def test_bad_type(self):
        with pytest.raises(TypeError):
            as_rng("seed")

    def test_spawn_is_reproducible(self):
        first = [gnp_random_graph(20, 0.35, r).edge_set() for r in spawn_rngs(17, 5)]
        second = [gnp_random_graph(20, 0.35, r).edge_set() for r in spawn_rngs(17, 5)]
        assert first == second

    def test_spawn_streams_are_independent(self):
        graphs = [gnp_random_graph(20, 0.35, r).edge_set() for r in spawn_rngs(17, 3)]
        assert len({frozenset(g) for g in graphs}) == 3

    def test_spawn_order_independent(self):
        rngs = spawn_rngs(17, 3)
        last_first = gnp_random_graph(20, 0.35, rngs[2]).edge_set()
        again = gnp_random_graph(20, 0.35, spawn_rngs(17, 3)[2]).edge_set()
        assert last_first == again


class TestAssertReproducible:
    def test_gnp_is_reproducible(self):
        g = assert_reproducible(lambda rng: gnp_random_graph(20, 0.35, rng), 17)
        assert g.vertex_set() == set(range(20))

    def test_detects_divergence(self):
        unseeded = np.random.default_rng()

        def build(rng):
            # ignores the seeded source and draws from shared state instead
            return gnp_random_graph(30, 0.5, unseeded)

        with pytest.raises(NonDeterminismError) as exc_info:
            assert_reproducible(build, 17)
        assert "edges" in exc_info.value.differences

    def test_detects_vertex_divergence(self):
        sizes = iter([3, 4])

        def build(rng):
            return Graph.from_edges(range(next(sizes)), [])

        with pytest.raises(NonDeterminismError) as exc_info:
            assert_reproducible(build, 1)
        assert exc_info.value.differences["vertices"] == {3}

    def test_rejects_live_generator(self):
        with pytest.raises(ValueError):
            assert_reproducible(lambda rng: gnp_random_graph(3, 0.5, rng), np.random.default_rng(1))
