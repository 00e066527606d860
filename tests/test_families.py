"""Tests for graph family samplers and the Watts-Strogatz generator."""

import numpy as np
import pytest

from smallworld import (
    Graph,
    GraphFamily,
    build_ring_lattice,
    sample_graph_family,
    watts_strogatz,
)


class TestWattsStrogatz:
    """Tests for the one-call generator."""

    def test_p_zero_is_lattice(self):
        assert watts_strogatz(20, 4, 0.0, rng=0) == build_ring_lattice(20, 4, undirected=True)

    def test_keeps_edge_count(self):
        """Without multi-edges or self-loops, rewiring keeps every edge distinct."""
        n, k = 30, 4
        G = watts_strogatz(n, k, 0.3, rng=42)

        assert G.n_entries() == n * k
        assert G.total_weight() == n * k
        assert G.is_symmetric()
        assert not G.has_self_loops()

    def test_directed_variant(self):
        G = watts_strogatz(12, 3, 0.5, undirected=False, rng=1)
        assert G.n_entries() == 36
        assert np.allclose(G.out_degree(), 3)

    def test_family_metadata(self):
        G = watts_strogatz(10, 2, 0.2, rng=0)
        assert G.metadata["family"] == "watts_strogatz"
        assert G.metadata["rewired"]["p"] == 0.2


class TestGraphFamilies:
    """Tests for sample_graph_family."""

    @pytest.mark.parametrize("family", list(GraphFamily))
    def test_family_returns_valid_graph(self, family):
        _, _, G = sample_graph_family(family, n=10, seed=42)

        assert isinstance(G, Graph)
        assert G.n_nodes == 10
        assert G.is_symmetric()
        assert not G.has_self_loops()

    def test_ring_lattice_regularity(self):
        _, _, G = sample_graph_family(GraphFamily.RING_LATTICE, n=20, params={"k": 6}, seed=0)
        assert np.all(G.degree() == 6)

    def test_watts_strogatz_defaults(self):
        family, params, G = sample_graph_family(GraphFamily.WATTS_STROGATZ, n=30, seed=1)

        assert family == GraphFamily.WATTS_STROGATZ
        assert params["k"] == 4
        assert params["p"] == 0.1
        assert params["undirected"] is True
        assert G.n_entries() == 30 * 4

    def test_reproducibility(self):
        params = {"k": 6, "p": 0.5}
        _, _, G1 = sample_graph_family(GraphFamily.WATTS_STROGATZ, n=40, params=params, seed=42)
        _, _, G2 = sample_graph_family(GraphFamily.WATTS_STROGATZ, n=40, params=params, seed=42)
        assert G1 == G2

    def test_different_seeds_different_graphs(self):
        params = {"k": 6, "p": 1.0}
        _, _, G1 = sample_graph_family(GraphFamily.WATTS_STROGATZ, n=40, params=params, seed=42)
        _, _, G2 = sample_graph_family(GraphFamily.WATTS_STROGATZ, n=40, params=params, seed=43)
        assert G1 != G2

    def test_family_by_name(self):
        family, _, _ = sample_graph_family("ring_lattice", n=8)
        assert family == GraphFamily.RING_LATTICE

    def test_unknown_family(self):
        with pytest.raises(ValueError):
            sample_graph_family("erdos_renyi", n=8)

    def test_metadata_stored(self):
        _, _, G = sample_graph_family(GraphFamily.WATTS_STROGATZ, n=10, seed=42)

        assert G.metadata["family"] == "watts_strogatz"
        assert G.metadata["source"] == "sample_graph_family"
        assert G.metadata["seed"] == 42
