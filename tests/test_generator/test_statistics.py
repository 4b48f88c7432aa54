"""Tests for graph statistics."""

import networkx as nx
import pytest

from generator import get_graph_statistics, generator_from_str


class TestGetGraphStatistics:
    """Tests for get_graph_statistics function."""

    def test_undirected_chain(self, rng):
        """Test statistics of an undirected path."""
        graph = generator_from_str("chain/5").sample(rng)
        stats = get_graph_statistics(graph)

        assert stats["num_nodes"] == 5
        assert stats["num_edges"] == 4
        assert not stats["directed"]
        assert stats["density"] == pytest.approx(0.4)
        assert stats["avg_degree"] == pytest.approx(1.6)
        assert stats["max_degree"] == 2
        assert stats["num_components"] == 1
        assert stats["avg_clustering"] == 0.0

    def test_directed_components_are_weak(self, rng):
        """Test directed graphs count weakly connected components."""
        graph = generator_from_str("tree/30", directed=True).sample(rng)
        stats = get_graph_statistics(graph)

        assert stats["directed"]
        assert stats["num_components"] == 1

    def test_edgeless_graph(self, rng):
        """Test isolated nodes are separate components."""
        graph = generator_from_str("er/6,0").sample(rng)
        stats = get_graph_statistics(graph)

        assert stats["num_components"] == 6
        assert stats["max_degree"] == 0

    def test_empty_graph(self):
        """Test graph without nodes has no statistics."""
        assert get_graph_statistics(nx.Graph()) == {}
