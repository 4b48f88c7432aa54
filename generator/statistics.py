"""Summary statistics of generated graphs."""

from typing import Any

import networkx as nx
import numpy as np


def get_graph_statistics(graph: nx.Graph) -> dict[str, Any]:
    """Get statistics about a generated graph.

    Args:
        graph: Directed or undirected graph

    Returns:
        Dictionary of statistics, empty for a graph without nodes
    """
    if graph.number_of_nodes() == 0:
        return {}

    degrees = np.array([d for _, d in graph.degree()])
    directed = graph.is_directed()

    stats = {
        "num_nodes": graph.number_of_nodes(),
        "num_edges": graph.number_of_edges(),
        "directed": directed,
        "density": nx.density(graph),
        "avg_degree": float(np.mean(degrees)),
        "max_degree": int(degrees.max()),
    }

    if directed:
        stats["num_components"] = nx.number_weakly_connected_components(graph)
    else:
        stats["num_components"] = nx.number_connected_components(graph)

    # Clustering is quadratic in degree; skip it on large graphs
    if graph.number_of_nodes() < 10000:
        stats["avg_clustering"] = nx.average_clustering(graph.to_undirected())

    return stats
