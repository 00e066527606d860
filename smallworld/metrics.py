"""Small-world diagnostics for generated graphs.

The two quantities Watts and Strogatz tracked along the rewiring axis:
- clustering coefficient C(p): stays high while p is small
- characteristic path length L(p): drops quickly once a few shortcuts exist

Both are computed on the unweighted, symmetrised skeleton of the graph with
self-loops removed, so directed lattices are measured as their undirected
counterparts.
"""

from __future__ import annotations
import numpy as np
from typing import Dict

from scipy.sparse import csgraph

from .graph import Graph


def binary_adjacency(graph: Graph) -> np.ndarray:
    """Dense 0/1 symmetric adjacency with zero diagonal."""
    A = (graph.to_dense() != 0).astype(float)
    A = np.maximum(A, A.T)
    np.fill_diagonal(A, 0.0)
    return A


def clustering_coefficient(graph: Graph) -> float:
    """Global clustering coefficient.

    C = 3T / tau where T = number of triangles, tau = connected triples.
    """
    A = binary_adjacency(graph)
    A2 = A @ A
    triangles = np.trace(A2 @ A) / 6.0
    triplets = np.sum(A2 * (1 - np.eye(graph.n_nodes))) / 2.0
    if triplets == 0:
        return 0.0
    return float(3.0 * triangles / triplets)


def average_path_length(graph: Graph) -> float:
    """Mean shortest-path length over all reachable pairs of distinct vertices.

    Returns nan when no two vertices are connected.
    """
    A = binary_adjacency(graph)
    dist = csgraph.shortest_path(A, directed=False, unweighted=True)
    off_diag = ~np.eye(graph.n_nodes, dtype=bool)
    finite = dist[off_diag & np.isfinite(dist)]
    if finite.size == 0:
        return float("nan")
    return float(np.mean(finite))


def small_world_summary(graph: Graph) -> Dict[str, float]:
    """Summary statistics for a generated graph."""
    deg = graph.degree()
    return {
        "n_nodes": float(graph.n_nodes),
        "n_entries": float(graph.n_entries()),
        "total_weight": graph.total_weight(),
        "mean_degree": float(np.mean(deg)),
        "max_degree": float(np.max(deg)),
        "n_self_loops": float(np.count_nonzero(graph.adjacency.diagonal())),
        "clustering_coefficient": clustering_coefficient(graph),
        "average_path_length": average_path_length(graph),
    }
