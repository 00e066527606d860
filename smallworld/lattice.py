"""Ring lattice construction.

Vertices sit on a cycle and each one is joined to the next k' vertices
clockwise. The result is the regular starting point of the Watts-Strogatz
model: rewiring it with probability p interpolates between this lattice
(p = 0) and a random graph (p = 1).

Degree adjustment:
- directed: k' = k, every vertex has out-degree k
- undirected, k > 1: k' = k // 2, every vertex has degree 2k' (always even)
- undirected, k <= 1: k' = k

Reference: Watts, D. J., & Strogatz, S. H. (1998). Collective dynamics of
"small-world" networks. Nature, 393(6684), 440-442.
"""

from __future__ import annotations

from .errors import InvalidParameter
from .graph import Graph


def effective_half_degree(k: int, undirected: bool) -> int:
    """Number of clockwise neighbours each vertex is joined to."""
    if undirected and k > 1:
        return k // 2
    return k


def build_ring_lattice(n: int, k: int, undirected: bool = False) -> Graph:
    """Build an n-vertex ring lattice of target degree k.

    Args:
        n: Number of vertices (at least 1)
        k: Target degree, at most n - 1
        undirected: Store each edge in both directions

    Returns:
        Graph with unit weights

    Raises:
        InvalidParameter: If n < 1, k < 0 or k > n - 1
    """
    if n < 1:
        raise InvalidParameter(f"n must be at least 1, got {n}")
    if k < 0:
        raise InvalidParameter(f"k must be non-negative, got {k}")
    if k > n - 1:
        raise InvalidParameter("k can be at most n - 1")

    k_eff = effective_half_degree(k, undirected)
    graph = Graph.empty(
        n,
        metadata={
            "family": "ring_lattice",
            "n": n,
            "k": k,
            "k_effective": k_eff,
            "undirected": undirected,
            "source": "build_ring_lattice",
        },
    )

    for i in range(n):
        for j in range(1, k_eff + 1):
            l = (i + j) % n
            graph.add_weight(i, l, 1.0)
            if undirected:
                graph.add_weight(l, i, 1.0)

    return graph
