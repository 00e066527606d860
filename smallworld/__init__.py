"""Ring lattices and Watts-Strogatz rewiring.

This package builds degree-regular ring lattices and rewires their edges
under configurable constraints, producing reproducible small-world graphs.
Randomness and cancellation are passed in explicitly so that every pass is
seedable and can be aborted between edges.

Key exports:
- Graph: Sparse weighted adjacency shared by both algorithms
- build_ring_lattice: Deterministic n-vertex ring lattice of degree k
- rewire, rewire_graph, RewireConfig: Probabilistic edge rewiring
- RandomSource, CancellationToken: Injected randomness and cancellation
- watts_strogatz, GraphFamily, sample_graph_family: One-call generators
"""

from .errors import InvalidParameter, Cancelled, NoValidTargetFound
from .graph import Graph
from .random_source import RandomSource
from .cancellation import CancellationToken, CHECK_EVERY
from .lattice import build_ring_lattice, effective_half_degree
from .rewiring import RewireConfig, RewireReport, rewire, rewire_graph
from .families import GraphFamily, sample_graph_family, watts_strogatz

__all__ = [
    "InvalidParameter",
    "Cancelled",
    "NoValidTargetFound",
    "Graph",
    "RandomSource",
    "CancellationToken",
    "CHECK_EVERY",
    "build_ring_lattice",
    "effective_half_degree",
    "RewireConfig",
    "RewireReport",
    "rewire",
    "rewire_graph",
    "GraphFamily",
    "sample_graph_family",
    "watts_strogatz",
]
