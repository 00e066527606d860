"""Sparse weighted graph shared by the lattice builder and the rewirer.

This module defines the Graph object that both generation algorithms read
and write. The adjacency is kept as a scipy DOK matrix so single-cell reads
and writes stay cheap while the rewirer moves weight around.

Conventions:
- Vertices are labelled 0..n-1
- Weights are non-negative floats; an absent entry has weight 0
- An undirected edge is stored twice, as (i, j) and (j, i) with equal weight
- A self-loop (i, i) is a single cell
"""

from __future__ import annotations
import numpy as np
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from scipy import sparse

from .errors import InvalidParameter


Entry = Tuple[int, int, float]


@dataclass(eq=False)
class Graph:
    """Mutable sparse weighted adjacency over n vertices.

    Generators hand out fresh Graph instances and the rewirer works on a
    copy, so a Graph received from either algorithm is owned by the caller.

    Attributes:
        adjacency: (n, n) scipy DOK matrix of float64 weights
        n_nodes: Number of vertices
        metadata: Optional metadata about graph origin
    """
    adjacency: sparse.dok_matrix
    n_nodes: int = field(init=False)
    metadata: Dict = field(default_factory=dict)

    def __post_init__(self):
        A = self.adjacency
        if not sparse.issparse(A):
            A = sparse.dok_matrix(np.asarray(A, dtype=float))
        if A.ndim != 2 or A.shape[0] != A.shape[1]:
            raise InvalidParameter(f"adjacency must be square, got shape {A.shape}")
        if A.shape[0] < 1:
            raise InvalidParameter("a graph needs at least one vertex")
        A = A.todok().astype(np.float64)
        if A.nnz and np.any(A.tocoo().data < 0):
            raise InvalidParameter("edge weights must be non-negative")
        self.adjacency = A
        self.n_nodes = A.shape[0]

    @classmethod
    def empty(cls, n: int, metadata: Optional[Dict] = None) -> "Graph":
        """Graph with n vertices and no edges."""
        if n < 1:
            raise InvalidParameter(f"n must be at least 1, got {n}")
        return cls(sparse.dok_matrix((n, n), dtype=np.float64), metadata=dict(metadata or {}))

    @classmethod
    def from_dense(cls, A, metadata: Optional[Dict] = None) -> "Graph":
        return cls(sparse.dok_matrix(np.asarray(A, dtype=float)), metadata=dict(metadata or {}))

    @classmethod
    def from_sparse(cls, A, metadata: Optional[Dict] = None) -> "Graph":
        return cls(sparse.dok_matrix(A, dtype=np.float64), metadata=dict(metadata or {}))

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def _check_index(self, row: int, col: int) -> None:
        n = self.n_nodes
        if not (0 <= row < n and 0 <= col < n):
            raise IndexError(f"entry ({row}, {col}) is outside a {n}x{n} graph")

    def get(self, row: int, col: int) -> float:
        """Weight at (row, col); 0.0 when absent."""
        self._check_index(row, col)
        return float(self.adjacency[row, col])

    def set(self, row: int, col: int, weight: float) -> None:
        """Overwrite the weight at (row, col). Writing 0 removes the entry."""
        self._check_index(row, col)
        if weight < 0:
            raise InvalidParameter(f"negative weight {weight} at ({row}, {col})")
        self.adjacency[row, col] = float(weight)

    def add_weight(self, row: int, col: int, delta: float) -> None:
        """Add delta to the weight at (row, col)."""
        self.set(row, col, self.get(row, col) + delta)

    def non_zero_entries(self) -> List[Entry]:
        """All stored entries as (row, col, weight), ordered by column then row."""
        coo = self.adjacency.tocoo()
        keep = coo.data != 0
        rows, cols, data = coo.row[keep], coo.col[keep], coo.data[keep]
        order = np.lexsort((rows, cols))
        return [(int(rows[i]), int(cols[i]), float(data[i])) for i in order]

    # ------------------------------------------------------------------
    # Whole-graph views
    # ------------------------------------------------------------------

    def copy(self) -> "Graph":
        return Graph(self.adjacency.copy(), metadata=dict(self.metadata))

    def n_entries(self) -> int:
        """Number of non-zero cells (an undirected edge counts twice)."""
        return len(self.non_zero_entries())

    def total_weight(self) -> float:
        """Sum of all stored weights."""
        return float(self.adjacency.sum())

    def out_degree(self) -> np.ndarray:
        """Weighted out-degree (row sums)."""
        return np.asarray(self.adjacency.sum(axis=1)).ravel()

    def in_degree(self) -> np.ndarray:
        """Weighted in-degree (column sums)."""
        return np.asarray(self.adjacency.sum(axis=0)).ravel()

    def degree(self) -> np.ndarray:
        """Degree vector. For symmetric storage this is the undirected degree."""
        return self.out_degree()

    def is_symmetric(self, atol: float = 0.0) -> bool:
        diff = (self.adjacency - self.adjacency.T).tocoo()
        return bool(diff.nnz == 0 or np.all(np.abs(diff.data) <= atol))

    def has_self_loops(self) -> bool:
        return bool(np.any(self.adjacency.diagonal() != 0))

    def edges(self, eps: float = 0.0) -> Iterator[Entry]:
        """Iterate over undirected edges as (i, j, weight) with i <= j.

        Only meaningful for symmetric graphs; each stored pair is reported once.
        """
        for row, col, w in self.non_zero_entries():
            if row <= col and abs(w) > eps:
                yield (row, col, w)

    def to_dense(self) -> np.ndarray:
        return self.adjacency.toarray()

    def to_csr(self) -> sparse.csr_matrix:
        return self.adjacency.tocsr()

    def summary(self) -> Dict[str, float]:
        """Small-world summary statistics for the graph."""
        from .metrics import small_world_summary
        return small_world_summary(self)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.n_nodes == other.n_nodes and self.non_zero_entries() == other.non_zero_entries()

    __hash__ = None
