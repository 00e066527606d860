"""Probabilistic edge rewiring under structural constraints.

Each stored edge of a graph is considered once and, with probability p, one
endpoint (or both) is moved to a randomly chosen vertex. The pass runs on a
copy of the input; the list of edges to consider is taken from the input
before anything is modified, so edges created during the pass are never
themselves rewired.

Constraints on the new endpoint:
- undirected: the new pair is kept in canonical order (new source >= new target)
- allow_self_loops=False: the new pair may not be a diagonal cell
- allow_multi_edges=False: the new pair must currently carry no weight

The new target is found by rejection sampling with a per-edge record of
already-tried vertices. If the same rejected vertex keeps coming back, the
search gives up after n**2 repeats. What happens to the edge then is set by
RewireConfig.on_exhausted:
- "keep": the edge stays where it is
- "fallback": the edge is moved to the last drawn pair even if that pair
  breaks the constraints, and a RuntimeWarning is emitted
- "raise": NoValidTargetFound is raised and the working copy is dropped

Weight is moved, never created or destroyed: the sum of all entries of the
returned graph equals that of the input.
"""

from __future__ import annotations
import warnings
import numpy as np
from dataclasses import dataclass
from typing import Literal, Optional, Tuple, Union

from .cancellation import CHECK_EVERY, CancelCheck, as_check
from .errors import InvalidParameter, NoValidTargetFound
from .graph import Graph
from .random_source import RandomSource


RngLike = Union[None, int, np.random.Generator, RandomSource]

EXHAUSTION_POLICIES = ("keep", "fallback", "raise")


@dataclass(frozen=True)
class RewireConfig:
    """Parameters of a rewiring pass.

    Attributes:
        p: Probability of rewiring each edge. Values outside [0, 1] are
            accepted and behave as never (p <= 0) or always (p >= 1)
        both_ends: Also move the source endpoint, not only the target
        allow_self_loops: Permit (i, i) as a new edge
        allow_multi_edges: Permit landing on a pair that already has weight;
            weights then add up
        undirected: Treat the graph as symmetric, visiting each edge once
        on_exhausted: 'keep', 'fallback' or 'raise' (see module docstring)
        check_every: Cancellation cadence, in candidate edges
    """
    p: float = 0.1
    both_ends: bool = False
    allow_self_loops: bool = False
    allow_multi_edges: bool = False
    undirected: bool = False
    on_exhausted: Literal["keep", "fallback", "raise"] = "keep"
    check_every: int = CHECK_EVERY

    def __post_init__(self):
        if self.on_exhausted not in EXHAUSTION_POLICIES:
            raise InvalidParameter(
                f"on_exhausted must be one of {EXHAUSTION_POLICIES}, got {self.on_exhausted!r}"
            )
        if self.check_every < 1:
            raise InvalidParameter(f"check_every must be positive, got {self.check_every}")


@dataclass
class RewireReport:
    """Counters collected during one rewiring pass."""
    n_candidates: int = 0
    n_skipped_symmetric: int = 0
    n_rewired: int = 0
    n_exhausted: int = 0
    total_weight_before: float = 0.0
    total_weight_after: float = 0.0


def _admissible(work: Graph, newj: int, newk: int, config: RewireConfig) -> bool:
    if config.undirected and newj < newk:
        return False
    if not config.allow_self_loops and newj == newk:
        return False
    if not config.allow_multi_edges and work.get(newj, newk) != 0:
        return False
    return True


def _draw_target(
    work: Graph,
    newj: int,
    config: RewireConfig,
    rng: RandomSource,
) -> Tuple[int, int, bool]:
    """Rejection-sample a new target for source newj.

    Returns:
        (newk, repeats, found). When found is False the repeat budget ran out
        and newk is the last vertex drawn.
    """
    n = work.n_nodes
    tried = np.zeros(n, dtype=bool)
    repeats = 0
    limit = n * n

    while True:
        newk = rng.integer(n)
        if tried[newk]:
            repeats += 1
            if repeats >= limit:
                return newk, repeats, False
            continue
        tried[newk] = True
        if _admissible(work, newj, newk, config):
            return newk, repeats, True


def _move_weight(work: Graph, j: int, k: int, newj: int, newk: int, undirected: bool) -> None:
    # In undirected storage a diagonal cell holds both directions at once, so
    # the deposit is sized from what was actually removed.
    removed = work.get(j, k)
    work.set(j, k, 0.0)
    if undirected and j != k:
        removed += work.get(k, j)
        work.set(k, j, 0.0)

    if undirected and newj != newk:
        half = removed / 2.0
        work.add_weight(newj, newk, half)
        work.add_weight(newk, newj, half)
    else:
        work.add_weight(newj, newk, removed)


def rewire_graph(
    graph: Graph,
    config: RewireConfig,
    rng: RngLike = None,
    cancel: Optional[CancelCheck] = None,
    return_report: bool = False,
):
    """Rewire the edges of a graph.

    Args:
        graph: Input graph; never modified
        config: Rewiring parameters
        rng: RandomSource, numpy Generator, integer seed, or None
        cancel: CancellationToken or zero-argument callable checked every
            config.check_every candidates; it aborts by raising Cancelled
        return_report: Also return a RewireReport

    Returns:
        The rewired Graph, or (Graph, RewireReport) if return_report is set

    Raises:
        Cancelled: If the cancellation check fires
        NoValidTargetFound: If on_exhausted='raise' and a target search
            runs out of draws
    """
    source = RandomSource.coerce(rng)
    check = as_check(cancel)

    work = graph.copy()
    work.metadata["rewired"] = {
        "p": config.p,
        "both_ends": config.both_ends,
        "allow_self_loops": config.allow_self_loops,
        "allow_multi_edges": config.allow_multi_edges,
        "undirected": config.undirected,
    }
    n = work.n_nodes
    candidates = [(row, col) for row, col, _ in graph.non_zero_entries()]
    report = RewireReport(
        n_candidates=len(candidates),
        total_weight_before=graph.total_weight(),
    )
    n_forced = 0

    with source:
        for i, (j, k) in enumerate(candidates):
            if i % config.check_every == 0:
                check()

            if config.undirected and j < k:
                report.n_skipped_symmetric += 1
                continue

            if source.uniform01() >= config.p:
                continue

            newj = source.integer(n) if config.both_ends else j
            newk, repeats, found = _draw_target(work, newj, config, source)
            if not found:
                report.n_exhausted += 1
                if config.on_exhausted == "raise":
                    raise NoValidTargetFound(j, k, newj, repeats)
                if config.on_exhausted == "keep":
                    continue
                n_forced += 1

            _move_weight(work, j, k, newj, newk, config.undirected)
            report.n_rewired += 1

    report.total_weight_after = work.total_weight()

    if n_forced:
        warnings.warn(
            f"{n_forced} edge(s) found no admissible target and were moved to "
            f"the last drawn vertex; self-loop or multi-edge constraints may "
            f"not hold",
            RuntimeWarning,
        )

    if return_report:
        return work, report
    return work


def rewire(
    graph: Graph,
    p: float,
    both_ends: bool = False,
    allow_self_loops: bool = False,
    allow_multi_edges: bool = False,
    undirected: bool = False,
    rng: RngLike = None,
    cancel: Optional[CancelCheck] = None,
) -> Graph:
    """Rewire each edge of graph with probability p.

    Keyword form of rewire_graph with the default exhaustion policy; see
    RewireConfig for the meaning of each flag.
    """
    config = RewireConfig(
        p=p,
        both_ends=both_ends,
        allow_self_loops=allow_self_loops,
        allow_multi_edges=allow_multi_edges,
        undirected=undirected,
    )
    return rewire_graph(graph, config, rng=rng, cancel=cancel)
