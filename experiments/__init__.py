"""Experiments package for smallworld.

This package contains experiment scripts for:
- Watts-Strogatz rewiring sweeps (clustering and path length against p)

Key experiments:
- rewiring_sweep: Normalised C(p)/C(0) and L(p)/L(0) over a log-spaced p grid
"""

__all__ = [
    "rewiring_sweep",
]
