"""Exceptions raised by lattice construction and rewiring."""

from __future__ import annotations


class InvalidParameter(ValueError):
    """Raised when a generator parameter or an edge weight is out of range."""
    pass


class Cancelled(Exception):
    """Raised when a cancellation token fires during a rewiring pass.

    The partially rewired working copy is discarded; the input graph is
    untouched and remains valid.
    """
    pass


class NoValidTargetFound(RuntimeError):
    """Raised in strict mode when the rejection search for a new endpoint
    exhausts its repeat budget without finding an admissible vertex."""

    def __init__(self, source: int, target: int, new_source: int, repeats: int):
        self.source = source
        self.target = target
        self.new_source = new_source
        self.repeats = repeats
        super().__init__(
            f"No admissible target for edge ({source}, {target}) "
            f"rewired from vertex {new_source} after {repeats} repeated draws"
        )
