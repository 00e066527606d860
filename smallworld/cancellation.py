"""Cooperative cancellation for long rewiring passes."""

from __future__ import annotations
import threading
from typing import Callable, Optional, Union

from .errors import Cancelled

# Candidates processed between two cancellation checks.
CHECK_EVERY = 1000


class CancellationToken:
    """Flag that can be set from another thread to abort a rewiring pass.

    The rewirer calls check() at a fixed cadence; once cancel() has been
    called, check() raises Cancelled.
    """

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def check(self) -> None:
        if self._event.is_set():
            raise Cancelled("rewiring cancelled")

    def __call__(self) -> None:
        self.check()


CancelCheck = Union[CancellationToken, Callable[[], None]]


def as_check(cancel: Optional[CancelCheck]) -> Callable[[], None]:
    """Normalise a token or a plain callable into a zero-argument check."""
    if cancel is None:
        return lambda: None
    if isinstance(cancel, CancellationToken):
        return cancel.check
    if callable(cancel):
        return cancel
    raise TypeError(f"cancel must be a CancellationToken or callable, got {type(cancel).__name__}")
