"""
adapter.py — Algorithm Contract
=================================
Every sorting algorithm is an ``async`` function with this shape:

    async def some_sort(values: SequenceView, on_step: StepCallback) -> None:
        ...
        values.swap(i, j)          # 1. one atomic action, in place
        await on_step(i, j)        # 2. report the indices involved
        ...                        # 3. resume once the engine allows it

The engine owns everything that happens inside ``on_step``: building the
Frame, handing it to the renderer, waiting out the pacing delay and
checking for cancellation.  The algorithm only decides *which* action
comes next.  When the sequence is ordered it simply returns; no further
callbacks are allowed after that.

Design decisions:
  - ``values`` is a ``SequenceView``: the sentinel is outside the view and
    the view cannot be resized, so an algorithm cannot break the
    fixed-length invariant even by accident.
  - ``on_step`` takes the highlighted indices as positional ints.  Any
    number is accepted; bubble sort reports a pair, merge sort the single
    slot it just wrote.
  - Algorithms must await ``on_step`` rather than fire-and-forget it.
    Pacing, ordering and cancellation all hang off that await.
"""

from typing import Awaitable, Callable

from chart.sequence import SequenceView


StepCallback = Callable[..., Awaitable[None]]

SortFunction = Callable[[SequenceView, StepCallback], Awaitable[None]]


async def no_pause(*indices: int) -> None:
    """A StepCallback that never suspends.  Handy for running an algorithm headless."""
    return None


__all__ = ["StepCallback", "SortFunction", "no_pause"]
