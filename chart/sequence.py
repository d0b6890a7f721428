"""
sequence.py — Sequence & Frame
================================
The data side of the chart.

    raw values ──prepare_sequence()──▶ [v0, v1, …, vN-1, sentinel]

Rules:
  - ``None`` and ``0`` are empty slots, not sortable values; they are
    filtered out before anything is drawn.
  - One sentinel equal to ``max(values) + 1`` is appended so the vertical
    scale always has headroom.  ``max`` of an empty list is ``0``.
  - The sentinel is rendered as the last bar of every frame but the
    algorithms never see it: they work on a ``SequenceView`` that stops
    one element short.
  - Length is fixed for the lifetime of a run.  The view allows item
    assignment and nothing that would resize the list.
"""

import random
from collections.abc import MutableSequence
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Tuple


Number = float


# ---------------------------------------------------------------------------
# Preparation
# ---------------------------------------------------------------------------
def filter_values(raw: Iterable[Optional[Number]]) -> List[Number]:
    """Drop ``None`` and zero entries."""
    return [v for v in raw if v is not None and v != 0]


def sentinel_for(values: List[Number]) -> Number:
    return max(values, default=0) + 1


def prepare_sequence(raw: Iterable[Optional[Number]]) -> List[Number]:
    """Filter ``raw`` and append the headroom sentinel."""
    values = filter_values(raw)
    values.append(sentinel_for(values))
    return values


def generate_values(size: int, max_value: int = 100, seed: Optional[int] = None) -> List[int]:
    """Random positive integers in ``[1, max_value]`` for the data-size selector."""
    rng = random.Random(seed)
    return [rng.randint(1, max_value) for _ in range(max(0, size))]


# ---------------------------------------------------------------------------
# SequenceView — what an algorithm is allowed to touch
# ---------------------------------------------------------------------------
class SequenceView(MutableSequence):
    """
    Fixed-length window over ``data[:stop]``.  Writes go straight through
    to the underlying list so the renderer sees them on the next frame.
    """

    def __init__(self, data: List[Number], stop: Optional[int] = None):
        self._data = data
        self._stop = len(data) if stop is None else max(0, min(stop, len(data)))

    def __len__(self) -> int:
        return self._stop

    def _index(self, i: int) -> int:
        if i < 0:
            i += self._stop
        if not 0 <= i < self._stop:
            raise IndexError("sequence index out of range")
        return i

    def __getitem__(self, i):
        if isinstance(i, slice):
            return [self._data[k] for k in range(*i.indices(self._stop))]
        return self._data[self._index(i)]

    def __setitem__(self, i, value) -> None:
        if isinstance(i, slice):
            raise TypeError("slice assignment would change the sequence length")
        self._data[self._index(i)] = value

    def __delitem__(self, i) -> None:
        raise TypeError("elements cannot be removed during a run")

    def insert(self, index: int, value) -> None:
        raise TypeError("elements cannot be inserted during a run")

    def swap(self, i: int, j: int) -> None:
        i, j = self._index(i), self._index(j)
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def __repr__(self) -> str:
        return f"SequenceView({self[:]!r})"


# ---------------------------------------------------------------------------
# Frame — one rendered snapshot
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Frame:
    """
    Attributes:
        values       : Sequence state at this instant (sentinel included).
        highlighted  : Indices being compared / swapped right now.
        step_number  : 0-based index of the step that produced the frame.
        is_final     : True for the frame rendered after the algorithm returned.
    """

    values:      Tuple[Number, ...]
    highlighted: FrozenSet[int] = field(default_factory=frozenset)
    step_number: int            = 0
    is_final:    bool           = False
