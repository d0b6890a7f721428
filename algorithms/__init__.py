"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting algorithm the visualizer knows
about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, pseudocode, tags, stable, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engine and UI both consume it
so adding a new algorithm is literally: write the async sort function
(see ``algorithms.adapter``), add one entry here.  That's the plugin
system.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from algorithms.adapter   import SortFunction, StepCallback, no_pause
from algorithms.bubble    import bubble_sort, cocktail_shaker_sort, PSEUDOCODE as _bubble_pc, COCKTAIL_PSEUDOCODE as _cocktail_pc
from algorithms.selection import selection_sort, PSEUDOCODE as _selection_pc
from algorithms.insertion import insertion_sort, shell_sort, PSEUDOCODE as _insertion_pc, SHELL_PSEUDOCODE as _shell_pc
from algorithms.quick     import quick_sort, PSEUDOCODE as _quick_pc
from algorithms.merge     import merge_sort, PSEUDOCODE as _merge_pc
from algorithms.heap      import heap_sort, PSEUDOCODE as _heap_pc


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "bubble"
    label:             str                    # human label, e.g. "Bubble Sort"
    fn:                SortFunction           # the async sort function
    pseudocode:        List[str]              # lines for the side-panel
    tags:              List[str] = field(default_factory=list)   # e.g. ["quadratic", "in-place"]
    stable:            bool     = False       # equal values keep their order?
    complexity_time:   str      = ""          # e.g. "O(n²)"
    complexity_space:  str      = ""          # e.g. "O(1)"
    description:       str      = ""          # one-liner for the UI card


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=bubble_sort, pseudocode=_bubble_pc,
        tags=["quadratic", "in-place", "adjacent-swaps"],
        stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly swaps neighbours that are out of order. Large values bubble to the end.",
    ),

    "cocktail": AlgoInfo(
        key="cocktail", label="Cocktail Shaker Sort", fn=cocktail_shaker_sort, pseudocode=_cocktail_pc,
        tags=["quadratic", "in-place", "adjacent-swaps"],
        stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Bubble sort in both directions. Small values near the end travel back faster.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=selection_sort, pseudocode=_selection_pc,
        tags=["quadratic", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Finds the minimum of the unsorted tail and swaps it into place. Few swaps, many comparisons.",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=insertion_sort, pseudocode=_insertion_pc,
        tags=["quadratic", "in-place", "adaptive"],
        stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Sinks each new element into the sorted prefix. Very fast on nearly-sorted data.",
    ),

    "shell": AlgoInfo(
        key="shell", label="Shell Sort", fn=shell_sort, pseudocode=_shell_pc,
        tags=["sub-quadratic", "in-place"],
        complexity_time="O(n^1.5)", complexity_space="O(1)",
        description="Insertion sort over shrinking gaps. Moves far-away elements early.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=quick_sort, pseudocode=_quick_pc,
        tags=["divide-and-conquer", "in-place"],
        complexity_time="O(n log n)", complexity_space="O(log n)",
        description="Partitions around a pivot, then sorts both halves. Fast on average.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=merge_sort, pseudocode=_merge_pc,
        tags=["divide-and-conquer"],
        stable=True,
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Merges sorted runs of doubling width. Predictable, stable, needs scratch space.",
    ),

    "heap": AlgoInfo(
        key="heap", label="Heap Sort", fn=heap_sort, pseudocode=_heap_pc,
        tags=["in-place"],
        complexity_time="O(n log n)", complexity_space="O(1)",
        description="Builds a max-heap, then moves the root behind the shrinking heap.",
    ),
}

DEFAULT_ALGORITHM: str = "bubble"


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "DEFAULT_ALGORITHM",
    "SortFunction",
    "StepCallback",
    "no_pause",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
