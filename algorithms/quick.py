"""
quick.py — Quick Sort
======================
Lomuto partition with the middle element as pivot, driven by an explicit
stack of (lo, hi) ranges instead of recursion.

Steps:
  1. Move the middle element to ``hi`` (it becomes the pivot)  → (mid, hi)
  2. Compare every element of the range with the pivot:
       smaller → swap it into the "< pivot" prefix            → (i, j)
       not     → just show the comparison                      → (j, hi)
  3. Drop the pivot between the two halves                     → (i, hi)

The middle pivot keeps already-sorted input (common after a reset) away
from the quadratic worst case.
"""

from typing import List, Tuple

from algorithms.adapter import StepCallback
from chart.sequence import SequenceView


PSEUDOCODE: List[str] = [
    "def quick_sort(a, lo, hi):",
    "    if lo >= hi: return",
    "    swap(a[(lo+hi)/2], a[hi]); pivot ← a[hi]",
    "    i ← lo",
    "    for j in lo .. hi-1:",
    "        if a[j] < pivot: swap(a[i], a[j]); i ← i + 1",
    "    swap(a[i], a[hi])",
    "    quick_sort(a, lo, i-1); quick_sort(a, i+1, hi)",
]


async def _partition(values: SequenceView, lo: int, hi: int, on_step: StepCallback) -> int:
    mid = (lo + hi) // 2
    if mid != hi:
        values.swap(mid, hi)
        await on_step(mid, hi)

    pivot = values[hi]
    i = lo
    for j in range(lo, hi):
        if values[j] < pivot:
            values.swap(i, j)
            await on_step(i, j)
            i += 1
        else:
            await on_step(j, hi)

    values.swap(i, hi)
    await on_step(i, hi)
    return i


async def quick_sort(values: SequenceView, on_step: StepCallback) -> None:
    ranges: List[Tuple[int, int]] = [(0, len(values) - 1)]
    while ranges:
        lo, hi = ranges.pop()
        if lo >= hi:
            continue
        p = await _partition(values, lo, hi, on_step)
        # smaller half last so it is processed first
        if p - lo < hi - p:
            ranges.append((p + 1, hi))
            ranges.append((lo, p - 1))
        else:
            ranges.append((lo, p - 1))
            ranges.append((p + 1, hi))
