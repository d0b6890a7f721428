"""
merge.py — Merge Sort
======================
Bottom-up merge sort.  Runs of width 1, 2, 4, … are merged pairwise.

Each merge copies the two runs into scratch lists and writes the merged
result back into the sequence one slot at a time; every write is a step
that highlights the slot written and the head of the right-hand run.
While a merge is in progress the chart may briefly show a value twice,
the sequence length never changes.
"""

from typing import List

from algorithms.adapter import StepCallback
from chart.sequence import SequenceView


PSEUDOCODE: List[str] = [
    "def merge_sort(a):",
    "    width ← 1",
    "    while width < n:",
    "        for lo in 0, 2·width, 4·width, …:",
    "            merge(a[lo : lo+width], a[lo+width : lo+2·width])",
    "        width ← 2·width",
]


async def _merge(values: SequenceView, lo: int, mid: int, hi: int, on_step: StepCallback) -> None:
    left  = values[lo:mid]
    right = values[mid:hi]
    i = j = 0
    k = lo

    while i < len(left) and j < len(right):
        # <= keeps the sort stable
        if left[i] <= right[j]:
            values[k] = left[i]
            i += 1
        else:
            values[k] = right[j]
            j += 1
        await on_step(k, min(mid + j, hi - 1))
        k += 1

    for rest in (left[i:], right[j:]):
        for v in rest:
            values[k] = v
            await on_step(k)
            k += 1


async def merge_sort(values: SequenceView, on_step: StepCallback) -> None:
    n = len(values)
    width = 1
    while width < n:
        for lo in range(0, n, 2 * width):
            mid = min(lo + width, n)
            hi  = min(lo + 2 * width, n)
            if mid < hi:
                await _merge(values, lo, mid, hi, on_step)
        width *= 2
