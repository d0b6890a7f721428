"""
heap.py — Heap Sort
====================
Builds a max-heap in place, then repeatedly swaps the root behind the
shrinking heap and sifts the new root down.
"""

from typing import List

from algorithms.adapter import StepCallback
from chart.sequence import SequenceView


PSEUDOCODE: List[str] = [
    "def heap_sort(a):",
    "    for s in n/2-1 .. 0: sift_down(a, s, n-1)",
    "    for end in n-1 .. 1:",
    "        swap(a[0], a[end])",
    "        sift_down(a, 0, end-1)",
]


async def _sift_down(values: SequenceView, root: int, end: int, on_step: StepCallback) -> None:
    while 2 * root + 1 <= end:
        child = 2 * root + 1
        if child + 1 <= end and values[child] < values[child + 1]:
            child += 1
        if values[root] < values[child]:
            values.swap(root, child)
            await on_step(root, child)
            root = child
        else:
            await on_step(root, child)
            return


async def heap_sort(values: SequenceView, on_step: StepCallback) -> None:
    n = len(values)
    for start in range(n // 2 - 1, -1, -1):
        await _sift_down(values, start, n - 1, on_step)
    for end in range(n - 1, 0, -1):
        values.swap(0, end)
        await on_step(0, end)
        await _sift_down(values, 0, end - 1, on_step)
