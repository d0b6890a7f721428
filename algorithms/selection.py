"""
selection.py — Selection Sort
===============================
Scans the unsorted tail for its minimum, highlighting (current minimum,
candidate) at every comparison, then swaps the minimum into place.
"""

from typing import List

from algorithms.adapter import StepCallback
from chart.sequence import SequenceView


PSEUDOCODE: List[str] = [
    "def selection_sort(a):",
    "    for i in 0 .. n-2:",
    "        m ← i",
    "        for j in i+1 .. n-1:",
    "            if a[j] < a[m]: m ← j",
    "        swap(a[i], a[m])",
]


async def selection_sort(values: SequenceView, on_step: StepCallback) -> None:
    n = len(values)
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            if values[j] < values[smallest]:
                smallest = j
            await on_step(smallest, j)
        if smallest != i:
            values.swap(i, smallest)
            await on_step(i, smallest)
