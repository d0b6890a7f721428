"""
bubble.py — Bubble Sort & Cocktail Shaker Sort
================================================
Both algorithms only ever touch two neighbouring slots, so every step
reports the pair ``(j, j + 1)`` whether or not it swapped.

Bubble sort stops early once a full pass made no swap; cocktail shaker
sort alternates the direction of its passes and shrinks the unsorted
window from both ends.
"""

from typing import List

from algorithms.adapter import StepCallback
from chart.sequence import SequenceView


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def bubble_sort(a):",
    "    for i in 0 .. n-2:",
    "        swapped ← false",
    "        for j in 0 .. n-2-i:",
    "            if a[j] > a[j+1]:",
    "                swap(a[j], a[j+1])",
    "                swapped ← true",
    "        if not swapped: return",
]

COCKTAIL_PSEUDOCODE: List[str] = [
    "def cocktail_sort(a):",
    "    lo, hi ← 0, n-1",
    "    while lo < hi:",
    "        for j in lo .. hi-1:      # forward pass",
    "            if a[j] > a[j+1]: swap(a[j], a[j+1])",
    "        hi ← hi - 1",
    "        for j in hi-1 .. lo:      # backward pass",
    "            if a[j] > a[j+1]: swap(a[j], a[j+1])",
    "        lo ← lo + 1",
]


async def bubble_sort(values: SequenceView, on_step: StepCallback) -> None:
    n = len(values)
    for i in range(n - 1):
        swapped = False
        for j in range(n - 1 - i):
            if values[j] > values[j + 1]:
                values.swap(j, j + 1)
                swapped = True
            await on_step(j, j + 1)
        if not swapped:
            return


async def cocktail_shaker_sort(values: SequenceView, on_step: StepCallback) -> None:
    lo, hi = 0, len(values) - 1
    while lo < hi:
        swapped = False
        for j in range(lo, hi):
            if values[j] > values[j + 1]:
                values.swap(j, j + 1)
                swapped = True
            await on_step(j, j + 1)
        hi -= 1
        if not swapped:
            return

        swapped = False
        for j in range(hi - 1, lo - 1, -1):
            if values[j] > values[j + 1]:
                values.swap(j, j + 1)
                swapped = True
            await on_step(j, j + 1)
        lo += 1
        if not swapped:
            return
