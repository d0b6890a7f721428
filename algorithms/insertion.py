"""
insertion.py — Insertion Sort & Shell Sort
============================================
Insertion sort sinks each new element leftwards one swap at a time.
Shell sort is the same idea over shrinking gaps (n/2, n/4, …, 1), which
moves far-away elements early and leaves little work for the final
gap-1 pass.

Every comparison is a step, including the one that stops the sink, so
the chart never jumps over an inspected pair.
"""

from typing import List

from algorithms.adapter import StepCallback
from chart.sequence import SequenceView


PSEUDOCODE: List[str] = [
    "def insertion_sort(a):",
    "    for i in 1 .. n-1:",
    "        j ← i",
    "        while j > 0 and a[j-1] > a[j]:",
    "            swap(a[j-1], a[j])",
    "            j ← j - 1",
]

SHELL_PSEUDOCODE: List[str] = [
    "def shell_sort(a):",
    "    gap ← n / 2",
    "    while gap > 0:",
    "        for i in gap .. n-1:",
    "            j ← i",
    "            while j ≥ gap and a[j-gap] > a[j]:",
    "                swap(a[j-gap], a[j])",
    "                j ← j - gap",
    "        gap ← gap / 2",
]


async def _gapped_insertion(values: SequenceView, gap: int, on_step: StepCallback) -> None:
    for i in range(gap, len(values)):
        j = i
        while j >= gap:
            if values[j - gap] <= values[j]:
                await on_step(j - gap, j)
                break
            values.swap(j - gap, j)
            await on_step(j - gap, j)
            j -= gap


async def insertion_sort(values: SequenceView, on_step: StepCallback) -> None:
    await _gapped_insertion(values, 1, on_step)


async def shell_sort(values: SequenceView, on_step: StepCallback) -> None:
    gap = len(values) // 2
    while gap > 0:
        await _gapped_insertion(values, gap, on_step)
        gap //= 2
