"""
sequencer.py — Paced Step Driver
==================================
The StepSequencer turns an async sort function into an animation.

    run(sequence, algorithm, on_frame, cancel)
        │
        ├── algorithm mutates the sequence in place
        ├── algorithm awaits on_step(i, j)
        │       ├── cancel set?  → RunCancelled
        │       ├── on_frame(Frame(values, {i, j}))
        │       ├── await asyncio.sleep(delay)      ← the only suspension point
        │       └── cancel set?  → RunCancelled
        └── algorithm returns → one final un-highlighted frame → step count

Frames are handed over strictly in the order the algorithm produces
them; nothing is buffered, skipped or reordered.

Concurrency:
  Everything runs on one asyncio event loop.  ``asyncio.sleep`` hands
  control back to the loop so input handling (start / reset requests)
  interleaves with the animation.  A delay of 0 still yields.
"""

import asyncio
import logging
from typing import Callable, List, Optional

from algorithms.adapter import SortFunction
from chart.sequence import Frame, SequenceView
from config import DELAY_MS, SPEED_PRESETS
from engine.errors import RunAborted, RunCancelled


logger = logging.getLogger(__name__)

FrameSink = Callable[[Frame], None]


class StepSequencer:
    """
    Attributes:
        delay_ms : Pause after every frame, in milliseconds.
        sentinel : True when the last element of the sequence is the
                   headroom sentinel and must be hidden from the algorithm.
    """

    def __init__(self, delay_ms: float = DELAY_MS, sentinel: bool = True):
        self.delay_ms: float = max(0.0, delay_ms)
        self.sentinel: bool  = sentinel

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        self.delay_ms = SPEED_PRESETS.get(preset, DELAY_MS)

    def set_delay_ms(self, delay_ms: float) -> None:
        self.delay_ms = max(0.0, delay_ms)

    @property
    def delay(self) -> float:
        """Pacing delay in seconds."""
        return self.delay_ms / 1000.0

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    async def run(
        self,
        sequence: List[float],
        algorithm: SortFunction,
        on_frame: FrameSink,
        cancel: Optional[asyncio.Event] = None,
    ) -> int:
        """
        Drive ``algorithm`` over ``sequence`` until it returns.

        Returns:
            Number of steps the algorithm reported.

        Raises:
            RunCancelled : ``cancel`` was set at a suspension point.
            RunAborted   : the algorithm (or the frame sink) raised.
        """
        real  = len(sequence) - 1 if self.sentinel and sequence else len(sequence)
        view  = SequenceView(sequence, real)
        steps = 0

        async def on_step(*indices: int) -> None:
            nonlocal steps
            _check(cancel)
            on_frame(Frame(tuple(sequence), frozenset(indices), steps))
            steps += 1
            logger.debug("step %d highlight=%s", steps, indices)
            await asyncio.sleep(self.delay)
            _check(cancel)

        if real >= 2:
            try:
                await algorithm(view, on_step)
            except RunCancelled:
                raise
            except Exception as exc:
                raise RunAborted(f"algorithm failed after {steps} step(s): {exc}", steps) from exc

        _check(cancel)
        on_frame(Frame(tuple(sequence), frozenset(), steps, is_final=True))
        return steps


def _check(cancel: Optional[asyncio.Event]) -> None:
    if cancel is not None and cancel.is_set():
        raise RunCancelled("run cancelled by reset")
