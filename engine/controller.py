"""
controller.py — Run State Machine
===================================
The RunController is the ONLY object the UI interacts with during a run.
It owns the sequence, the run state and the control panel, and hands the
actual stepping to a StepSequencer and the drawing to a FrameRenderer.

State machine:
    IDLE      →  start()              →  RUNNING
    FINISHED  →  start()              →  FINISHED  (ignored, logged; reset first)
    RUNNING   →  start()              →  RUNNING   (ignored, logged)
    RUNNING   →  (algorithm returns)  →  FINISHED
    RUNNING   →  (algorithm raises)   →  IDLE
    any       →  reset()              →  IDLE      (in-flight run cancelled)

Controls:
    start      : locks start / data-size / algorithm
    finished   : unlocks data-size / algorithm, start stays locked until reset
    aborted    : unlocks all three, timing display untouched
    reset      : unlocks all three, timing display back to "0.00 s"

Thread safety:
  This class is NOT thread-safe.  Every call must come from the thread
  running the event loop; the web host marshals requests onto it.
"""

import asyncio
import logging
import time
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional

from algorithms import DEFAULT_ALGORITHM, AlgoInfo, get_algorithm
from chart.sequence import prepare_sequence
from engine.errors import ControlsLocked, RunAborted, RunCancelled, UnknownAlgorithm
from engine.metrics import ZERO_TIME, RunMetrics, format_elapsed
from engine.sequencer import StepSequencer
from ui.renderer import FrameRenderer


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class RunState(Enum):
    IDLE     = "idle"
    RUNNING  = "running"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Controls — enabled flags + the elapsed-time text sink
# ---------------------------------------------------------------------------
@dataclass
class ControlPanel:
    start_enabled:      bool = True
    data_size_enabled:  bool = True
    algorithm_enabled:  bool = True
    sort_time:          str  = ZERO_TIME

    def lock(self) -> None:
        self.start_enabled     = False
        self.data_size_enabled = False
        self.algorithm_enabled = False

    def unlock_selection(self) -> None:
        self.data_size_enabled = True
        self.algorithm_enabled = True

    def unlock_all(self) -> None:
        self.start_enabled = True
        self.unlock_selection()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# RunController
# ---------------------------------------------------------------------------
class RunController:
    """
    Attributes:
        state      : Current RunState.
        sequence   : Prepared values (sentinel included) the chart shows.
        algorithm  : AlgoInfo that the next start() will run.
        controls   : ControlPanel mirrored by the UI.
        metrics    : RunMetrics of the most recent finished / aborted run.
    """

    def __init__(
        self,
        renderer: FrameRenderer,
        sequencer: Optional[StepSequencer] = None,
        controls: Optional[ControlPanel] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.renderer:  FrameRenderer  = renderer
        self.sequencer: StepSequencer  = sequencer or StepSequencer()
        self.controls:  ControlPanel   = controls or ControlPanel()
        self.state:     RunState       = RunState.IDLE
        self.sequence:  List[float]    = []
        self.algorithm: AlgoInfo       = self._resolve(DEFAULT_ALGORITHM)
        self.metrics:   Optional[RunMetrics] = None

        self._clock  = clock
        self._cancel: Optional[asyncio.Event] = None
        self._run_id: int = 0
        self._task:   Optional[asyncio.Task] = None

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def load(self, raw_values: Iterable[Optional[float]], algorithm_key: Optional[str] = None) -> None:
        """Prepare a fresh sequence and draw it.  Refused while a run is in flight."""
        self._ensure_not_running("load new data")
        if algorithm_key is not None:
            self.algorithm = self._resolve(algorithm_key)
        self.sequence = prepare_sequence(raw_values)
        self.state    = RunState.IDLE
        self.renderer.initial(self.sequence)
        logger.info("Loaded %d value(s) for %s", self.data_size, self.algorithm.label)

    def select_algorithm(self, algorithm_key: str) -> AlgoInfo:
        self._ensure_not_running("change algorithm")
        self.algorithm = self._resolve(algorithm_key)
        return self.algorithm

    # ------------------------------------------------------------------
    # Start / Reset
    # ------------------------------------------------------------------
    async def start(self) -> Optional[float]:
        """
        Run the selected algorithm to completion.

        Returns the elapsed seconds, or None when the request was ignored,
        the run was cancelled by reset, or the algorithm failed.
        """
        if self._start_refused():
            return None

        self._run_id += 1
        run_id = self._run_id
        cancel = asyncio.Event()
        self._cancel = cancel

        self.state = RunState.RUNNING
        self.controls.lock()
        started = self._clock()
        logger.info("Run %d started: %s on %d value(s)", run_id, self.algorithm.label, self.data_size)

        try:
            steps = await self.sequencer.run(self.sequence, self.algorithm.fn, self.renderer.update, cancel)
        except RunCancelled:
            logger.info("Run %d cancelled", run_id)
            return None
        except RunAborted as exc:
            logger.exception("Run %d aborted", run_id)
            if run_id == self._run_id:
                self.state = RunState.IDLE
                self.controls.unlock_all()
                # the timing display keeps the previous run's text
                self.metrics = self._metrics(exc.steps, max(0.0, self._clock() - started), "aborted")
            return None

        elapsed = max(0.0, self._clock() - started)
        if run_id != self._run_id:
            return None

        self.state = RunState.FINISHED
        self.controls.unlock_selection()
        self.renderer.finish()
        self.controls.sort_time = format_elapsed(elapsed)
        self.metrics = self._metrics(steps, elapsed, "finished")
        logger.info("Run %d finished in %s (%d steps)", run_id, self.controls.sort_time, steps)
        return elapsed

    def schedule_start(self) -> Optional[asyncio.Task]:
        """Fire start() as a task on the running loop.  Must be called from the loop thread."""
        if self._start_refused():
            return None
        self._task = asyncio.get_running_loop().create_task(self.start())
        return self._task

    def reset(self) -> None:
        """Unblock every control and cancel whatever is still running.  Safe in any state."""
        if self.state is RunState.RUNNING:
            logger.info("Reset during run %d: cancelling", self._run_id)
        if self._cancel is not None:
            self._cancel.set()
        self.controls.unlock_all()
        self.controls.sort_time = ZERO_TIME
        self.state = RunState.IDLE

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def data_size(self) -> int:
        return max(0, len(self.sequence) - 1)

    @property
    def is_running(self) -> bool:
        return self.state is RunState.RUNNING

    def snapshot(self) -> Dict[str, Any]:
        return {
            "state":     self.state.value,
            "algorithm": self.algorithm.key,
            "data_size": self.data_size,
            "sequence":  list(self.sequence),
            "controls":  self.controls.to_dict(),
            "metrics":   self.metrics.to_dict() if self.metrics else None,
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _start_refused(self) -> bool:
        """True (and logged) when start is locked: a run is in flight or the last one finished."""
        if self.state is RunState.RUNNING:
            logger.info("Start ignored: run %d is still in progress", self._run_id)
            return True
        if not self.controls.start_enabled:
            logger.info("Start ignored: start is disabled until reset")
            return True
        return False

    def _ensure_not_running(self, action: str) -> None:
        if self.state is RunState.RUNNING:
            raise ControlsLocked(f"Cannot {action} while a run is in progress")

    @staticmethod
    def _resolve(key: str) -> AlgoInfo:
        info = get_algorithm(key)
        if info is None:
            raise UnknownAlgorithm(key)
        return info

    def _metrics(self, steps: int, elapsed: float, outcome: str) -> RunMetrics:
        return RunMetrics(
            algo_key=self.algorithm.key,
            algo_label=self.algorithm.label,
            data_size=self.data_size,
            total_steps=steps,
            elapsed_s=round(elapsed, 4),
            outcome=outcome,
        )
