"""
engine/
-------
Animation & run-control layer.

    from engine import RunController, StepSequencer, LoopHost
"""

from engine.errors     import VisualizerError, RunAborted, RunCancelled, ControlsLocked, UnknownAlgorithm
from engine.metrics    import RunMetrics, format_elapsed, ZERO_TIME
from engine.sequencer  import StepSequencer
from engine.controller import RunController, RunState, ControlPanel
from engine.host       import LoopHost

__all__ = [
    "VisualizerError",
    "RunAborted",
    "RunCancelled",
    "ControlsLocked",
    "UnknownAlgorithm",
    "RunMetrics",
    "format_elapsed",
    "ZERO_TIME",
    "StepSequencer",
    "RunController",
    "RunState",
    "ControlPanel",
    "LoopHost",
]
