"""
errors.py — Engine Exceptions
===============================

    VisualizerError
    ├── RunAborted        the algorithm raised mid-run (original error in __cause__)
    ├── RunCancelled      reset was pressed; the run stopped at a suspension point
    ├── ControlsLocked    data / algorithm change requested while a run is in flight
    └── UnknownAlgorithm  no registry entry for the requested key
"""


class VisualizerError(Exception):
    """Base class for everything the engine raises on purpose."""


class RunAborted(VisualizerError):
    def __init__(self, message: str, steps: int = 0):
        super().__init__(message)
        self.steps = steps  # on_step callbacks made before the failure


class RunCancelled(VisualizerError):
    pass


class ControlsLocked(VisualizerError):
    pass


class UnknownAlgorithm(VisualizerError, KeyError):
    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Unknown algorithm: {self.key}"
