"""
metrics.py — Run Analytics
============================
What the Analytics panel renders after a run.  Nothing here is stored
beyond the most recent run.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict


ZERO_TIME: str = "0.00 s"


def format_elapsed(seconds: float) -> str:
    """Seconds → ``"1.23 s"`` (always two decimals, never negative)."""
    return f"{max(0.0, seconds):.2f} s"


@dataclass
class RunMetrics:
    algo_key:     str   = ""
    algo_label:   str   = ""
    data_size:    int   = 0        # real elements, sentinel excluded
    total_steps:  int   = 0        # on_step callbacks the algorithm made
    elapsed_s:    float = 0.0
    outcome:      str   = ""       # "finished" | "aborted"

    @property
    def elapsed_text(self) -> str:
        return format_elapsed(self.elapsed_s)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["elapsed_text"] = self.elapsed_text
        return data
