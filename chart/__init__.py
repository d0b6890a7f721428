"""
chart/
------
Core data layer.  Public API:

    from chart import prepare_sequence, SequenceView, Frame
    from chart import Bar, BarState, LinearScale
"""

from chart.bar      import Bar, BarState
from chart.scale    import LinearScale
from chart.sequence import (
    Frame,
    SequenceView,
    filter_values,
    generate_values,
    prepare_sequence,
    sentinel_for,
)

__all__ = [
    "Bar",           "BarState",
    "LinearScale",
    "Frame",         "SequenceView",
    "filter_values", "generate_values",
    "prepare_sequence", "sentinel_for",
]
