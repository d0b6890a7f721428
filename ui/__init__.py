"""
ui/
---
Presentation layer.

    from ui import SvgBarRenderer, FrameRenderer
    from ui import data_size_selector, algorithm_selector, …
"""

from ui.renderer import FrameRenderer, SvgBarRenderer, HoverLabel, Canvas

from ui.controls import (
    data_size_selector,
    algorithm_selector,
    run_controls,
    timing_display,
    analytics_panel,
    pseudocode_viewer,
)

__all__ = [
    "FrameRenderer",
    "SvgBarRenderer",
    "HoverLabel",
    "Canvas",
    "data_size_selector",
    "algorithm_selector",
    "run_controls",
    "timing_display",
    "analytics_panel",
    "pseudocode_viewer",
]
