"""
config.py — Global Constants
==============================
Central registry for the chart geometry, the pacing delay and the data
size options the UI offers.

Every value here is an *input* to the renderer / sequencer, never
internal state.  The Flask app can override the scalar ones through
``SORTVIZ_*`` environment variables (see ``main.app``).

Exports:
    CHART_WIDTH, CHART_HEIGHT, CHART_MARGIN : canvas geometry (px)
    DELAY_MS        : default pause between two algorithm steps
    SPEED_PRESETS   : named pacing delays (ms)
    DATA_SIZES      : element counts offered by the data-size selector
    MAX_VALUE       : upper bound for generated values
    ChartConfig     : palette + bar layout
"""

from typing import Dict, List


# ---------------------------------------------------------------------------
# Canvas geometry
# ---------------------------------------------------------------------------
CHART_WIDTH:  int = 1000
CHART_HEIGHT: int = 500
CHART_MARGIN: Dict[str, int] = {"top": 20, "right": 20, "bottom": 20, "left": 20}

RENDER_TARGET: str = ".visualization"


# ---------------------------------------------------------------------------
# Pacing (milliseconds between two frames)
# ---------------------------------------------------------------------------
DELAY_MS: int = 30

SPEED_PRESETS: Dict[str, int] = {
    "slow":   250,    # teaching mode
    "medium": DELAY_MS,
    "fast":   10,
    "turbo":  0,      # still yields to the event loop every step
}


# ---------------------------------------------------------------------------
# Data
# ---------------------------------------------------------------------------
DATA_SIZES:        List[int] = [10, 25, 50, 100, 200]
DEFAULT_DATA_SIZE: int       = 50
MAX_VALUE:         int       = 100


# ---------------------------------------------------------------------------
# Visual config — palette and bar layout
# ---------------------------------------------------------------------------
class ChartConfig:
    width:   int = CHART_WIDTH
    height:  int = CHART_HEIGHT
    margin:  Dict[str, int] = CHART_MARGIN
    bg:      str = "#0d1117"

    # bar state → fill
    bar_colors: Dict[str, str] = {
        "normal":    "#0ea5e9",   # cyan blue
        "highlight": "#f43f5e",   # rose — pair being compared / swapped
        "done":      "#e6edf3",   # neutral once the run finished
    }

    bar_gap:          float = 0.95   # px between two bars
    headroom:         int   = 10     # value units above the tallest bar
    hover_opacity:    float = 0.85

    label_color:      str = "#f59e0b"
    label_size:       int = 14
    label_offset:     int = 5


CONFIG = ChartConfig()
