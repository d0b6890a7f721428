from enum import Enum
from typing import Any, Dict


# ---------------------------------------------------------------------------
# Bar State Enum — maps 1-to-1 with the palette in ChartConfig.bar_colors
# ---------------------------------------------------------------------------
class BarState(Enum):
    NORMAL    = "normal"      # default
    HIGHLIGHT = "highlight"   # part of the pair being compared / swapped
    DONE      = "done"        # the run finished


# ---------------------------------------------------------------------------
# Bar
# ---------------------------------------------------------------------------
class Bar:
    """
    One rendered bar, keyed by its index position (not by value).

    Attributes:
        index    : Position in the current sequence.
        value    : Value the geometry was last computed from.
        x, y     : Top-left corner in canvas pixels.
        width    : Bar width in pixels.
        height   : Bar height in pixels.
        state    : Current BarState for colouring.
        opacity  : 1.0 normally, lowered while hovered.
    """

    __slots__ = ("index", "value", "x", "y", "width", "height", "state", "opacity")

    def __init__(self, index: int, x: float = 0.0, width: float = 0.0):
        self.index:   int      = index
        self.value:   float    = 0.0
        self.x:       float    = x
        self.y:       float    = 0.0
        self.width:   float    = width
        self.height:  float    = 0.0
        self.state:   BarState = BarState.NORMAL
        self.opacity: float    = 1.0

    def place(self, value: float, y: float, height: float) -> None:
        self.value  = value
        self.y      = y
        self.height = height

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index":   self.index,
            "value":   self.value,
            "x":       self.x,
            "y":       self.y,
            "width":   self.width,
            "height":  self.height,
            "state":   self.state.value,
            "opacity": self.opacity,
        }

    def __repr__(self) -> str:
        return f"Bar(index={self.index}, value={self.value}, state={self.state.value})"
