"""
renderer.py — Bar Chart Renderer
==================================
``FrameRenderer`` is the small capability the engine draws through:

    initial(sequence)   – fresh canvas, one bar per element
    update(frame)       – reconcile the bars with a new Frame
    finish()            – every bar in the neutral "done" colour

``SvgBarRenderer`` is the backend the web UI uses.  It keeps a retained
list of ``Bar`` objects (one per index) and serialises them to an SVG
string on demand.

Reconciliation (``update``), per index:
  • existing bar     → new y / height from the value, highlight colour if
                       the index is in the frame's highlight set
  • index beyond the
    current count     → bar removed
  • new index         → bar created at height 0, then placed; the zero
                       start lets a client animate the enter transition

Geometry:
  barWidth = chartWidth / count − 1
  x(i)     = i · (barWidth + gap)
  y(v)     = scale(v)                 scale: [0, max + headroom] → [height, 0]
  h(v)     = chartHeight − scale(v)

Hover is a pure display affordance: it adds a transient label and lowers
the bar's opacity, it never touches the values.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from chart.bar import Bar, BarState
from chart.scale import LinearScale
from chart.sequence import Frame
from config import CONFIG, RENDER_TARGET, ChartConfig


# ---------------------------------------------------------------------------
# Capability
# ---------------------------------------------------------------------------
class FrameRenderer(ABC):
    @abstractmethod
    def initial(self, sequence: Sequence[float]) -> None:
        ...

    @abstractmethod
    def update(self, frame: Frame) -> None:
        ...

    @abstractmethod
    def finish(self) -> None:
        ...


# ---------------------------------------------------------------------------
# Canvas & hover label
# ---------------------------------------------------------------------------
@dataclass
class Canvas:
    width:      int
    height:     int
    margin:     Dict[str, int]
    generation: int                # bumps on every initial(); clients use it to drop stale DOM


@dataclass
class HoverLabel:
    index: int
    text:  str
    x:     float
    y:     float


def _format_value(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


# ---------------------------------------------------------------------------
# SVG backend
# ---------------------------------------------------------------------------
class SvgBarRenderer(FrameRenderer):
    """
    Attributes:
        target    : Selector of the container the SVG is injected into.
        canvas    : Current Canvas, or None before the first initial().
        bars      : One Bar per sequence index, left to right.
        label     : Transient hover label, if a bar is hovered.
        bar_width : Width shared by every bar of the current canvas.
    """

    def __init__(self, config: ChartConfig = CONFIG, target: str = RENDER_TARGET):
        self.config:    ChartConfig           = config
        self.target:    str                   = target
        self.canvas:    Optional[Canvas]      = None
        self.bars:      List[Bar]             = []
        self.label:     Optional[HoverLabel]  = None
        self.bar_width: float                 = 0.0
        self.scale:     LinearScale           = LinearScale((0, config.headroom), (config.height, 0))
        self._generation = 0

    # ------------------------------------------------------------------
    # FrameRenderer
    # ------------------------------------------------------------------
    def initial(self, sequence: Sequence[float]) -> None:
        self.clear()
        cfg = self.config
        self._generation += 1
        self.canvas = Canvas(cfg.width, cfg.height, dict(cfg.margin), self._generation)

        max_value  = max(sequence, default=0)
        self.scale = LinearScale((0, max_value + cfg.headroom), (cfg.height, 0))

        self.bar_width = self._width_for(len(sequence))

        for i, value in enumerate(sequence):
            self._place(self._create_bar(i), value)

    def update(self, frame: Frame) -> None:
        if self.canvas is None:
            self.initial(frame.values)

        values = frame.values
        if len(values) != len(self.bars):
            self.bar_width = self._width_for(len(values))
            for bar in self.bars:
                bar.width = self.bar_width
        # exit
        del self.bars[len(values):]
        if self.label is not None and self.label.index >= len(values):
            self.label = None

        for i, value in enumerate(values):
            bar = self.bars[i] if i < len(self.bars) else self._create_bar(i)
            bar.state = BarState.HIGHLIGHT if i in frame.highlighted else BarState.NORMAL
            self._place(bar, value)

    def finish(self) -> None:
        for bar in self.bars:
            bar.state = BarState.DONE

    def clear(self) -> None:
        """Drop the canvas, every bar and any hover label."""
        self.canvas = None
        self.bars   = []
        self.label  = None

    # ------------------------------------------------------------------
    # Hover
    # ------------------------------------------------------------------
    def hover(self, index: int) -> Optional[HoverLabel]:
        if not 0 <= index < len(self.bars):
            return None
        if self.label is not None:
            self.leave(self.label.index)
        bar = self.bars[index]
        bar.opacity = self.config.hover_opacity
        self.label = HoverLabel(
            index=index,
            text=_format_value(bar.value),
            x=bar.x + bar.width / 2,
            y=self.scale(bar.value) - self.config.label_offset,
        )
        return self.label

    def leave(self, index: int) -> None:
        if 0 <= index < len(self.bars):
            self.bars[index].opacity = 1.0
        if self.label is not None and self.label.index == index:
            self.label = None

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def values(self) -> List[float]:
        return [bar.value for bar in self.bars]

    def color_of(self, bar: Bar) -> str:
        return self.config.bar_colors[bar.state.value]

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_svg(self) -> str:
        cfg = self.config
        if self.canvas is None:
            return (
                f'<svg class="chart empty" width="{cfg.width}" height="{cfg.height}" '
                f'xmlns="http://www.w3.org/2000/svg"></svg>'
            )

        c = self.canvas
        full_w = c.width + c.margin.get("left", 0) + c.margin.get("right", 0)
        full_h = c.height + c.margin.get("top", 0) + c.margin.get("bottom", 0)
        parts = [
            f'<svg class="chart" data-generation="{c.generation}" width="{full_w}" height="{full_h}" '
            f'viewBox="0 0 {full_w} {full_h}" xmlns="http://www.w3.org/2000/svg">',
            f'<rect width="{full_w}" height="{full_h}" fill="{cfg.bg}"/>',
            f'<g transform="translate({c.margin.get("left", 0)},{c.margin.get("top", 0)})">',
        ]
        for bar in self.bars:
            parts.append(self._render_bar(bar))
        if self.label is not None:
            parts.append(
                f'<text class="hover-label" x="{self.label.x:.2f}" y="{self.label.y:.2f}" '
                f'font-size="{cfg.label_size}px" fill="{cfg.label_color}" '
                f'text-anchor="middle">{self.label.text}</text>'
            )
        parts.append("</g>")
        parts.append("</svg>")
        return "\n".join(parts)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _width_for(self, count: int) -> float:
        return max(self.config.width / count - 1, 0.0) if count else 0.0

    def _x(self, index: int) -> float:
        return index * (self.bar_width + self.config.bar_gap)

    def _create_bar(self, index: int) -> Bar:
        bar = Bar(index, x=self._x(index), width=self.bar_width)
        bar.place(0, self.config.height, 0.0)
        self.bars.append(bar)
        return bar

    def _place(self, bar: Bar, value: float) -> None:
        y = self.scale(value)
        bar.x = self._x(bar.index)
        bar.place(value, y, max(0.0, self.config.height - y))

    def _render_bar(self, bar: Bar) -> str:
        opacity = f' opacity="{bar.opacity}"' if bar.opacity != 1.0 else ""
        return (
            f'<rect class="bar {bar.state.value}" data-index="{bar.index}" '
            f'data-value="{_format_value(bar.value)}" '
            f'x="{bar.x:.2f}" y="{bar.y:.2f}" width="{bar.width:.2f}" height="{bar.height:.2f}" '
            f'fill="{self.color_of(bar)}"{opacity}/>'
        )
