"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • data_size_selector   – how many values to generate
  • algorithm_selector   – registry dropdown with complexity hints
  • run_controls         – start / reset buttons + speed preset
  • timing_display       – elapsed time of the last finished run
  • analytics_panel      – steps, elapsed time, outcome of the last run
  • pseudocode_viewer    – static pseudocode of the selected algorithm

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together; ``/api/state`` carries the
    enabled flags so the page can toggle ``disabled`` between renders.
"""

from typing import List, Optional

from algorithms import AlgoInfo
from config import DEFAULT_DATA_SIZE, SPEED_PRESETS
from engine.metrics import ZERO_TIME, RunMetrics


def _disabled(enabled: bool) -> str:
    return "" if enabled else "disabled"


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


# ---------------------------------------------------------------------------
# Data Size Selector
# ---------------------------------------------------------------------------
def data_size_selector(
    sizes: List[int],
    selected: int = DEFAULT_DATA_SIZE,
    enabled: bool = True,
) -> str:
    options = []
    for size in sizes:
        sel = 'selected' if size == selected else ''
        options.append(f'<option value="{size}" {sel}>{size} values</option>')

    return f"""
    <div class="panel data-size-selector">
      <h3>📊 Data Size</h3>
      <select id="data-size-selector" {_disabled(enabled)}>
        {''.join(options)}
      </select>
      <button id="btn-generate" class="btn-secondary" {_disabled(enabled)}>New Data</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(
    algorithms: List[AlgoInfo],
    selected_key: str = "bubble",
    enabled: bool = True,
) -> str:
    options = []
    selected: Optional[AlgoInfo] = None
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        if algo.key == selected_key:
            selected = algo
        options.append(
            f'<option value="{algo.key}" {sel}>{algo.label} — {algo.complexity_time}</option>'
        )

    hint = ""
    if selected is not None:
        stability = "stable" if selected.stable else "not stable"
        hint = (
            f'<p class="hint">{_escape(selected.description)} '
            f'Space {selected.complexity_space}, {stability}.</p>'
        )

    return f"""
    <div class="panel algorithm-selector">
      <h3>🧠 Algorithm</h3>
      <select id="algo-selector" {_disabled(enabled)}>
        {''.join(options)}
      </select>
      {hint}
    </div>
    """


# ---------------------------------------------------------------------------
# Run Controls
# ---------------------------------------------------------------------------
def run_controls(start_enabled: bool = True, speed: str = "medium") -> str:
    speed_options = []
    for name, delay in SPEED_PRESETS.items():
        sel = 'selected' if name == speed else ''
        speed_options.append(f'<option value="{name}" {sel}>{name.capitalize()} ({delay} ms)</option>')

    return f"""
    <div class="panel run-controls">
      <h3>⏯ Run</h3>
      <div class="button-row">
        <button id="btn-start" class="btn-primary" {_disabled(start_enabled)}>▶ Start</button>
        <button id="btn-reset" class="btn-secondary">↺ Reset</button>
      </div>
      <div class="speed-control">
        <label>Speed:</label>
        <select id="speed-selector">
          {''.join(speed_options)}
        </select>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Timing Display
# ---------------------------------------------------------------------------
def timing_display(sort_time: str = ZERO_TIME) -> str:
    return f"""
    <div class="step-info">
      Time: <span id="sort-time">{_escape(sort_time)}</span>
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>📈 Analytics</h3>
          <p class="placeholder">Start a run to see metrics.</p>
        </div>
        """

    outcome = "✅ Sorted" if metrics.outcome == "finished" else "❌ Aborted"

    return f"""
    <div class="panel analytics-panel">
      <h3>📈 Analytics — {metrics.algo_label}</h3>
      <table>
        <tr><td>Values:</td><td><strong>{metrics.data_size}</strong></td></tr>
        <tr><td>Steps:</td><td><strong>{metrics.total_steps}</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.elapsed_text}</strong></td></tr>
        <tr><td>Result:</td><td><strong>{outcome}</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str]) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div style="color: #7d8590; padding: 20px; text-align: center;">
            Select an algorithm to view pseudocode
          </div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        lines_html.append(f'<div class="code-line" data-line="{i}">{_escape(line)}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """
