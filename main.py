"""
main.py — Sorting Algorithm Visualizer Flask App
==================================================
The web server that powers the visualizer.

Routes:
  GET  /               – main UI
  POST /api/data       – generate new random data (and optionally pick an algorithm)
  POST /api/algo       – select the algorithm for the next run
  POST /api/start      – start a run (ignored while one is running)
  POST /api/reset      – unblock the controls, cancel the running run
  POST /api/speed      – change the pacing preset
  POST /api/hover      – show the value label of one bar
  POST /api/leave      – hide it again
  GET  /api/state      – chart SVG + run state + control flags (polled by the page)

State management:
  One Visualization per process.  Its RunController, StepSequencer and
  SvgBarRenderer live on a single asyncio event loop running on a daemon
  thread (LoopHost).  Request handlers never touch them directly: every
  read and write is marshalled onto that loop, so the animation and the
  requests interleave cooperatively and never race.

Configuration:
  Defaults come from config.py; any key can be overridden with a
  SORTVIZ_-prefixed environment variable, e.g. SORTVIZ_DELAY_MS=5.
"""

import logging
import threading
from typing import Any, Dict, Optional

from flask import Flask, jsonify, render_template_string, request

from algorithms import DEFAULT_ALGORITHM, get_algorithm, list_algorithms
from chart.sequence import generate_values
from config import DATA_SIZES, DEFAULT_DATA_SIZE, DELAY_MS, MAX_VALUE, SPEED_PRESETS
from engine import ControlsLocked, LoopHost, RunController, StepSequencer, UnknownAlgorithm
from logging_config import setup_logging
from ui import (
    SvgBarRenderer,
    data_size_selector,
    algorithm_selector,
    run_controls,
    timing_display,
    analytics_panel,
    pseudocode_viewer,
)


logger = logging.getLogger(__name__)

MAX_DATA_SIZE = 1000


# ---------------------------------------------------------------------------
# Visualization — one chart, one controller, one event loop
# ---------------------------------------------------------------------------
class Visualization:
    def __init__(self, delay_ms: float = DELAY_MS):
        self.host       = LoopHost()
        self.renderer   = SvgBarRenderer()
        self.sequencer  = StepSequencer(delay_ms)
        self.controller = RunController(self.renderer, self.sequencer)
        self.data_size  = DEFAULT_DATA_SIZE
        self.speed      = "medium"

    def open(self, size: int = DEFAULT_DATA_SIZE, seed: Optional[int] = None) -> None:
        self.host.start()
        self.host.call(self._load, size, None, seed)

    def close(self) -> None:
        if self.host.running:
            self.host.call(self.controller.reset)
        self.host.stop()

    # -- requests (any thread) --
    def load(self, size: int, algo_key: Optional[str] = None, seed: Optional[int] = None) -> None:
        self.host.call(self._load, size, algo_key, seed)

    def select_algorithm(self, algo_key: str) -> None:
        self.host.call(self.controller.select_algorithm, algo_key)

    def start(self) -> bool:
        return self.host.call(self._start)

    def reset(self) -> None:
        self.host.call(self.controller.reset)

    def set_speed(self, preset: str) -> None:
        self.host.call(self._set_speed, preset)

    def hover(self, index: int) -> Optional[str]:
        return self.host.call(self._hover, index)

    def leave(self, index: int) -> None:
        self.host.call(self.renderer.leave, index)

    def state(self) -> Dict[str, Any]:
        return self.host.call(self._state)

    # -- loop thread --
    def _load(self, size: int, algo_key: Optional[str], seed: Optional[int]) -> None:
        self.controller.load(generate_values(size, MAX_VALUE, seed), algo_key)
        self.data_size = size

    def _start(self) -> bool:
        return self.controller.schedule_start() is not None

    def _set_speed(self, preset: str) -> None:
        self.sequencer.set_speed(preset)
        self.speed = preset

    def _hover(self, index: int) -> Optional[str]:
        label = self.renderer.hover(index)
        return label.text if label else None

    def _state(self) -> Dict[str, Any]:
        snap = self.controller.snapshot()
        snap["svg"]       = self.renderer.to_svg()
        snap["speed"]     = self.speed
        snap["analytics"] = analytics_panel(self.controller.metrics)
        return snap


# ---------------------------------------------------------------------------
# App & configuration
# ---------------------------------------------------------------------------
app = Flask(__name__)
app.config.from_mapping(
    DELAY_MS=DELAY_MS,
    DATA_SIZE=DEFAULT_DATA_SIZE,
    SEED=None,
    LOG_LEVEL="INFO",
    LOG_FILE=None,
)
app.config.from_prefixed_env("SORTVIZ")

_viz_lock = threading.Lock()


def get_viz() -> Visualization:
    """Return the process-wide Visualization, creating it on first use."""
    with _viz_lock:
        viz = app.extensions.get("visualization")
        if viz is None:
            viz = Visualization(delay_ms=float(app.config["DELAY_MS"]))
            viz.open(size=int(app.config["DATA_SIZE"]), seed=app.config["SEED"])
            app.extensions["visualization"] = viz
        return viz


def close_viz() -> None:
    with _viz_lock:
        viz = app.extensions.pop("visualization", None)
    if viz is not None:
        viz.close()


def _json_body() -> Dict[str, Any]:
    return request.get_json(silent=True) or {}


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    viz   = get_viz()
    state = viz.state()
    controls = state["controls"]

    algo_info = get_algorithm(state["algorithm"])

    html = render_template_string(INDEX_TEMPLATE,
        svg=state["svg"],
        data_size=data_size_selector(
            sizes=DATA_SIZES,
            selected=viz.data_size,
            enabled=controls["data_size_enabled"],
        ),
        algo_selector=algorithm_selector(
            algorithms=list_algorithms(),
            selected_key=state["algorithm"],
            enabled=controls["algorithm_enabled"],
        ),
        run=run_controls(start_enabled=controls["start_enabled"], speed=state["speed"]),
        timing=timing_display(controls["sort_time"]),
        analytics=state["analytics"],
        pseudocode=pseudocode_viewer(algo_info.pseudocode if algo_info else []),
        algo_label=algo_info.label if algo_info else "",
    )
    return html


# ---------------------------------------------------------------------------
# API: Data & Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/data", methods=["POST"])
def api_data():
    data = _json_body()
    try:
        size = int(data.get("size", DEFAULT_DATA_SIZE))
    except (TypeError, ValueError):
        return jsonify({"error": "size must be an integer"}), 400
    if not 0 <= size <= MAX_DATA_SIZE:
        return jsonify({"error": f"size must be between 0 and {MAX_DATA_SIZE}"}), 400

    seed = data.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        return jsonify({"error": "seed must be an integer"}), 400

    try:
        get_viz().load(size, data.get("algo"), seed)
    except UnknownAlgorithm as e:
        return jsonify({"error": str(e)}), 400
    except ControlsLocked as e:
        return jsonify({"error": str(e)}), 409

    return jsonify(get_viz().state())


@app.route("/api/algo", methods=["POST"])
def api_algo():
    algo_key = _json_body().get("algo", DEFAULT_ALGORITHM)
    try:
        get_viz().select_algorithm(algo_key)
    except UnknownAlgorithm as e:
        return jsonify({"error": str(e)}), 400
    except ControlsLocked as e:
        return jsonify({"error": str(e)}), 409

    algo_info = get_algorithm(algo_key)
    return jsonify({
        "algorithm":  algo_key,
        "label":      algo_info.label,
        "pseudocode": pseudocode_viewer(algo_info.pseudocode),
    })


# ---------------------------------------------------------------------------
# API: Run control
# ---------------------------------------------------------------------------
@app.route("/api/start", methods=["POST"])
def api_start():
    started = get_viz().start()
    return jsonify({"started": started})


@app.route("/api/reset", methods=["POST"])
def api_reset():
    viz = get_viz()
    viz.reset()
    return jsonify(viz.state())


@app.route("/api/speed", methods=["POST"])
def api_speed():
    speed = _json_body().get("speed", "medium")
    if speed not in SPEED_PRESETS:
        return jsonify({"error": f"Unknown speed: {speed}"}), 400
    get_viz().set_speed(speed)
    return jsonify({"speed": speed})


# ---------------------------------------------------------------------------
# API: Hover affordance
# ---------------------------------------------------------------------------
@app.route("/api/hover", methods=["POST"])
def api_hover():
    try:
        index = int(_json_body().get("index", -1))
    except (TypeError, ValueError):
        return jsonify({"error": "index must be an integer"}), 400
    return jsonify({"index": index, "label": get_viz().hover(index)})


@app.route("/api/leave", methods=["POST"])
def api_leave():
    try:
        index = int(_json_body().get("index", -1))
    except (TypeError, ValueError):
        return jsonify({"error": "index must be an integer"}), 400
    get_viz().leave(index)
    return jsonify({"index": index})


# ---------------------------------------------------------------------------
# API: State (polled)
# ---------------------------------------------------------------------------
@app.route("/api/state")
def api_state():
    return jsonify(get_viz().state())


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting Algorithm Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-teal: #06b6d4;
      --accent-emerald: #10b981;
    }

    body {
      font-family: -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 320px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main { flex: 1; display: flex; flex-direction: column; }

    .visualization {
      flex: 1;
      display: flex;
      align-items: center;
      justify-content: center;
      border-bottom: 1px solid var(--border);
    }

    #bottom-panel { padding: 20px; background: var(--bg-dark); max-height: 280px; overflow: auto; }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }

    .panel h3 {
      font-size: 13px;
      font-weight: 700;
      margin-bottom: 14px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
    }

    .button-row { display: flex; gap: 8px; margin-bottom: 12px; }

    button {
      background: linear-gradient(135deg, var(--accent-cyan), var(--accent-teal));
      color: #fff;
      border: none;
      padding: 10px 16px;
      border-radius: 8px;
      cursor: pointer;
      font-size: 13px;
      font-weight: 600;
    }

    button:disabled, select:disabled { opacity: 0.4; cursor: not-allowed; }

    .btn-primary { background: linear-gradient(135deg, var(--accent-emerald), #059669); }
    .btn-secondary { background: var(--bg-panel); border: 1px solid var(--border); }

    select {
      width: 100%;
      padding: 10px 12px;
      margin: 6px 0;
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      color: var(--text-primary);
    }

    label { display: block; margin: 10px 0 4px; font-size: 12px; color: var(--text-secondary); }

    .step-info {
      font-size: 13px;
      margin: 10px 0;
      font-family: monospace;
      padding: 8px 12px;
      background: var(--bg-darker);
      border-radius: 6px;
      border-left: 3px solid var(--accent-cyan);
    }

    .code-block { font-family: monospace; font-size: 13px; line-height: 1.6; }
    .code-line { padding: 2px 12px; white-space: pre; }

    table { width: 100%; font-size: 13px; }
    table td:last-child { text-align: right; color: var(--accent-cyan); font-family: monospace; }

    .hint { font-size: 11px; color: var(--text-secondary); margin-top: 8px; font-style: italic; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="data-size">{{ data_size|safe }}</div>
    <div id="algo">{{ algo_selector|safe }}</div>
    <div id="run">{{ run|safe }}</div>
    <div id="timing">{{ timing|safe }}</div>
    <div id="analytics">{{ analytics|safe }}</div>
  </div>

  <div id="main">
    <div class="visualization">{{ svg|safe }}</div>
    <div id="bottom-panel">
      <h3 id="algo-label">{{ algo_label }}</h3>
      <div id="pseudocode">{{ pseudocode|safe }}</div>
    </div>
  </div>

  <script>
    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    const chart = document.querySelector('.visualization');

    function apply(state) {
      if (!state || !state.controls) return;
      chart.innerHTML = state.svg;
      const c = state.controls;
      document.getElementById('btn-start').disabled = !c.start_enabled;
      document.getElementById('data-size-selector').disabled = !c.data_size_enabled;
      document.getElementById('btn-generate').disabled = !c.data_size_enabled;
      document.getElementById('algo-selector').disabled = !c.algorithm_enabled;
      document.getElementById('sort-time').textContent = c.sort_time;
      document.getElementById('analytics').innerHTML = state.analytics;
    }

    async function poll() {
      const res = await fetch('/api/state');
      const state = await res.json();
      apply(state);
      setTimeout(poll, state.state === 'running' ? 30 : 250);
    }

    document.getElementById('btn-start').addEventListener('click', async () => {
      await post('/api/start');
    });

    document.getElementById('btn-reset').addEventListener('click', async () => {
      apply(await post('/api/reset'));
    });

    document.getElementById('btn-generate').addEventListener('click', async () => {
      apply(await post('/api/data', {
        size: +document.getElementById('data-size-selector').value,
        algo: document.getElementById('algo-selector').value,
      }));
    });

    document.getElementById('data-size-selector').addEventListener('change', async (e) => {
      apply(await post('/api/data', {
        size: +e.target.value,
        algo: document.getElementById('algo-selector').value,
      }));
    });

    document.getElementById('algo-selector').addEventListener('change', async (e) => {
      const data = await post('/api/algo', {algo: e.target.value});
      if (data.pseudocode) document.getElementById('pseudocode').innerHTML = data.pseudocode;
      if (data.label) document.getElementById('algo-label').textContent = data.label;
    });

    document.getElementById('speed-selector').addEventListener('change', async (e) => {
      await post('/api/speed', {speed: e.target.value});
    });

    // hover label: delegated, the SVG is replaced on every poll
    chart.addEventListener('mouseover', (e) => {
      if (e.target.classList.contains('bar')) post('/api/hover', {index: +e.target.dataset.index});
    });
    chart.addEventListener('mouseout', (e) => {
      if (e.target.classList.contains('bar')) post('/api/leave', {index: +e.target.dataset.index});
    });

    poll();
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    setup_logging(
        level=getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO),
        log_file=app.config["LOG_FILE"],
    )
    print("=" * 60)
    print("  Sorting Algorithm Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    # the reloader would start a second event loop thread in the parent process
    app.run(debug=True, use_reloader=False, host="0.0.0.0", port=5000)
