"""
main.py — Sorting Algorithm Visualizer Flask App
==================================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/state              – current array, algorithm, step and progress
  GET  /api/algorithms         – registry listing
  POST /api/array              – set the array from comma-separated text
  POST /api/array/random       – generate a random array
  POST /api/config/algo        – select the algorithm
  POST /api/config/speed       – set playback speed (preset name or ms)
  POST /api/run                – re-trace the current array
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  POST /api/step/play          – toggle play/pause
  POST /api/step/reset         – back to step 0, paused
  POST /api/tick               – drive auto-advance (the page polls this)
  POST /api/compare            – run two algorithms on the current array

State management:
  Each browser session gets a Workspace kept in process memory, keyed by
  a random id stored in the Flask session cookie.  A Workspace holds:
    • values        – the input array
    • algo_key      – selected algorithm
    • recorder      – last run (trace + analytics)
    • controller    – PlaybackController driven by a TickScheduler
    • comparison    – last ComparisonResult, if any
  Every array or algorithm change re-traces and re-installs.  At most
  MAX_WORKSPACES are kept; the least recently used one is closed and
  dropped when a new session arrives.
"""

from flask import Flask, render_template_string, request, jsonify, session
import logging
import secrets
import threading
import sys
import os
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from arrays import DEFAULT_ARRAY, InvalidInput, parse_array, random_array
from tracers import UnknownAlgorithm, get_algorithm, list_algorithms
from playback import (
    ComparisonResult,
    InvalidSpeed,
    InvalidTrace,
    PlaybackController,
    Recorder,
    SPEED_PRESETS,
    TickScheduler,
    compare,
)
from ui import (
    render_bars,
    playback_controls,
    algorithm_selector,
    array_input,
    analytics_panel,
    comparison_panel,
    pseudocode_viewer,
    explanation_panel,
    legend,
)

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "DEFAULT_ALGORITHM": "quick",
    "DEFAULT_SPEED":     "normal",
    "MAX_WORKSPACES":    100,     # live sessions kept in memory
    "LOG_LEVEL":         "INFO",
}


# ---------------------------------------------------------------------------
# Workspace — one per browser session
# ---------------------------------------------------------------------------
@dataclass
class Workspace:
    values:     List[int]
    algo_key:   str
    scheduler:  TickScheduler                = field(default_factory=TickScheduler)
    recorder:   Recorder                     = field(default_factory=Recorder)
    controller: Optional[PlaybackController] = None
    comparison: Optional[ComparisonResult]   = None

    def __post_init__(self):
        if self.controller is None:
            self.controller = PlaybackController(scheduler=self.scheduler)

    def retrace(self) -> None:
        """Trace the current array with the current algorithm and install it."""
        self.recorder.run(self.algo_key, self.values)
        self.controller.install(self.recorder.trace)


def _speed_from(value: Any) -> Any:
    """Accept a preset name ("fast") or a number of milliseconds."""
    if isinstance(value, str):
        if value in SPEED_PRESETS:
            return SPEED_PRESETS[value]
        try:
            return float(value)
        except ValueError:
            raise InvalidSpeed(f"Unknown speed: {value!r}") from None
    return value


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(config: Optional[Dict[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.update(DEFAULTS)
    app.config["SECRET_KEY"] = secrets.token_hex(32)
    app.config.from_prefixed_env("SORTVIZ")
    if config:
        app.config.update(config)

    if get_algorithm(app.config["DEFAULT_ALGORITHM"]) is None:
        raise UnknownAlgorithm(app.config["DEFAULT_ALGORITHM"])

    workspaces: "OrderedDict[str, Workspace]" = OrderedDict()
    workspaces_lock = threading.Lock()
    app.extensions["sortviz_workspaces"] = workspaces

    # -----------------------------------------------------------------------
    # Session State Helpers
    # -----------------------------------------------------------------------
    def get_workspace() -> Workspace:
        """
        The caller's Workspace, created on first use.  Least recently used
        workspaces beyond MAX_WORKSPACES are closed and dropped; a client
        whose workspace was dropped simply starts over with a fresh one.
        """
        sid = session.get("sid")
        with workspaces_lock:
            ws = workspaces.get(sid) if sid is not None else None
            if ws is not None:
                workspaces.move_to_end(sid)
                return ws

            sid = secrets.token_hex(8)
            ws = Workspace(
                values=list(DEFAULT_ARRAY),
                algo_key=get_algorithm(app.config["DEFAULT_ALGORITHM"]).key,
            )
            ws.controller.set_speed(_speed_from(app.config["DEFAULT_SPEED"]))
            ws.retrace()
            workspaces[sid] = ws

            limit = max(1, int(app.config["MAX_WORKSPACES"]))
            while len(workspaces) > limit:
                old_sid, old = workspaces.popitem(last=False)
                old.controller.close()
                logger.info("Evicted workspace %s", old_sid)
            logger.info("New workspace %s (%d active)", sid, len(workspaces))

        session["sid"] = sid
        return ws

    def frame(ws: Workspace) -> Dict[str, Any]:
        """Everything the page needs to redraw the current step."""
        step = ws.controller.current_step()
        return {
            "svg":         render_bars(step),
            "explanation": explanation_panel(step.message if step else ""),
            "step":        step.to_dict() if step else None,
            "status":      ws.controller.status.to_dict(),
            "values":      list(ws.values),
            "algo_key":    ws.algo_key,
        }

    # -----------------------------------------------------------------------
    # Errors — every core failure is local and recoverable
    # -----------------------------------------------------------------------
    @app.errorhandler(InvalidInput)
    @app.errorhandler(UnknownAlgorithm)
    @app.errorhandler(InvalidTrace)
    @app.errorhandler(InvalidSpeed)
    def handle_invalid(err: ValueError):
        logger.warning("Rejected %s: %s", request.path, err)
        return jsonify({"error": str(err), "kind": type(err).__name__}), 400

    def payload() -> Dict[str, Any]:
        return request.get_json(silent=True) or {}

    # -----------------------------------------------------------------------
    # Main UI Route
    # -----------------------------------------------------------------------
    @app.route("/")
    def index():
        ws   = get_workspace()
        info = get_algorithm(ws.algo_key)
        step = ws.controller.current_step()

        return render_template_string(
            INDEX_TEMPLATE,
            svg=render_bars(step),
            playback=playback_controls(ws.controller.status),
            algo_selector=algorithm_selector(list_algorithms(), ws.algo_key),
            array_panel=array_input(ws.values),
            analytics=analytics_panel(ws.recorder.metrics),
            comparison=comparison_panel(ws.comparison, list_algorithms()),
            pseudocode=pseudocode_viewer(info.pseudocode, info.label),
            explanation=explanation_panel(step.message if step else ""),
            legend=legend(),
        )

    # -----------------------------------------------------------------------
    # API: State
    # -----------------------------------------------------------------------
    @app.route("/api/state")
    def api_state():
        return jsonify(frame(get_workspace()))

    @app.route("/api/algorithms")
    def api_algorithms():
        return jsonify([
            {
                "key":         a.key,
                "label":       a.label,
                "stable":      a.stable,
                "in_place":    a.in_place,
                "complexity":  a.complexity_time,
                "worst_case":  a.complexity_worst,
                "description": a.description,
            }
            for a in list_algorithms()
        ])

    # -----------------------------------------------------------------------
    # API: Array Source
    # -----------------------------------------------------------------------
    @app.route("/api/array", methods=["POST"])
    def api_array():
        ws = get_workspace()
        values = parse_array(payload().get("text", ""))
        ws.values = values
        ws.comparison = None
        ws.retrace()
        return jsonify({**frame(ws), "analytics": analytics_panel(ws.recorder.metrics)})

    @app.route("/api/array/random", methods=["POST"])
    def api_array_random():
        ws   = get_workspace()
        data = payload()
        try:
            length = int(data.get("length") or 0)
        except (TypeError, ValueError):
            raise InvalidInput(f"Invalid array length: {data.get('length')!r}") from None
        ws.values = random_array(length, seed=data.get("seed"))
        ws.comparison = None
        ws.retrace()
        return jsonify({
            **frame(ws),
            "text":      ", ".join(str(v) for v in ws.values),
            "analytics": analytics_panel(ws.recorder.metrics),
        })

    # -----------------------------------------------------------------------
    # API: Config Changes
    # -----------------------------------------------------------------------
    @app.route("/api/config/algo", methods=["POST"])
    def api_config_algo():
        ws   = get_workspace()
        key  = payload().get("algo_key", "")
        info = get_algorithm(key)
        if info is None:
            raise UnknownAlgorithm(key)

        ws.algo_key = info.key
        ws.retrace()
        return jsonify({
            **frame(ws),
            "pseudocode": pseudocode_viewer(info.pseudocode, info.label),
            "analytics":  analytics_panel(ws.recorder.metrics),
        })

    @app.route("/api/config/speed", methods=["POST"])
    def api_config_speed():
        ws = get_workspace()
        ws.controller.set_speed(_speed_from(payload().get("speed")))
        return jsonify({"speed_ms": ws.controller.speed_ms})

    # -----------------------------------------------------------------------
    # API: Run Algorithm
    # -----------------------------------------------------------------------
    @app.route("/api/run", methods=["POST"])
    def api_run():
        ws = get_workspace()
        ws.retrace()
        return jsonify({**frame(ws), "analytics": analytics_panel(ws.recorder.metrics)})

    # -----------------------------------------------------------------------
    # API: Step Navigation
    # -----------------------------------------------------------------------
    @app.route("/api/step/next", methods=["POST"])
    def api_step_next():
        ws = get_workspace()
        ws.controller.step_forward()
        return jsonify(frame(ws))

    @app.route("/api/step/prev", methods=["POST"])
    def api_step_prev():
        ws = get_workspace()
        ws.controller.step_backward()
        return jsonify(frame(ws))

    @app.route("/api/step/play", methods=["POST"])
    def api_step_play():
        ws = get_workspace()
        ws.controller.toggle_play()
        return jsonify(frame(ws))

    @app.route("/api/step/reset", methods=["POST"])
    def api_step_reset():
        ws = get_workspace()
        ws.controller.reset()
        return jsonify(frame(ws))

    @app.route("/api/tick", methods=["POST"])
    def api_tick():
        ws = get_workspace()
        fired = ws.scheduler.tick()
        return jsonify({**frame(ws), "advanced": fired > 0})

    # -----------------------------------------------------------------------
    # API: Comparison Mode
    # -----------------------------------------------------------------------
    @app.route("/api/compare", methods=["POST"])
    def api_compare():
        ws   = get_workspace()
        data = payload()

        left, right = Recorder(), Recorder()
        left.run(data.get("left", ""), ws.values)
        right.run(data.get("right", ""), ws.values)
        ws.comparison = compare(left, right)

        return jsonify({
            "comparison": ws.comparison.to_dict(),
            "panel":      comparison_panel(ws.comparison, list_algorithms()),
        })

    return app


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
      width: 340px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main { flex: 1; display: flex; flex-direction: column; }

    #canvas-container {
      flex: 1;
      display: flex;
      align-items: center;
      justify-content: center;
      flex-direction: column;
      gap: 12px;
      border-bottom: 1px solid var(--border);
    }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 20px;
      padding: 20px;
      background: var(--bg-dark);
      max-height: 320px;
      overflow: auto;
    }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }

    .panel h3 {
      font-size: 14px;
      text-transform: uppercase;
      margin-bottom: 12px;
      color: var(--accent-cyan);
    }

    button, select, input {
      background: var(--bg-darker);
      color: var(--text-primary);
      border: 1px solid var(--border);
      border-radius: 6px;
      padding: 6px 10px;
      margin: 2px;
    }

    button:disabled { opacity: 0.4; }
    .error { color: #f43f5e; margin-top: 8px; }
    .placeholder { color: var(--text-secondary); }
    .code-block { font-family: monospace; font-size: 13px; line-height: 1.6; }
    .explanation-text { color: var(--text-secondary); line-height: 1.8; }
    .legend { display: flex; gap: 16px; font-size: 13px; }
    .swatch { display: inline-block; width: 14px; height: 14px; margin-right: 6px; vertical-align: middle; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="array-panel">{{ array_panel|safe }}</div>
    <div id="algo-panel">{{ algo_selector|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
    <div id="analytics">{{ analytics|safe }}</div>
    <div id="comparison">{{ comparison|safe }}</div>
  </div>
  <div id="main">
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
      {{ legend|safe }}
    </div>
    <div id="bottom-panel">
      <div><h3>Pseudocode</h3><div id="pseudocode">{{ pseudocode|safe }}</div></div>
      <div><h3>What just happened</h3><div id="explanation">{{ explanation|safe }}</div></div>
    </div>
  </div>

  <script>
    let tickTimer = null;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function showError(msg) {
      const panel = document.getElementById('array-panel');
      let el = panel.querySelector('.error');
      if (!el) { el = document.createElement('p'); el.className = 'error'; panel.querySelector('.panel').appendChild(el); }
      el.textContent = msg;
    }

    function apply(data) {
      if (data.error) { showError(data.error); return; }
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      if (data.explanation) document.getElementById('explanation').innerHTML = data.explanation;
      if (data.pseudocode) document.getElementById('pseudocode').innerHTML = data.pseudocode;
      if (data.analytics) document.getElementById('analytics').innerHTML = data.analytics;
      if (data.text !== undefined) document.getElementById('array-text').value = data.text;
      if (data.status) {
        const s = data.status;
        document.getElementById('current-step').textContent = s.total_steps ? s.current_index + 1 : 0;
        document.getElementById('total-steps').textContent = s.total_steps;
        document.getElementById('btn-play').textContent = s.is_playing ? '⏸' : '▶';
        document.getElementById('btn-prev').disabled = s.current_index === 0;
        document.getElementById('btn-next').disabled = s.current_index >= s.total_steps - 1;
        syncTicking(s.is_playing);
      }
    }

    // the server owns the timer; the page only polls while playing
    function syncTicking(playing) {
      if (playing && !tickTimer) {
        tickTimer = setInterval(async () => apply(await post('/api/tick')), 100);
      } else if (!playing && tickTimer) {
        clearInterval(tickTimer);
        tickTimer = null;
      }
    }

    document.getElementById('btn-next').addEventListener('click', async () => apply(await post('/api/step/next')));
    document.getElementById('btn-prev').addEventListener('click', async () => apply(await post('/api/step/prev')));
    document.getElementById('btn-play').addEventListener('click', async () => apply(await post('/api/step/play')));
    document.getElementById('btn-reset').addEventListener('click', async () => apply(await post('/api/step/reset')));
    document.getElementById('btn-run').addEventListener('click', async () => apply(await post('/api/run')));

    document.getElementById('btn-set-array').addEventListener('click', async () => {
      apply(await post('/api/array', {text: document.getElementById('array-text').value}));
    });
    document.getElementById('btn-random-array').addEventListener('click', async () => {
      apply(await post('/api/array/random', {length: +document.getElementById('array-length').value}));
    });

    document.getElementById('algo-selector').addEventListener('change', async (e) => {
      apply(await post('/api/config/algo', {algo_key: e.target.value}));
    });
    document.getElementById('speed-selector').addEventListener('change', async (e) => {
      await post('/api/config/speed', {speed: e.target.value});
    });

    // delegated: #comparison is replaced by every compare
    document.getElementById('comparison').addEventListener('click', async (e) => {
      if (e.target.id !== 'btn-compare') return;
      const data = await post('/api/compare', {
        left:  document.getElementById('compare-left').value,
        right: document.getElementById('compare-right').value,
      });
      if (data.error) { showError(data.error); return; }
      document.getElementById('comparison').innerHTML = data.panel;
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
app = create_app()


if __name__ == "__main__":
    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Sorting Algorithm Visualizer on http://localhost:5000")
    app.run(debug=True, host="0.0.0.0", port=5000)
