"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls       – prev/play/next/reset + speed + progress
  • algorithm_selector      – dropdown of the six sorts
  • array_input             – comma-separated text box + random generator
  • analytics_panel         – steps, comparisons, swaps, wall time, …
  • comparison_panel        – side-by-side metrics of two runs
  • pseudocode_viewer       – the selected algorithm's pseudocode
  • explanation_panel       – the current step's narration
  • legend                  – bar color key

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from typing import List, Optional, Sequence

from tracers import AlgoInfo
from playback import ComparisonResult, PlaybackStatus, RunMetrics, SPEED_PRESETS
from ui.canvas import CONFIG, CanvasConfig


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(status: Optional[PlaybackStatus] = None) -> str:
    status = status or PlaybackStatus()
    play_icon  = "⏸" if status.is_playing else "▶"
    play_label = "Pause" if status.is_playing else "Play"
    shown_step = status.current_index + 1 if status.total_steps else 0

    options = []
    for name, ms in SPEED_PRESETS.items():
        sel = "selected" if ms == status.speed_ms else ""
        options.append(f'<option value="{name}" {sel}>{name.capitalize()} ({ms} ms)</option>')

    return f"""
    <div class="panel playback-controls">
      <h3>⏯ Playback</h3>
      <div class="button-row">
        <button id="btn-prev" title="Previous step" {'disabled' if status.current_index == 0 else ''}>◀</button>
        <button id="btn-play" title="{play_label}">{play_icon}</button>
        <button id="btn-next" title="Next step" {'disabled' if shown_step >= status.total_steps else ''}>▶</button>
        <button id="btn-reset" title="Reset to start">⏮</button>
      </div>
      <div class="step-info">
        Step <span id="current-step">{shown_step}</span> / <span id="total-steps">{status.total_steps}</span>
      </div>
      <div class="speed-control">
        <label>Speed:</label>
        <select id="speed-selector">
          {''.join(options)}
        </select>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(algorithms: List[AlgoInfo], selected_key: str = "quick") -> str:
    options = []
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        options.append(
            f'<option value="{algo.key}" {sel}>{algo.label} — {algo.complexity_time}</option>'
        )

    return f"""
    <div class="panel algorithm-selector">
      <h3>🧠 Algorithm</h3>
      <select id="algo-selector">
        {''.join(options)}
      </select>
      <button id="btn-run" class="btn-primary">▶ Run Algorithm</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Array Input
# ---------------------------------------------------------------------------
def array_input(values: Sequence[int] = (), error: str = "") -> str:
    text = ", ".join(str(v) for v in values)
    error_html = f'<p class="error">{_escape(error)}</p>' if error else ""
    return f"""
    <div class="panel array-input">
      <h3>🔢 Array</h3>
      <input type="text" id="array-text" value="{text}" placeholder="Enter numbers separated by commas">
      <div class="button-row">
        <button id="btn-set-array" class="btn-secondary">Update Array</button>
        <button id="btn-random-array" class="btn-secondary">Random Array</button>
        <input type="number" id="array-length" min="1" placeholder="Array Length">
      </div>
      {error_html}
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>📊 Analytics</h3>
          <p class="placeholder">Run an algorithm to see metrics.</p>
        </div>
        """

    return f"""
    <div class="panel analytics-panel">
      <h3>📊 Analytics — {metrics.algo_label}</h3>
      <table>
        <tr><td>Elements:</td><td><strong>{metrics.size}</strong></td></tr>
        <tr><td>Total Steps:</td><td><strong>{metrics.total_steps}</strong></td></tr>
        <tr><td>Comparisons:</td><td><strong>{metrics.comparisons}</strong></td></tr>
        <tr><td>Swaps / Writes:</td><td><strong>{metrics.swaps}</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
        <tr><td>Memory:</td><td><strong>{metrics.memory_bytes // 1024} KB</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Comparison Panel (side-by-side)
# ---------------------------------------------------------------------------
def _compare_controls(algorithms: Sequence[AlgoInfo], left_key: str, right_key: str) -> str:
    if not algorithms:
        return ""

    def select(element_id, selected_key):
        options = "".join(
            f'<option value="{a.key}" {"selected" if a.key == selected_key else ""}>{a.label}</option>'
            for a in algorithms
        )
        return f'<select id="{element_id}">{options}</select>'

    return f"""
      <div class="button-row compare-controls">
        {select("compare-left", left_key)}
        {select("compare-right", right_key)}
        <button id="btn-compare" class="btn-secondary">Compare</button>
      </div>
    """


def comparison_panel(
    comp: Optional[ComparisonResult] = None,
    algorithms: Sequence[AlgoInfo] = (),
    left_key: str = "bubble",
    right_key: str = "merge",
) -> str:
    """
    Side-by-side metrics of two runs.  When `algorithms` is given the panel
    also carries the two selectors and the Compare button.
    """
    if comp:
        left_key  = comp.left.algo_key or left_key
        right_key = comp.right.algo_key or right_key
    controls = _compare_controls(algorithms, left_key, right_key)

    if not comp:
        return f"""
        <div class="panel comparison-panel">
          <h3>⚖️ Comparison Mode</h3>
          {controls}
          <p class="placeholder">Run two algorithms on the same array to compare.</p>
        </div>
        """

    left  = comp.left
    right = comp.right

    def winner_badge(winner_label):
        if winner_label == "tie":
            return "🟰 Tie"
        return f"👑 {winner_label}"

    return f"""
    <div class="panel comparison-panel">
      <h3>⚖️ Comparison: {left.algo_label} vs {right.algo_label}</h3>
      {controls}
      <table class="comparison-table">
        <thead>
          <tr><th>Metric</th><th>{left.algo_label}</th><th>{right.algo_label}</th><th>Winner</th></tr>
        </thead>
        <tbody>
          <tr><td>Steps</td><td>{left.total_steps}</td><td>{right.total_steps}</td><td>{winner_badge(comp.winner_steps)}</td></tr>
          <tr><td>Comparisons</td><td>{left.comparisons}</td><td>{right.comparisons}</td><td>{winner_badge(comp.winner_comparisons)}</td></tr>
          <tr><td>Swaps / Writes</td><td>{left.swaps}</td><td>{right.swaps}</td><td>{winner_badge(comp.winner_swaps)}</td></tr>
          <tr><td>Wall Time</td><td>{left.wall_time_ms:.2f} ms</td><td>{right.wall_time_ms:.2f} ms</td><td>—</td></tr>
        </tbody>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str], algo_label: str = "") -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div class="placeholder">Select an algorithm to view pseudocode</div>
        </div>
        """

    lines_html = [
        f'<div class="code-line" data-line="{i}">{_escape(line)}</div>'
        for i, line in enumerate(pseudocode_lines)
    ]
    return f"""
    <div class="code-block" title="{algo_label}">
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel
# ---------------------------------------------------------------------------
def explanation_panel(message: str = "") -> str:
    if not message:
        return """<div class="explanation-text">▶ Click <strong>Run Algorithm</strong> to start. Ready to sort.</div>"""
    return f"""<div class="explanation-text">{_escape(message)}</div>"""


# ---------------------------------------------------------------------------
# Legend
# ---------------------------------------------------------------------------
def legend(config: CanvasConfig = CONFIG) -> str:
    items = [("compared", "Comparing"), ("swapped", "Swapping"), ("sorted", "Sorted")]
    swatches = "".join(
        f'<span class="legend-item"><span class="swatch" style="background: {config.bar_colors[key]};"></span>{label}</span>'
        for key, label in items
    )
    return f"""<div class="legend">{swatches}</div>"""
