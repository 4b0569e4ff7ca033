"""
ui/
---
Presentation layer.

    from ui import render_bars
    from ui import playback_controls, algorithm_selector, …
"""

from ui.canvas import render_bars, bar_color, bar_state, CanvasConfig

from ui.controls import (
    playback_controls,
    algorithm_selector,
    array_input,
    analytics_panel,
    comparison_panel,
    pseudocode_viewer,
    explanation_panel,
    legend,
)

__all__ = [
    "render_bars",
    "bar_color",
    "bar_state",
    "CanvasConfig",
    "playback_controls",
    "algorithm_selector",
    "array_input",
    "analytics_panel",
    "comparison_panel",
    "pseudocode_viewer",
    "explanation_panel",
    "legend",
]
