"""
canvas.py — SVG Bar Chart Renderer
====================================
Pure rendering function: TraceStep → SVG string.

The renderer consumes:
  • step       – the current TraceStep snapshot (array + highlighted indices)
  • config     – visual config (canvas size, colors, fonts, …)

And produces an SVG string ready to inject into the DOM.

Design decisions:
  - NO mutation.  The renderer reads the step and returns a string.
  - One bar per element, height proportional to value relative to the
    largest magnitude in the snapshot.  Value label on top, index below.
  - Coloring is a precedence lookup: swapped > compared > sorted > idle.
"""

from typing import Dict, Optional

from tracers.step import TraceStep


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 900
    height: int = 420
    bg:     str = "#0d1117"

    # bar colors (state → fill)
    bar_colors: Dict[str, str] = {
        "idle":     "#484f58",   # grey
        "compared": "#0ea5e9",   # cyan blue
        "swapped":  "#f43f5e",   # rose
        "sorted":   "#10b981",   # emerald green
    }

    # layout
    padding_x:     int = 30
    padding_top:   int = 40
    padding_bot:   int = 40
    bar_gap:       int = 4
    min_bar:       int = 2      # keeps zero / tiny values visible

    # labels
    label_color:   str = "#e6edf3"
    index_color:   str = "#7d8590"
    label_size:    int = 12
    pointer_color: str = "#f59e0b"


CONFIG = CanvasConfig()


def bar_state(step: Optional[TraceStep], index: int) -> str:
    """Which palette entry a bar gets."""
    if step is None:
        return "idle"
    if index in step.swapped_indices:
        return "swapped"
    if index in step.compared_indices:
        return "compared"
    if index in step.sorted_indices:
        return "sorted"
    return "idle"


def bar_color(step: Optional[TraceStep], index: int, config: CanvasConfig = CONFIG) -> str:
    return config.bar_colors[bar_state(step, index)]


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_bars(
    step: Optional[TraceStep] = None,
    config: CanvasConfig = CONFIG,
    show_pointers: bool = True,
) -> str:
    """
    Returns an SVG string.

    Args:
        step          : Current trace step (or None for an empty canvas).
        config        : Visual config.
        show_pointers : If True, label pivot / i / j … under their bars.
    """
    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    if step is None or not step.array:
        svg_parts.append(
            f'<text x="{config.width // 2}" y="{config.height // 2}" text-anchor="middle" '
            f'font-size="14" fill="{config.index_color}">Ready to sort</text>'
        )
        svg_parts.append("</svg>")
        return "\n".join(svg_parts)

    n          = len(step.array)
    usable_w   = config.width - 2 * config.padding_x
    usable_h   = config.height - config.padding_top - config.padding_bot
    slot       = usable_w / n
    bar_w      = max(1.0, slot - config.bar_gap)
    peak       = max(abs(v) for v in step.array) or 1
    baseline   = config.padding_top + usable_h

    # pointer names per index, e.g. {3: "pivot", 1: "i, j"}
    labels: Dict[int, str] = {}
    if show_pointers:
        for name, idx in sorted(step.pointers.items()):
            labels[idx] = f"{labels[idx]}, {name}" if idx in labels else name

    for i, value in enumerate(step.array):
        h = max(config.min_bar, abs(value) / peak * usable_h)
        x = config.padding_x + i * slot + config.bar_gap / 2
        y = baseline - h
        cx = x + bar_w / 2

        svg_parts.append(
            f'<g class="bar bar-{bar_state(step, i)}" data-index="{i}">'
        )
        svg_parts.append(
            f'  <rect x="{x:.1f}" y="{y:.1f}" width="{bar_w:.1f}" height="{h:.1f}" '
            f'fill="{bar_color(step, i, config)}" rx="2"/>'
        )
        svg_parts.append(
            f'  <text x="{cx:.1f}" y="{y - 4:.1f}" text-anchor="middle" '
            f'font-size="{config.label_size}" fill="{config.label_color}">{value}</text>'
        )
        svg_parts.append(
            f'  <text x="{cx:.1f}" y="{baseline + 16:.1f}" text-anchor="middle" '
            f'font-size="{config.label_size - 1}" fill="{config.index_color}">{i}</text>'
        )
        if i in labels:
            svg_parts.append(
                f'  <text x="{cx:.1f}" y="{baseline + 32:.1f}" text-anchor="middle" '
                f'font-size="{config.label_size - 2}" fill="{config.pointer_color}">{labels[i]}</text>'
            )
        svg_parts.append("</g>")

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)
