"""Tests for the pure render functions in ui/."""

from playback import PlaybackStatus, Recorder, compare
from tracers import TraceStep, generate_trace, list_algorithms
from ui import (
    CanvasConfig,
    algorithm_selector,
    analytics_panel,
    array_input,
    bar_color,
    bar_state,
    comparison_panel,
    explanation_panel,
    legend,
    playback_controls,
    pseudocode_viewer,
    render_bars,
)


class TestBarColors:
    def test_precedence(self):
        step = TraceStep(
            array=(4, 3, 2, 1),
            compared_indices=frozenset({0, 1}),
            swapped_indices=frozenset({1, 2}),
            sorted_indices=frozenset({0, 2, 3}),
        )
        assert bar_state(step, 0) == "compared"
        assert bar_state(step, 1) == "swapped"
        assert bar_state(step, 2) == "swapped"
        assert bar_state(step, 3) == "sorted"

    def test_idle_without_step(self):
        assert bar_state(None, 0) == "idle"
        assert bar_color(None, 0) == CanvasConfig.bar_colors["idle"]


class TestRenderBars:
    def test_one_bar_per_element(self):
        step = generate_trace("bubble", [3, 1, 2])[0]
        svg = render_bars(step)
        assert svg.startswith("<svg")
        assert svg.count('class="bar ') == 3
        assert 'class="bar bar-compared" data-index="0"' in svg
        assert 'class="bar bar-idle" data-index="2"' in svg

    def test_empty(self):
        assert "Ready to sort" in render_bars(None)
        assert "Ready to sort" in render_bars(generate_trace("merge", [])[0])

    def test_pointer_labels(self):
        step = generate_trace("quick", [3, 1, 2])[0]
        assert ">high, pivot<" in render_bars(step)
        assert "pivot" not in render_bars(step, show_pointers=False)

    def test_zero_and_negative_values(self):
        svg = render_bars(TraceStep(array=(0, -5, 5)))
        assert svg.count('class="bar ') == 3


class TestPanels:
    def test_playback_controls_progress(self):
        html = playback_controls(PlaybackStatus(current_index=2, total_steps=9, is_playing=True, speed_ms=500))
        assert '<span id="current-step">3</span>' in html
        assert '<span id="total-steps">9</span>' in html
        assert "⏸" in html
        assert '<option value="fast" selected>' in html

    def test_playback_controls_default(self):
        assert '<span id="total-steps">0</span>' in playback_controls()

    def test_algorithm_selector(self):
        html = algorithm_selector(list_algorithms(), "heap")
        assert html.count("<option") == 6
        assert '<option value="heap" selected>' in html

    def test_array_input(self):
        html = array_input([3, 1, 2], error="Invalid number: 'x'")
        assert 'value="3, 1, 2"' in html
        assert "class=\"error\"" in html

    def test_explanation_escapes(self):
        assert "&lt;b&gt;" in explanation_panel("<b>")
        assert "Run Algorithm" in explanation_panel("")

    def test_pseudocode_escapes(self):
        html = pseudocode_viewer(["if a < b:"])
        assert "a &lt; b" in html
        assert "Select an algorithm" in pseudocode_viewer([])

    def test_analytics_and_comparison(self):
        left, right = Recorder(), Recorder()
        left.run("bubble", [2, 1])
        right.run("merge", [2, 1])
        assert "Run an algorithm" in analytics_panel(None)
        assert "Bubble Sort" in analytics_panel(left.metrics)
        html = comparison_panel(compare(left, right))
        assert "Bubble Sort vs Merge Sort" in html

    def test_legend(self):
        html = legend()
        for label in ("Comparing", "Swapping", "Sorted"):
            assert label in html

    def test_comparison_controls(self):
        assert "btn-compare" not in comparison_panel()
        html = comparison_panel(algorithms=list_algorithms())
        assert html.count("<option") == 12
        assert '<option value="bubble" selected>' in html
        assert '<option value="merge" selected>' in html
        assert "Run two algorithms" in html
