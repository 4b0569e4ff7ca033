"""Tests for playback.recorder — run analytics and comparison mode."""

import json

import pytest

from playback import Recorder, RunMetrics, compare
from tracers import UnknownAlgorithm, generate_trace

REVERSED = [8, 7, 6, 5, 4, 3, 2, 1]


class TestRecorder:
    def test_counts_for_bubble(self):
        rec = Recorder()
        metrics = rec.run("bubble", [3, 1, 2])
        assert metrics.algo_key == "bubble"
        assert metrics.algo_label == "Bubble Sort"
        assert metrics.size == 3
        assert metrics.total_steps == 6
        assert metrics.comparisons == 3
        assert metrics.swaps == 2
        assert metrics.memory_bytes > 0
        assert rec.get_metrics() is metrics

    def test_merge_on_equal_values_has_no_swaps(self):
        metrics = Recorder().run("merge", [5, 5, 5])
        assert metrics.comparisons == 3
        assert metrics.swaps == 0

    def test_insertion_key_selection_is_not_a_comparison(self):
        metrics = Recorder().run("insertion", [1, 2])
        # key step has one index; the single real comparison has two
        assert metrics.comparisons == 1

    def test_trace_matches_generate_trace(self):
        rec = Recorder()
        rec.run("heap", REVERSED)
        assert rec.trace == generate_trace("heap", REVERSED)

    def test_alias_accepted(self):
        assert Recorder().run("selectionSort", [2, 1]).algo_key == "selection"

    def test_unknown_algorithm(self):
        rec = Recorder()
        with pytest.raises(UnknownAlgorithm):
            rec.run("bogo", [1])
        assert rec.metrics is None

    def test_export_is_json_serialisable(self):
        rec = Recorder()
        rec.run("quick", [3, 1, 2])
        data = json.loads(json.dumps(rec.export()))
        assert data["algo_key"] == "quick"
        assert data["input"] == [3, 1, 2]
        assert data["metrics"]["total_steps"] == len(data["steps"])
        assert data["steps"][-1]["sorted_indices"] == [0, 1, 2]

    def test_export_before_run(self):
        assert Recorder().export() == {"algo_key": "", "input": [], "metrics": {}, "steps": []}


class TestCompare:
    def test_merge_beats_bubble_on_comparisons(self):
        left, right = Recorder(), Recorder()
        left.run("bubble", REVERSED)
        right.run("merge", REVERSED)
        result = compare(left, right)
        assert result.left.comparisons == 28
        assert result.right.comparisons < 28
        assert result.winner_comparisons == "Merge Sort"
        assert result.winner_swaps == "Merge Sort"

    def test_same_algorithm_ties(self):
        left, right = Recorder(), Recorder()
        left.run("heap", REVERSED)
        right.run("heap", REVERSED)
        result = compare(left, right)
        assert result.winner_steps == "tie"
        assert result.winner_comparisons == "tie"

    def test_missing_runs_compare_as_empty(self):
        result = compare(Recorder(), Recorder())
        assert result.left == RunMetrics()
        assert result.to_dict()["winner_steps"] == "tie"
