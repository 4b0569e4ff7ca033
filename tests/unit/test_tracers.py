"""Tests for the six tracers and the registry in tracers/."""

import pytest

from arrays import random_array
from tracers import (
    REGISTRY,
    TraceStep,
    UnknownAlgorithm,
    generate_trace,
    get_algorithm,
    list_algorithms,
)

ALGORITHMS = ["bubble", "selection", "insertion", "merge", "quick", "heap"]
SWAP_BASED = ["bubble", "selection", "quick", "heap"]

INPUTS = [
    [],
    [7],
    [5, 5, 5],
    [1, 2, 3, 4, 5],
    [5, 4, 3, 2, 1],
    [3, 1, 2],
    [6, 5, 8, 9, 3, 10, 15, 12, 16],
    [-3, 0, 2, -3, 7, 0],
    [2, 1, 2, 1, 2, 1],
    random_array(25, seed=1),
    random_array(40, seed=2),
]


def _ids(value):
    return repr(value) if len(value) < 10 else f"len{len(value)}"


@pytest.mark.parametrize("algo", ALGORITHMS)
@pytest.mark.parametrize("values", INPUTS, ids=_ids)
class TestTraceContract:
    def test_trace_is_non_empty_tuple_of_steps(self, algo, values):
        trace = generate_trace(algo, values)
        assert isinstance(trace, tuple)
        assert len(trace) >= 1
        assert all(isinstance(s, TraceStep) for s in trace)

    def test_final_step_is_sorted_with_every_index(self, algo, values):
        last = generate_trace(algo, values)[-1]
        assert list(last.array) == sorted(values)
        assert last.sorted_indices == frozenset(range(len(values)))
        assert last.is_final

    def test_only_last_step_is_final(self, algo, values):
        trace = generate_trace(algo, values)
        assert [s.is_final for s in trace] == [False] * (len(trace) - 1) + [True]

    def test_step_numbers_match_positions(self, algo, values):
        trace = generate_trace(algo, values)
        assert [s.step_number for s in trace] == list(range(len(trace)))

    def test_array_length_is_constant(self, algo, values):
        trace = generate_trace(algo, values)
        assert all(len(s.array) == len(values) for s in trace)

    def test_indices_in_bounds(self, algo, values):
        n = len(values)
        for step in generate_trace(algo, values):
            for idx in step.compared_indices | step.swapped_indices | step.sorted_indices:
                assert 0 <= idx < n
            for idx in step.pointers.values():
                assert 0 <= idx < n
            assert len(step.compared_indices) <= 2
            assert len(step.swapped_indices) <= 2

    def test_sorted_indices_only_grow(self, algo, values):
        trace = generate_trace(algo, values)
        for prev, cur in zip(trace, trace[1:]):
            assert prev.sorted_indices <= cur.sorted_indices

    def test_deterministic(self, algo, values):
        assert generate_trace(algo, values) == generate_trace(algo, values)

    def test_input_not_mutated(self, algo, values):
        original = list(values)
        generate_trace(algo, values)
        assert values == original


@pytest.mark.parametrize("algo", SWAP_BASED)
def test_swap_based_steps_are_permutations(algo):
    values = [9, 4, 4, 1, 7, 3, 8]
    for step in generate_trace(algo, values):
        assert sorted(step.array) == sorted(values)


@pytest.mark.parametrize("algo", ALGORITHMS)
def test_tuple_input_accepted(algo):
    assert generate_trace(algo, (2, 1))[-1].array == (1, 2)


class TestBubble:
    def test_small_trace_exactly(self):
        trace = generate_trace("bubble", [3, 1, 2])
        assert len(trace) == 6
        assert trace[0].compared_indices == {0, 1}
        assert trace[1].swapped_indices == {0, 1}
        assert trace[1].array == (1, 3, 2)
        assert trace[3].array == (1, 2, 3)
        assert trace[4].compared_indices == {0, 1}
        assert trace[4].sorted_indices == {2}

    def test_sorted_input_still_compares_every_pair(self):
        trace = generate_trace("bubble", [1, 2, 3, 4])
        compares = [s for s in trace if s.compared_indices]
        assert len(compares) == 6
        assert not any(s.swapped_indices for s in trace)

    def test_comparisons_are_adjacent(self):
        for step in generate_trace("bubble", [4, 3, 2, 1]):
            if step.compared_indices:
                lo, hi = sorted(step.compared_indices)
                assert hi == lo + 1


class TestSelection:
    def test_small_trace_exactly(self):
        trace = generate_trace("selection", [3, 1, 2])
        assert len(trace) == 6
        assert trace[0].compared_indices == {0, 1}
        assert trace[1].compared_indices == {1, 2}
        assert trace[2].swapped_indices == {0, 1}
        assert trace[3].sorted_indices == {0}
        assert trace[4].array == (1, 2, 3)

    def test_no_swap_when_minimum_already_in_place(self):
        trace = generate_trace("selection", [1, 2, 3])
        assert not any(s.swapped_indices for s in trace)
        assert len([s for s in trace if s.compared_indices]) == 3


class TestInsertion:
    def test_small_trace_exactly(self):
        trace = generate_trace("insertion", [3, 1, 2])
        assert len(trace) == 10
        assert trace[0].compared_indices == {1}
        assert trace[0].message == "Current element to insert: 1"
        assert trace[2].swapped_indices == {0, 1}
        assert trace[3].message == "Inserted 1 into position 0"
        assert trace[3].sorted_indices == {0, 1}
        # the comparison that stops the scan is recorded too
        assert trace[7].compared_indices == {0, 1}
        assert trace[7].message == "Comparing 1 with 2"

    def test_first_index_sorted_from_the_start(self):
        trace = generate_trace("insertion", [2, 1])
        assert trace[0].sorted_indices == {0}


class TestMerge:
    def test_all_equal_never_swaps(self):
        trace = generate_trace("merge", [5, 5, 5])
        assert trace[-1].array == (5, 5, 5)
        assert not any(s.swapped_indices for s in trace)

    def test_all_equal_trace_exactly(self):
        trace = generate_trace("merge", [5, 5, 5])
        assert [sorted(s.compared_indices) for s in trace] == [[0, 1], [], [0, 2], [1, 2], [], []]
        assert trace[1].sorted_indices == {0, 1}
        assert trace[1].message == "Merged subarray from index 0 to 1"

    def test_comparisons_span_the_two_halves(self):
        for step in generate_trace("merge", [8, 3, 5, 1, 9, 2]):
            if step.compared_indices:
                lo, hi = sorted(step.compared_indices)
                assert step.pointers["low"] <= lo <= step.pointers["mid"] < hi <= step.pointers["high"]


class TestQuick:
    def test_example_trace(self):
        trace = generate_trace("quick", [3, 1, 2])
        assert len(trace) >= 3
        assert trace[-1].array == (1, 2, 3)
        assert trace[-1].sorted_indices == {0, 1, 2}

    def test_small_trace_exactly(self):
        trace = generate_trace("quick", [3, 1, 2])
        assert len(trace) == 9
        assert trace[0].pointers["pivot"] == 2
        assert trace[1].compared_indices == {0, 2}
        assert trace[2].compared_indices == {1, 2}
        assert trace[3].swapped_indices == {0, 1}
        assert trace[4].swapped_indices == {1, 2}
        assert trace[5].sorted_indices == {1}
        # left partition is finished before the right one
        assert trace[6].sorted_indices == {0, 1}
        assert trace[7].sorted_indices == {0, 1, 2}

    def test_pivot_is_last_element_of_range(self):
        trace = generate_trace("quick", [4, 9, 2, 7, 5])
        assert trace[0].pointers["pivot"] == 4
        assert "pivot 5" in trace[0].message

    def test_sorted_input_places_every_pivot_without_swapping(self):
        values = list(range(120))
        trace = generate_trace("quick", values)
        assert trace[-1].array == tuple(values)
        assert not any(s.swapped_indices for s in trace)

    def test_equal_elements_go_left_of_pivot(self):
        trace = generate_trace("quick", [2, 2, 2])
        placed = [s for s in trace if s.message.startswith("Pivot 2 is in its final position")]
        assert "position 2" in placed[0].message


class TestHeap:
    def test_small_trace_exactly(self):
        trace = generate_trace("heap", [3, 1, 2])
        assert len(trace) == 8
        assert trace[0].compared_indices == {0, 1}
        assert "left child" in trace[0].message
        assert trace[1].compared_indices == {0, 2}
        assert "right child" in trace[1].message
        assert trace[2].swapped_indices == {0, 2}
        assert trace[2].sorted_indices == frozenset()
        assert trace[3].sorted_indices == {2}

    def test_sorted_tail_fills_from_the_end(self):
        trace = generate_trace("heap", [4, 10, 3, 5, 1])
        growth = []
        for prev, cur in zip(trace, trace[1:-1]):
            growth.extend(cur.sorted_indices - prev.sorted_indices)
        assert growth == [4, 3, 2, 1]


class TestRegistry:
    def test_all_six_registered_in_order(self):
        assert [a.key for a in list_algorithms()] == ALGORITHMS
        assert set(REGISTRY) == set(ALGORITHMS)

    def test_aliases_resolve(self):
        assert get_algorithm("quickSort").key == "quick"
        assert get_algorithm("heapSort").key == "heap"

    def test_missing_returns_none(self):
        assert get_algorithm("bogo") is None

    def test_generate_trace_unknown_raises(self):
        with pytest.raises(UnknownAlgorithm, match="bogo"):
            generate_trace("bogo", [1, 2])

    def test_every_algorithm_has_pseudocode(self):
        assert all(a.pseudocode for a in list_algorithms())


class TestTraceStep:
    def test_to_dict_sorts_index_sets(self):
        step = generate_trace("bubble", [2, 1])[1]
        data = step.to_dict()
        assert data["array"] == [1, 2]
        assert data["swapped_indices"] == [0, 1]
        assert data["sorted_indices"] == []

    def test_steps_are_frozen(self):
        step = generate_trace("bubble", [2, 1])[0]
        with pytest.raises(AttributeError):
            step.message = "changed"

    def test_pointers_are_read_only(self):
        step = generate_trace("quick", [2, 1])[0]
        with pytest.raises(TypeError):
            step.pointers["pivot"] = 0
