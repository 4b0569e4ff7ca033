"""
tracers/__init__.py — Algorithm Registry
=========================================
Single source of truth for every sorting algorithm the visualizer knows.

    from tracers import REGISTRY, get_algorithm, generate_trace

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, pseudocode, stable, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engine and UI both consume it
so adding a new algorithm is literally: write the tracer, add one entry
here.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from tracers.step import StepBuilder, Trace, TraceStep

from tracers.bubble    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from tracers.selection import selection_sort as _selection, PSEUDOCODE as _selection_pc
from tracers.insertion import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from tracers.merge     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from tracers.quick     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc
from tracers.heap      import heap_sort      as _heap,      PSEUDOCODE as _heap_pc

logger = logging.getLogger(__name__)


class UnknownAlgorithm(ValueError):
    """Raised when an algorithm identifier is not in the registry."""

    def __init__(self, name: str):
        super().__init__(f"Unknown algorithm: {name!r}")
        self.name = name


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                              # registry key, e.g. "quick"
    label:             str                              # human label, e.g. "Quick Sort"
    fn:                Callable[[Sequence[int]], Trace] # the tracer
    pseudocode:        List[str]                        # lines for the side-panel
    stable:            bool     = False
    in_place:          bool     = True
    complexity_time:   str      = ""                    # average case
    complexity_worst:  str      = ""
    complexity_space:  str      = ""
    description:       str      = ""                    # one-liner for the UI card
    aliases:           List[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        stable=True,
        complexity_time="O(n²)", complexity_worst="O(n²)", complexity_space="O(1)",
        description="Repeatedly swaps adjacent out-of-order pairs; the largest value bubbles to the end.",
        aliases=["bubbleSort"],
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=_selection, pseudocode=_selection_pc,
        complexity_time="O(n²)", complexity_worst="O(n²)", complexity_space="O(1)",
        description="Finds the minimum of the unsorted suffix and swaps it to the front.",
        aliases=["selectionSort"],
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=_insertion, pseudocode=_insertion_pc,
        stable=True,
        complexity_time="O(n²)", complexity_worst="O(n²)", complexity_space="O(1)",
        description="Shifts larger elements right to open a slot for each new key.",
        aliases=["insertionSort"],
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=_merge, pseudocode=_merge_pc,
        stable=True, in_place=False,
        complexity_time="O(n log n)", complexity_worst="O(n log n)", complexity_space="O(n)",
        description="Splits in halves, sorts each, then merges them back together.",
        aliases=["mergeSort"],
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort (Lomuto)", fn=_quick, pseudocode=_quick_pc,
        complexity_time="O(n log n)", complexity_worst="O(n²)", complexity_space="O(log n)",
        description="Partitions around the last element, then sorts each side.",
        aliases=["quickSort"],
    ),

    "heap": AlgoInfo(
        key="heap", label="Heap Sort", fn=_heap, pseudocode=_heap_pc,
        complexity_time="O(n log n)", complexity_worst="O(n log n)", complexity_space="O(1)",
        description="Builds a max-heap, then repeatedly moves the root to the sorted tail.",
        aliases=["heapSort"],
    ),
}

_ALIASES: Dict[str, str] = {
    alias: info.key for info in REGISTRY.values() for alias in info.aliases
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key (or alias), or None."""
    if not isinstance(key, str):
        return None
    return REGISTRY.get(_ALIASES.get(key, key))


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def generate_trace(algorithm_name: str, values: Sequence[int]) -> Trace:
    """
    Run the named tracer over a private copy of `values`.

    Raises:
        UnknownAlgorithm – `algorithm_name` is not registered.
    """
    info = get_algorithm(algorithm_name)
    if info is None:
        raise UnknownAlgorithm(algorithm_name)

    trace = info.fn(values)
    logger.debug("%s traced %d element(s) in %d step(s)", info.key, len(values), len(trace))
    return trace


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "StepBuilder",
    "Trace",
    "TraceStep",
    "UnknownAlgorithm",
    "generate_trace",
    "get_algorithm",
    "list_algorithms",
]
