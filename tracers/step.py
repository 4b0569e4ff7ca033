"""
step.py — Trace Step Snapshot
==============================
Every tracer returns a tuple of TraceStep objects.
A TraceStep is a frozen-in-time picture of everything the visualizer
needs to render one frame of a sort:

    • The full contents of the working array (a copy, never a diff)
    • Which indices are being compared / were just swapped
    • Which indices already hold their final value
    • Named pointer positions (pivot, i, j, key, …)
    • A plain-English narration of what just happened

Design decisions:
  - TraceStep is a frozen dataclass. It is a SNAPSHOT. The tracer is the
    only writer; the controller / renderer are pure readers.
  - Index fields are frozensets so two equal traces compare equal no
    matter the order indices were recorded in.
  - `pointers` is a free-form mapping so different algorithms can push
    whichever named positions they track.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Sequence, Tuple


@dataclass(frozen=True)
class TraceStep:
    """
    Attributes:
        array            : Snapshot of the working array at this moment.
        compared_indices : 0–2 indices being compared (empty if none).
        swapped_indices  : 0–2 indices just swapped or shifted (empty if none).
        sorted_indices   : Indices known to hold their final value.
        message          : Human-readable narration of this step.
        pointers         : {name: index} — pivot / low / high / i / j / key …
        step_number      : 0-based position of this step in its trace.
        is_final         : True on the very last step.
    """

    array:            Tuple[int, ...]      = ()
    compared_indices: FrozenSet[int]       = frozenset()
    swapped_indices:  FrozenSet[int]       = frozenset()
    sorted_indices:   FrozenSet[int]       = frozenset()
    message:          str                  = ""
    pointers:         Mapping[str, int]    = field(default_factory=dict)
    step_number:      int                  = 0
    is_final:         bool                 = False

    def __hash__(self) -> int:
        return hash((
            self.array,
            self.compared_indices,
            self.swapped_indices,
            self.sorted_indices,
            self.message,
            tuple(sorted(self.pointers.items())),
            self.step_number,
            self.is_final,
        ))

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly form; index sets become sorted lists."""
        return {
            "step_number":      self.step_number,
            "array":            list(self.array),
            "compared_indices": sorted(self.compared_indices),
            "swapped_indices":  sorted(self.swapped_indices),
            "sorted_indices":   sorted(self.sorted_indices),
            "message":          self.message,
            "pointers":         dict(self.pointers),
            "is_final":         self.is_final,
        }


Trace = Tuple[TraceStep, ...]


# ---------------------------------------------------------------------------
# Convenience builder so tracers don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Mutable scratch-pad that tracers use to record Steps cleanly.

    Usage inside a tracer:
        sb = StepBuilder(arr)
        sb.compare(j, j + 1)
        sb.emit(f"Comparing {arr[j]} with {arr[j + 1]}")
        ...
        return sb.finish()

    The builder holds a reference to the tracer's working list and copies
    it on every emit, so the tracer mutates freely between emits.
    """

    def __init__(self, working: Sequence[int]):
        self.working = working
        self.steps: list = []
        self.sorted_set: set = set()
        self.reset()

    def reset(self):
        """Clear the per-step highlights. The sorted set is persistent."""
        self.compared: Tuple[int, ...]  = ()
        self.swapped:  Tuple[int, ...]  = ()
        self.pointers: Dict[str, int]   = {}

    # -- helpers --
    def compare(self, *indices: int):
        self.compared = indices

    def swap(self, *indices: int):
        self.swapped = indices

    def point(self, **pointers: Optional[int]):
        for name, idx in pointers.items():
            if idx is not None:
                self.pointers[name] = idx

    def mark_sorted(self, *indices: int):
        self.sorted_set.update(indices)

    def mark_sorted_range(self, indices: Iterable[int]):
        self.sorted_set.update(indices)

    def emit(self, message: str) -> TraceStep:
        """Snapshot the current state, append it, and clear the highlights."""
        step = TraceStep(
            array=tuple(self.working),
            compared_indices=frozenset(self.compared),
            swapped_indices=frozenset(self.swapped),
            sorted_indices=frozenset(self.sorted_set),
            message=message,
            pointers=MappingProxyType(dict(self.pointers)),
            step_number=len(self.steps),
        )
        self.steps.append(step)
        self.reset()
        return step

    def finish(self, message: str = "Sorting completed!") -> Trace:
        """Emit the terminal step (every index sorted) and return the trace."""
        self.reset()
        self.sorted_set = set(range(len(self.working)))
        step = TraceStep(
            array=tuple(self.working),
            sorted_indices=frozenset(self.sorted_set),
            message=message,
            pointers=MappingProxyType({}),
            step_number=len(self.steps),
            is_final=True,
        )
        self.steps.append(step)
        return tuple(self.steps)
