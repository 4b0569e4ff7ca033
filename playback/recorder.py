"""
recorder.py — Run Recorder & Analytics
========================================
Runs one tracer over one array, keeps the Trace, and computes the
analytics the UI shows in the Analytics panel and Comparison Mode.

Usage:
    rec = Recorder()
    metrics = rec.run("merge", [5, 1, 4])   # trace + analytics card
    rec.export()                            # serialisable snapshot

Comparison Mode:
    The UI holds two Recorders (one per algorithm), runs both on the
    SAME array, then calls compare(rec1, rec2) → ComparisonResult.
"""

import logging
import sys
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from tracers import AlgoInfo, Trace, UnknownAlgorithm, get_algorithm

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:        str   = ""
    algo_label:      str   = ""
    size:            int   = 0          # number of elements sorted
    total_steps:     int   = 0          # number of TraceSteps recorded
    comparisons:     int   = 0          # steps comparing two indices
    swaps:           int   = 0          # steps that moved data (swaps and shifts)
    wall_time_ms:    float = 0.0        # wall-clock time to build the trace
    memory_bytes:    int   = 0          # approx size of the snapshot buffer


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_steps:       str = ""   # which algorithm needed fewer steps
    winner_comparisons: str = ""
    winner_swaps:       str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        trace   : The full Trace from the last run.
        metrics : Computed RunMetrics (available after run()).
    """

    def __init__(self):
        self.trace:   Trace                = ()
        self.metrics: Optional[RunMetrics] = None

        self._algo_info: Optional[AlgoInfo] = None
        self._values:    List[int]          = []

    def run(self, algo_key: str, values: Sequence[int]) -> RunMetrics:
        """Trace `values` with the named algorithm and compute metrics."""
        info = get_algorithm(algo_key)
        if info is None:
            raise UnknownAlgorithm(algo_key)

        self._algo_info = info
        self._values    = list(values)

        start = time.monotonic()
        self.trace = info.fn(self._values)
        wall_ms = (time.monotonic() - start) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        logger.info(
            "Recorded %s on %d element(s): %d step(s), %d comparison(s), %d swap(s)",
            info.key, len(self._values), self.metrics.total_steps,
            self.metrics.comparisons, self.metrics.swaps,
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "input":    list(self._values),
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    [s.to_dict() for s in self.trace],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info

        comparisons = sum(1 for s in self.trace if len(s.compared_indices) == 2)
        swaps       = sum(1 for s in self.trace if s.swapped_indices)

        # approximate memory: the step buffer plus each step's array snapshot
        mem = sys.getsizeof(self.trace)
        for s in self.trace:
            mem += sys.getsizeof(s) + sys.getsizeof(s.array)

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            size=len(self._values),
            total_steps=len(self.trace),
            comparisons=comparisons,
            swaps=swaps,
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val, l_key, r_key):
        if l_val == r_val:
            return "tie"
        return l_key if l_val < r_val else r_key

    return ComparisonResult(
        left=l,
        right=r,
        winner_steps      =winner(l.total_steps, r.total_steps, l.algo_label, r.algo_label),
        winner_comparisons=winner(l.comparisons, r.comparisons, l.algo_label, r.algo_label),
        winner_swaps      =winner(l.swaps,       r.swaps,       l.algo_label, r.algo_label),
    )
