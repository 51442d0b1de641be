"""
recorder.py — Headless Run Recorder & Analytics
================================================
Records a complete algorithm run (every StepEvent), then computes the
metrics the Analytics panel and Comparison Mode need.

Usage:
    rec = Recorder()
    rec.start("bubble", [5, 3, 8, 1])
    metrics = rec.run_to_completion()
    rec.export()                          # JSON-serialisable snapshot

Comparison Mode:
    Two Recorders run on COPIES of the same data, then
    compare(rec1, rec2) → ComparisonResult.

Replay:
    replay(initial, events) rebuilds a sequence from its initial state by
    applying every event's `changes` in order.  Because events are diffs,
    replaying a prefix of the list reconstructs that intermediate state.
"""

import copy
import logging
import sys
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from algorithms import AlgoInfo, get_algorithm
from algorithms.step import StepEvent
from engine.errors import UnknownOperation
from engine.speed import PROFILES
from engine.stepper import RunState, Stepper
from structures.heap import BinaryHeap


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:     str   = ""
    algo_label:   str   = ""
    family:       str   = ""
    state:        str   = RunState.IDLE.value
    total_steps:  int   = 0          # pausing events
    total_events: int   = 0          # pausing + step-adjacent
    comparisons:  int   = 0
    swaps:        int   = 0
    writes:       int   = 0
    visits:       int   = 0
    wall_time_ms: float = 0.0        # wall-clock time to run to completion
    memory_bytes: int   = 0          # approx size of the event buffer
    result:       Any   = None


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_comparisons: str = ""
    winner_swaps:       str = ""
    winner_steps:       str = ""

    def to_dict(self) -> dict:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        events  : Full list of StepEvents from the run.
        metrics : Computed RunMetrics (available after run_to_completion).
        stepper : The underlying Stepper.
        data    : The data the run operated on (a copy unless copy_data=False).
    """

    def __init__(self):
        self.events:  List[StepEvent]      = []
        self.metrics: Optional[RunMetrics] = None
        self.stepper: Optional[Stepper]    = None
        self.data:    Any                  = None

        self._algo_info:  Optional[AlgoInfo] = None
        self._initial:    Any                = None
        self._params:     Dict[str, Any]     = {}

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(
        self,
        algo_key: str,
        data: Any,
        params: Optional[Dict[str, Any]] = None,
        copy_data: bool = True,
    ) -> None:
        """Validate, build the generator and attach it to a fresh Stepper."""
        info = get_algorithm(algo_key)
        if info is None:
            raise UnknownOperation(f"Unknown algorithm: {algo_key}")

        self._algo_info = info
        self._params    = dict(params or {})
        self.data       = copy.deepcopy(data) if copy_data else data
        self._initial   = copy.deepcopy(self.data)
        self.events     = []
        self.metrics    = None

        gen = info.prepare(self.data, self._params)
        self.stepper = Stepper(PROFILES[info.family])
        self.stepper.start(gen, label=info.key)

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, record every event, compute metrics."""
        if self.stepper is None:
            raise RuntimeError("Call start() first.")

        t0 = time.monotonic()
        self.stepper.run_to_completion()
        wall_ms = (time.monotonic() - t0) * 1000

        self.events  = list(self.stepper.events)
        self.metrics = self._compute_metrics(wall_ms)
        logger.debug("recorded %s: %d events", self.metrics.algo_key, len(self.events))
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    def replay(self, upto: Optional[int] = None) -> Any:
        """Initial sequence with the first `upto` events applied."""
        return replay(self._initial, self.events[:upto])

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "params":   dict(self._params),
            "initial":  replay(self._initial, []) if isinstance(self._initial, (list, BinaryHeap)) else None,
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "events":   [e.to_dict() for e in self.events],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info    = self._algo_info
        summary = self.stepper.summary()
        counters = summary.counters

        # approximate memory: sizeof the event buffer
        mem = sys.getsizeof(self.events)
        for e in self.events:
            mem += sys.getsizeof(e)

        return RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            family=info.family,
            state=summary.state.value,
            total_steps=summary.steps,
            total_events=summary.events,
            comparisons=counters.get("comparisons", 0),
            swaps=counters.get("swaps", 0),
            writes=counters.get("writes", 0),
            visits=counters.get("visits", 0),
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
            result=summary.result,
        )


# ---------------------------------------------------------------------------
# Replay
# ---------------------------------------------------------------------------
def replay(initial: Any, events: Iterable[StepEvent]) -> Any:
    """
    Apply integer-keyed `changes` to a copy of a sequence.  A key equal to
    the current length appends (heap insert grows the array); a None value
    at the last index removes that slot (heap extract shrinks it).  A heap
    replays its item list.  Other non-list data is returned unchanged.
    """
    if isinstance(initial, BinaryHeap):
        initial = initial.items
    if not isinstance(initial, list):
        return copy.deepcopy(initial)
    seq = list(initial)
    for event in events:
        for key, value in event.changes.items():
            if not isinstance(key, int):
                continue
            if value is None and key == len(seq) - 1:
                seq.pop()
            elif key == len(seq):
                seq.append(value)
            elif 0 <= key < len(seq):
                seq[key] = value
    return seq


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
        winner_comparisons=winner(l.comparisons, r.comparisons, l.algo_label, r.algo_label),
        winner_swaps=winner(l.swaps + l.writes, r.swaps + r.writes, l.algo_label, r.algo_label),
        winner_steps=winner(l.total_steps, r.total_steps, l.algo_label, r.algo_label),
    )


def compare_algorithms(
    left_key: str,
    right_key: str,
    data: Any,
    params: Optional[Dict[str, Any]] = None,
) -> ComparisonResult:
    """Run two algorithms headless on copies of the same data and compare."""
    recorders = []
    for key in (left_key, right_key):
        rec = Recorder()
        rec.start(key, data, params)
        rec.run_to_completion()
        recorders.append(rec)
    return compare(*recorders)
