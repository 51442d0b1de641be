"""
step.py — Algorithm Step Event
===============================
Every algorithm is a generator that yields StepEvent objects.
A StepEvent is a frozen description of ONE observable change:

    • What kind of thing happened (compare, swap, visit, fill, …)
    • Which indices / nodes / edges were involved
    • What was written where (`changes` – a diff, never a full copy)
    • The running counters at that moment
    • Which line of pseudocode is executing right now
    • A plain-English description of the step

Design decisions:
  - StepEvent is a plain frozen dataclass.  The algorithm generator is the
    only writer; the stepper / renderer / recorder are pure readers.
  - The generator applies the mutation an event describes immediately
    before yielding it, so event and mutation are published together.
  - `pause=False` marks a step-adjacent event: it is published right away
    but does not get its own delay or cancellation check.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class StepKind(Enum):
    INIT      = "init"
    COMPARE   = "compare"
    SWAP      = "swap"
    WRITE     = "write"
    DIVIDE    = "divide"      # merge sort, informational only
    PIVOT     = "pivot"       # quick sort, one per partition
    VISIT     = "visit"
    FOUND     = "found"
    NOT_FOUND = "not_found"
    EDGE      = "edge"
    RELAX     = "relax"
    FINALIZE  = "finalize"
    INSERT    = "insert"
    EXTRACT   = "extract"
    ADVANCE   = "advance"
    MISS      = "miss"
    FILL      = "fill"
    EMPTY     = "empty"
    DONE      = "done"


# ---------------------------------------------------------------------------
# Counters — owned by the generator, snapshotted into every event
# ---------------------------------------------------------------------------
@dataclass
class Counters:
    comparisons: int = 0
    swaps:       int = 0
    writes:      int = 0
    visits:      int = 0

    def snapshot(self) -> Dict[str, int]:
        return {
            "comparisons": self.comparisons,
            "swaps":       self.swaps,
            "writes":      self.writes,
            "visits":      self.visits,
        }


@dataclass(frozen=True)
class StepEvent:
    """
    Attributes:
        step_number     : 0-based index of this event in the run.
        kind            : StepKind of the change.
        description     : Human-readable text for the log / status area.
        indices         : Sequence indices involved (compare pair, swap pair, …).
        changes         : {index_or_key: new_value} written by this step.
        nodes           : Graph / tree / trie node ids involved.
        edges           : Edge keys involved.
        pseudocode_line : 0-based index of the pseudocode line executing now.
        overlay         : Free-form algorithm data:
                            • "low" / "high" / "mid" – binary search bounds
                            • "queue" / "stack"       – graph frontier contents
                            • "distances"             – Dijkstra distance map
                            • "cell" / "inputs"       – DP recurrence inputs
        counters        : Counter snapshot after this step.
        pause           : True if this event is a step boundary.
        is_final        : True on the very last event of a run.
        result          : Terminal result (only meaningful when is_final).
    """

    step_number:     int                   = 0
    kind:            StepKind              = StepKind.INIT
    description:     str                   = ""
    indices:         Tuple[int, ...]       = ()
    changes:         Dict[Any, Any]        = field(default_factory=dict)
    nodes:           Tuple[Any, ...]       = ()
    edges:           Tuple[str, ...]       = ()
    pseudocode_line: int                   = 0
    overlay:         Dict[str, Any]        = field(default_factory=dict)
    counters:        Dict[str, int]        = field(default_factory=dict)
    pause:           bool                  = True
    is_final:        bool                  = False
    result:          Any                   = None

    def to_dict(self) -> dict:
        return {
            "step_number":     self.step_number,
            "kind":            self.kind.value,
            "description":     self.description,
            "indices":         list(self.indices),
            "changes":         {str(k): v for k, v in self.changes.items()},
            "nodes":           list(self.nodes),
            "edges":           list(self.edges),
            "pseudocode_line": self.pseudocode_line,
            "overlay":         dict(self.overlay),
            "counters":        dict(self.counters),
            "pause":           self.pause,
            "is_final":        self.is_final,
            "result":          self.result,
        }


# ---------------------------------------------------------------------------
# Convenience builder so algorithms don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Numbers events and snapshots counters so algorithms stay readable.

    Usage inside an algorithm generator:
        sb = StepBuilder()
        sb.counters.comparisons += 1
        yield sb.build(StepKind.COMPARE, "Compare 5 and 3", indices=(0, 1), line=3)
    """

    def __init__(self, counters: Optional[Counters] = None):
        self.counters: Counters = counters or Counters()
        self.step_no:  int      = 0

    def build(
        self,
        kind: StepKind,
        description: str,
        *,
        indices: Tuple[int, ...] = (),
        changes: Optional[Dict[Any, Any]] = None,
        nodes: Tuple[Any, ...] = (),
        edges: Tuple[str, ...] = (),
        line: int = 0,
        overlay: Optional[Dict[str, Any]] = None,
        pause: bool = True,
        is_final: bool = False,
        result: Any = None,
    ) -> StepEvent:
        event = StepEvent(
            step_number=self.step_no,
            kind=kind,
            description=description,
            indices=tuple(indices),
            changes=dict(changes or {}),
            nodes=tuple(nodes),
            edges=tuple(edges),
            pseudocode_line=line,
            overlay=dict(overlay or {}),
            counters=self.counters.snapshot(),
            pause=pause,
            is_final=is_final,
            result=result,
        )
        self.step_no += 1
        return event

    def done(self, description: str, result: Any = None, line: int = 0,
             kind: StepKind = StepKind.DONE, **kwargs) -> StepEvent:
        """Terminal event: published without its own delay."""
        return self.build(kind, description, line=line, pause=False,
                          is_final=True, result=result, **kwargs)
