"""
engine/
-------
Run-control layer.

    from engine import Stepper, Recorder, Workspace, compare
"""

from engine.errors     import InvalidInput, RunRejected, UnknownOperation
from engine.speed      import SPEED_PRESETS, PROFILES, SpeedProfile, clamp_speed, resolve_speed
from engine.stepper    import Stepper, RunState, RunSummary
from engine.recorder   import Recorder, RunMetrics, ComparisonResult, compare, compare_algorithms, replay
from engine.visualizer import Visualizer, Workspace

__all__ = [
    "InvalidInput",
    "RunRejected",
    "UnknownOperation",
    "SPEED_PRESETS",
    "PROFILES",
    "SpeedProfile",
    "clamp_speed",
    "resolve_speed",
    "Stepper",
    "RunState",
    "RunSummary",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "compare_algorithms",
    "replay",
    "Visualizer",
    "Workspace",
]
