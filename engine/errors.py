"""
errors.py — Engine Error Types
===============================
Two failure kinds ever leave the engine, both raised synchronously at the
boundary and never from inside a running generator:

    InvalidInput  (ValueError)    – bad user input, nothing was mutated
    RunRejected   (RuntimeError)  – a run is already active on this visualizer
"""

from algorithms.validation import InvalidInput


class RunRejected(RuntimeError):
    """Start or mutation attempted while a run is Running."""


class UnknownOperation(LookupError):
    """Algorithm key or structure operation not known to a visualizer."""


__all__ = ["InvalidInput", "RunRejected", "UnknownOperation"]
