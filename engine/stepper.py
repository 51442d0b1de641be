"""
stepper.py — Run Handle & Step-Boundary Driver
===============================================
The Stepper is the ONLY object that resumes an algorithm generator.
It owns the generator, buffers every StepEvent it has published, keeps
the last-published counters and exposes a start/step/cancel/play API.

State machine (per run):
    IDLE       →  start()             →  RUNNING
    RUNNING    →  (final event)       →  COMPLETED
    RUNNING    →  cancel() + boundary →  CANCELLED
    COMPLETED / CANCELLED  →  start() / reset()  →  RUNNING / IDLE

Concurrent runs are REJECTED: start() while RUNNING raises RunRejected and
leaves the active run untouched.

A step boundary is a pausing event (`pause=True`).  step() resumes the
generator until it reaches the next one, publishing every step-adjacent
event on the way.  The cancellation flag is checked before the generator
is resumed, never in the middle of a step, so a step is either fully
published or not started at all.

Driving:
  • step()               – manual single step (the "Next" button)
  • play(sleep)          – blocking loop with real delays
  • tick(now)            – for hosts that own a timer
  • run_to_completion()  – exhaust without delays (tests, recorder)

This class is NOT thread-safe.  One host thread drives one Stepper.
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Generator, List, Optional

from algorithms.step import StepEvent
from engine.errors import RunRejected
from engine.speed import PROFILES, SPEED_PRESETS, SpeedProfile, clamp_speed


logger = logging.getLogger(__name__)

Subscriber = Callable[[StepEvent], None]


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class RunState(Enum):
    IDLE      = "idle"
    RUNNING   = "running"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# ---------------------------------------------------------------------------
# Terminal summary
# ---------------------------------------------------------------------------
@dataclass
class RunSummary:
    state:    RunState
    result:   Any                 = None
    counters: Dict[str, int]      = field(default_factory=dict)
    steps:    int                 = 0       # pausing events published
    events:   int                 = 0       # all events published
    speed:    int                 = SPEED_PRESETS["medium"]
    delay_ms: float               = 0.0
    label:    str                 = ""

    def to_dict(self) -> dict:
        return {
            "state":    self.state.value,
            "result":   self.result,
            "counters": dict(self.counters),
            "steps":    self.steps,
            "events":   self.events,
            "speed":    self.speed,
            "delay_ms": self.delay_ms,
            "label":    self.label,
        }


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state    : Current RunState.
        events   : Every StepEvent published in the current run.
        counters : Counters of the last published event.
        result   : Result carried by the final event (COMPLETED runs only).
        speed    : 1–100; mapped to a delay by `profile`.
        profile  : SpeedProfile of the owning visualizer family.
        label    : Algorithm key of the current run (for logs / summary).
    """

    def __init__(
        self,
        profile: SpeedProfile = PROFILES["sorting"],
        on_step: Optional[Subscriber] = None,
        speed: int = SPEED_PRESETS["medium"],
    ):
        self._generator:   Optional[Generator[StepEvent, None, None]] = None
        self._subscribers: List[Subscriber] = []
        self._cancel_requested: bool = False
        self._last_tick:   Optional[float] = None

        self.state:    RunState         = RunState.IDLE
        self.events:   List[StepEvent]  = []
        self.counters: Dict[str, int]   = {}
        self.result:   Any              = None
        self.profile:  SpeedProfile     = profile
        self.speed:    int              = clamp_speed(speed)
        self.label:    str              = ""

        if on_step is not None:
            self.subscribe(on_step)

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------
    def subscribe(self, callback: Subscriber) -> None:
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(
        self,
        generator: Generator[StepEvent, None, None],
        speed: Optional[int] = None,
        label: str = "",
    ) -> None:
        """Attach a fresh generator.  Nothing is published until step()."""
        if self.state == RunState.RUNNING:
            generator.close()
            raise RunRejected(f"A run ({self.label or 'unnamed'}) is already in progress")

        self._generator        = generator
        self._cancel_requested = False
        self._last_tick        = None
        self.events            = []
        self.counters          = {}
        self.result            = None
        self.label             = label
        if speed is not None:
            self.set_speed(speed)
        self.state = RunState.RUNNING
        logger.info("run started: %s (speed=%d, delay=%.0fms)", label or "?", self.speed, self.delay_ms)

    def cancel(self) -> bool:
        """
        Request cancellation.  Observed at the next boundary, i.e. the next
        step() / tick() / play() iteration.  Returns False if nothing is running.
        """
        if self.state != RunState.RUNNING:
            return False
        self._cancel_requested = True
        logger.info("cancellation requested: %s", self.label or "?")
        return True

    def reset(self) -> None:
        """Back to IDLE, cancelling an active run first."""
        if self.state == RunState.RUNNING:
            self.cancel()
            self._observe_cancel()
        self._generator        = None
        self._cancel_requested = False
        self._last_tick        = None
        self.events            = []
        self.counters          = {}
        self.result            = None
        self.label             = ""
        self.state             = RunState.IDLE

    # ------------------------------------------------------------------
    # Advancing
    # ------------------------------------------------------------------
    def step(self) -> List[StepEvent]:
        """
        Advance to the next step boundary.

        Returns the events published by this call (step-adjacent events
        first, the pausing or final event last).  Returns [] when the run
        is not RUNNING or the cancellation flag was observed.
        """
        if self.state != RunState.RUNNING:
            return []
        if self._cancel_requested:
            self._observe_cancel()
            return []

        published: List[StepEvent] = []
        while True:
            try:
                event = next(self._generator)
            except StopIteration:
                self._complete()
                break
            self._publish(event)
            published.append(event)
            if event.is_final:
                self.result = event.result
                self._complete()
                break
            if event.pause:
                break
        return published

    def run_to_completion(self) -> "RunSummary":
        while self.state == RunState.RUNNING:
            self.step()
        return self.summary()

    def play(self, sleep: Callable[[float], None] = time.sleep) -> "RunSummary":
        """
        Blocking loop: publish a step, wait `delay_ms`, check cancellation,
        repeat.  `sleep` takes seconds and is injectable for hosts and tests.
        """
        while self.state == RunState.RUNNING:
            self.step()
            if self.state != RunState.RUNNING:
                break
            sleep(self.delay_ms / 1000.0)
        return self.summary()

    def tick(self, now: Optional[float] = None) -> List[StepEvent]:
        """
        Call periodically from a host timer.  The first tick of a run
        advances immediately; later ticks advance once `delay_ms` has
        elapsed since the previous advance.
        """
        if self.state != RunState.RUNNING:
            return []
        now = time.monotonic() if now is None else now
        if self._last_tick is not None and (now - self._last_tick) * 1000.0 < self.delay_ms:
            return []
        self._last_tick = now
        return self.step()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, speed: int) -> None:
        self.speed = clamp_speed(speed)

    @property
    def delay_ms(self) -> float:
        return self.profile.delay_ms(self.speed)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self.state == RunState.RUNNING

    @property
    def steps_published(self) -> int:
        return sum(1 for e in self.events if e.pause)

    def summary(self) -> RunSummary:
        return RunSummary(
            state=self.state,
            result=self.result,
            counters=dict(self.counters),
            steps=self.steps_published,
            events=len(self.events),
            speed=self.speed,
            delay_ms=self.delay_ms,
            label=self.label,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _publish(self, event: StepEvent) -> None:
        self.events.append(event)
        self.counters = dict(event.counters)
        logger.debug("step %d [%s] %s", event.step_number, event.kind.value, event.description)
        for callback in list(self._subscribers):
            callback(event)

    def _complete(self) -> None:
        self._generator = None
        self.state = RunState.COMPLETED
        logger.info(
            "run completed: %s after %d step(s), counters=%s",
            self.label or "?", self.steps_published, self.counters,
        )

    def _observe_cancel(self) -> None:
        if self._generator is not None:
            self._generator.close()
        self._generator = None
        self._cancel_requested = False
        self.state = RunState.CANCELLED
        logger.info(
            "run cancelled: %s after %d step(s), counters=%s",
            self.label or "?", self.steps_published, self.counters,
        )
