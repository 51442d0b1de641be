import pytest

from algorithms.sorting import bubble_sort
from algorithms.step import StepBuilder, StepKind
from engine import PROFILES, RunRejected, RunState, Stepper, resolve_speed
from engine.speed import SPEED_PRESETS, clamp_speed


def make_stepper(**kwargs):
    return Stepper(PROFILES["sorting"], **kwargs)


def test_start_does_not_publish_until_stepped():
    seq = [5, 3, 8, 1]
    stepper = make_stepper()
    stepper.start(bubble_sort(seq), label="bubble")

    assert stepper.state is RunState.RUNNING
    assert stepper.events == []
    assert seq == [5, 3, 8, 1]


def test_step_advances_to_next_boundary():
    stepper = make_stepper()
    stepper.start(bubble_sort([5, 3, 8, 1]))

    first = stepper.step()
    assert [e.kind for e in first] == [StepKind.COMPARE]

    # the swap for the first comparison is published with the next compare
    second = stepper.step()
    assert [e.kind for e in second] == [StepKind.SWAP, StepKind.COMPARE]
    assert second[-1].pause


def test_run_to_completion_summary():
    seq = [5, 3, 8, 1]
    stepper = make_stepper()
    stepper.start(bubble_sort(seq), label="bubble")

    summary = stepper.run_to_completion()

    assert summary.state is RunState.COMPLETED
    assert summary.result == [1, 3, 5, 8]
    assert summary.counters["comparisons"] == 6
    assert summary.counters["swaps"] == 4
    assert summary.steps == 6
    assert summary.label == "bubble"
    assert stepper.step() == []


def test_concurrent_start_is_rejected_and_active_run_untouched():
    stepper = make_stepper()
    stepper.start(bubble_sort([5, 3, 8, 1]), label="first")
    stepper.step()
    published = list(stepper.events)

    other = [9, 8, 7]
    with pytest.raises(RunRejected):
        stepper.start(bubble_sort(other), label="second")

    assert stepper.state is RunState.RUNNING
    assert stepper.label == "first"
    assert stepper.events == published
    assert other == [9, 8, 7]


def test_new_run_allowed_after_terminal_state():
    stepper = make_stepper()
    stepper.start(bubble_sort([2, 1]))
    stepper.run_to_completion()
    stepper.start(bubble_sort([3, 1, 2]))
    assert stepper.state is RunState.RUNNING
    assert stepper.events == []


def test_cancellation_freezes_counters_and_leaves_partial_state():
    seq = [5, 3, 8, 1]
    stepper = make_stepper()
    stepper.start(bubble_sort(seq))
    stepper.step()                      # compare 5 / 3

    assert stepper.cancel()
    assert stepper.state is RunState.RUNNING   # observed at the next boundary
    assert stepper.step() == []

    assert stepper.state is RunState.CANCELLED
    assert stepper.counters == {"comparisons": 1, "swaps": 0, "writes": 0, "visits": 0}
    # the swap belonging to the next step was never applied
    assert seq == [5, 3, 8, 1]
    assert stepper.result is None


def test_cancel_from_subscriber_during_play():
    seq = [5, 3, 8, 1]
    sleeps = []

    def on_step(event):
        if event.counters["comparisons"] == 3:
            stepper.cancel()

    stepper = make_stepper(on_step=on_step)
    stepper.start(bubble_sort(seq))
    summary = stepper.play(sleep=sleeps.append)

    assert summary.state is RunState.CANCELLED
    assert summary.counters["comparisons"] == 3
    assert summary.counters["swaps"] == 1
    assert seq == [3, 5, 8, 1]
    assert len(sleeps) == 3


def test_cancel_when_idle_is_a_no_op():
    stepper = make_stepper()
    assert not stepper.cancel()
    assert stepper.state is RunState.IDLE


def test_play_sleeps_delay_between_boundaries():
    sleeps = []
    stepper = make_stepper(speed=100)
    stepper.start(bubble_sort([5, 3, 8, 1]))

    summary = stepper.play(sleep=sleeps.append)

    assert summary.state is RunState.COMPLETED
    assert sleeps == [0.01] * 6


def test_tick_waits_for_delay():
    stepper = make_stepper(speed=100)        # 10 ms
    stepper.start(bubble_sort([3, 2, 1]))

    assert stepper.tick(now=0.0)
    assert stepper.tick(now=0.005) == []
    assert stepper.tick(now=0.011)


def test_reset_cancels_running_run():
    stepper = make_stepper()
    stepper.start(bubble_sort([3, 2, 1]))
    stepper.step()
    stepper.reset()

    assert stepper.state is RunState.IDLE
    assert stepper.events == []
    assert stepper.counters == {}


def test_subscribers_receive_every_event():
    received = []
    stepper = make_stepper()
    stepper.subscribe(received.append)
    stepper.start(bubble_sort([2, 1]))
    stepper.run_to_completion()
    assert received == stepper.events
    assert received[-1].is_final


def test_generator_that_returns_without_final_event_completes():
    def two_steps():
        sb = StepBuilder()
        yield sb.build(StepKind.VISIT, "one")
        yield sb.build(StepKind.VISIT, "two")

    stepper = make_stepper()
    stepper.start(two_steps())
    assert stepper.run_to_completion().state is RunState.COMPLETED
    assert len(stepper.events) == 2


# ---------------------------------------------------------------------------
# Speed
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("family, speed, expected", [
    ("sorting", 30, 420),
    ("sorting", 100, 10),
    ("searching", 100, 100),
    ("graph", 30, 760),
    ("graph", 100, 200),
    ("dp", 1, 496),
    ("tree", 1, 500),
    ("tree", 100, 500),
])
def test_delay_profiles(family, speed, expected):
    assert PROFILES[family].delay_ms(speed) == expected


def test_faster_speed_never_increases_delay():
    for profile in PROFILES.values():
        delays = [profile.delay_ms(s) for s in range(1, 101)]
        assert delays == sorted(delays, reverse=True)


def test_speed_is_clamped():
    stepper = make_stepper()
    stepper.set_speed(500)
    assert stepper.speed == 100
    stepper.set_speed(0)
    assert stepper.speed == 1
    assert clamp_speed(-20) == 1


def test_resolve_speed_accepts_presets_and_numbers():
    assert resolve_speed("fast") == SPEED_PRESETS["fast"] == 70
    assert resolve_speed("45") == 45
    assert resolve_speed(None) == 30
    with pytest.raises(ValueError):
        resolve_speed("warp")
