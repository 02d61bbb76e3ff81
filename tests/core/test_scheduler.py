#!filepath: tests/core/test_scheduler.py
from itertools import islice

import pytest
from pydantic import ValidationError

from timecut.config import SchedulerConfig
from timecut.core import (
    Behavior,
    Cut,
    FlagInterrupt,
    Interrupt,
    Scheduler,
    SimpleLinearTimeGenerator,
    Track,
)
from timecut.core import blend
from timecut.utils.errors import StalledClockError


def _const(v):
    return Behavior.constant(v)


# ==================================================================
# single track, stepping
# ==================================================================
def test_simple(gen):
    behavior = Behavior.from_fn(lambda t: (t, -t))
    track = Track([Cut(0.0, 1.0, behavior)])
    scheduler = Scheduler([track], gen)

    for _ in range(10):
        assert scheduler.next_value() is not None

    assert scheduler.next_value() is None


def test_next_value_uses_pre_tick_time(gen):
    seen = []
    track = Track([Cut(0.0, 1.0, Behavior.from_fn(lambda t: seen.append(t) or t))])
    scheduler = Scheduler([track], gen)

    assert scheduler.next_value() == 0.0
    assert scheduler.next_value() == pytest.approx(0.1)
    assert seen[0] == 0.0


def test_prev_value_steps_backward():
    track = Track([Cut(0.0, 10.0, Behavior.from_fn(lambda t: t))])
    g = SimpleLinearTimeGenerator(0.0, 1.0)
    g.set(2.0)
    scheduler = Scheduler([track], g)

    assert scheduler.prev_value() == 2.0
    assert scheduler.prev_value() == 1.0
    assert scheduler.prev_value() == 0.0
    assert scheduler.prev_value() is None
    assert g.current() == -2.0


def test_iteration_is_open_ended(gen):
    track = Track([Cut(0.0, 1.0, _const("on"))])
    scheduler = Scheduler([track], gen)

    values = list(islice(scheduler, 13))
    assert values == ["on"] * 10 + [None] * 3


def test_iteration_restarts_after_reset(gen):
    track = Track([Cut(0.0, 0.3, _const(1))])
    scheduler = Scheduler([track], gen)

    first = list(islice(scheduler, 4))
    gen.reset()
    second = list(islice(scheduler, 4))

    assert first == second == [1, 1, 1, None]


def test_value_at_is_pure(gen):
    track = Track([Cut(0.0, 1.0, Behavior.from_fn(lambda t: t * 3))])
    scheduler = Scheduler([track], gen)

    assert scheduler.value_at(0.5) == scheduler.value_at(0.5) == 1.5
    assert gen.current() == 0.0


def test_value_at_in_gap_is_none(three_cut_track, gen):
    scheduler = Scheduler([three_cut_track], gen)
    assert scheduler.value_at(2.5) is None
    assert scheduler.value_at(3.0) == 6.0


def test_disabled_behavior_is_none(gen):
    track = Track([Cut(0.0, 10.0, Behavior.from_fn(lambda t: None if t < 5 else t))])
    scheduler = Scheduler([track], gen)

    assert scheduler.value_at(1.0) is None
    assert scheduler.value_at(6.0) == 6.0


def test_no_tracks(gen):
    scheduler = Scheduler([], gen)
    assert scheduler.value_at(0.0) is None
    assert list(scheduler.active_cuts(0.0)) == []
    assert scheduler.end is None


# ==================================================================
# multi track resolution
# ==================================================================
def test_active_cuts_in_track_order(gen):
    a = Cut(0.0, 10.0, _const("a"))
    b = Cut(3.0, 10.0, _const("b"))
    c = Cut(0.0, 2.0, _const("c"))
    scheduler = Scheduler([Track([a]), Track([c]), Track([b])], gen)

    assert list(scheduler.active_cuts(1.0)) == [a, c]
    assert list(scheduler.active_cuts(5.0)) == [a, b]
    assert list(scheduler.active_cuts(11.0)) == []


def test_earlier_cut_without_blend_wins(gen):
    """
    track 1 [0, 10) no blend, track 2 [3, 10) with an additive blend:
    the blend on track 2 has no one to merge after it, track 1 wins.
    """
    t1 = Track([Cut(0.0, 10.0, _const(1.0))])
    t2 = Track([Cut(3.0, 10.0, _const(2.0), blend=blend.add)])
    scheduler = Scheduler([t1, t2], gen)

    assert scheduler.value_at(1.0) == 1.0
    for t in (3.0, 5.0, 9.99):
        assert scheduler.value_at(t) == 1.0


def test_blend_on_earlier_cut_merges_later(gen):
    t1 = Track([Cut(0.0, 10.0, _const(1.0), blend=blend.add)])
    t2 = Track([Cut(3.0, 10.0, _const(2.0))])
    scheduler = Scheduler([t1, t2], gen)

    assert scheduler.value_at(1.0) == 1.0
    assert scheduler.value_at(5.0) == 3.0
    assert scheduler.value_at(10.0) is None


def test_absent_earlier_value_takes_later_regardless_of_blend(gen):
    disabled = Behavior.from_fn(lambda t: None)
    t1 = Track([Cut(0.0, 10.0, disabled, blend=blend.add)])
    t2 = Track([Cut(0.0, 10.0, _const(7.0), blend=blend.keep)])
    scheduler = Scheduler([t1, t2], gen)

    assert scheduler.value_at(4.0) == 7.0


def test_blend_ignores_disabled_later_cut(gen):
    t1 = Track([Cut(0.0, 10.0, _const(1.0), blend=blend.add)])
    t2 = Track([Cut(0.0, 10.0, Behavior.from_fn(lambda t: None))])
    scheduler = Scheduler([t1, t2], gen)

    assert scheduler.value_at(4.0) == 1.0


def test_inactive_first_track_does_not_seed(gen):
    t1 = Track([Cut(5.0, 6.0, _const(100.0), blend=blend.add)])
    t2 = Track([Cut(0.0, 10.0, _const(2.0))])
    scheduler = Scheduler([t1, t2], gen)

    assert scheduler.value_at(1.0) == 2.0
    assert scheduler.value_at(5.5) == 102.0


def test_three_tracks_chain(gen):
    t1 = Track([Cut(0.0, 10.0, _const(1), blend=blend.add)])
    t2 = Track([Cut(0.0, 10.0, _const(10), blend=blend.add)])
    t3 = Track([Cut(0.0, 10.0, _const(100))])
    assert Scheduler([t1, t2, t3], gen).value_at(1.0) == 111

    # the middle cut declares no blend: the third is dropped
    t2_plain = Track([Cut(0.0, 10.0, _const(10))])
    assert Scheduler([t1, t2_plain, t3], gen).value_at(1.0) == 11


def test_mix_blend_across_tracks(gen):
    t1 = Track([Cut(0.0, 1.0, _const(0.0), blend=blend.mix(0.25))])
    t2 = Track([Cut(0.0, 1.0, _const(8.0))])
    assert Scheduler([t1, t2], gen).value_at(0.5) == pytest.approx(2.0)


def test_end_is_last_stop_over_all_tracks(three_cut_track, gen):
    other = Track([Cut(0.0, 30.0, _const(1))])
    assert Scheduler([three_cut_track, other, Track([])], gen).end == 30.0


# ==================================================================
# bounded run
# ==================================================================
def _recording_tracks(log):
    a = Cut(0.0, 3.0, Behavior.from_fn(lambda t: log.append(("a", t))))
    b = Cut(3.0, 10.0, Behavior.from_fn(lambda t: log.append(("b", t))))
    return [Track([a, b])]


def test_schedule_runs_until_end():
    log = []
    scheduler = Scheduler(_recording_tracks(log), SimpleLinearTimeGenerator(0.0, 1.0))

    report = scheduler.schedule()

    assert report.steps == 10
    assert not report.interrupted
    assert report.last_t == 10.0
    assert [name for name, _ in log] == ["a"] * 3 + ["b"] * 7
    assert [t for _, t in log] == [float(i) for i in range(10)]


def test_schedule_resets_generator_first():
    log = []
    g = SimpleLinearTimeGenerator(0.0, 1.0)
    g.set(8.0)
    scheduler = Scheduler(_recording_tracks(log), g)

    assert scheduler.schedule().steps == 10
    assert scheduler.schedule().steps == 10


def test_schedule_on_value():
    track = Track([Cut(0.0, 1.0, Behavior.from_fn(lambda t: t * 2))])
    scheduler = Scheduler([track], SimpleLinearTimeGenerator(0.0, 0.25))

    seen = []
    scheduler.schedule(on_value=lambda t, v: seen.append((t, v)))

    assert seen == [(0.0, 0.0), (0.25, 0.5), (0.5, 1.0), (0.75, 1.5)]


def test_schedule_dispatches_gaps_as_none():
    track = Track([Cut(0.0, 1.0, _const("x")), Cut(2.0, 3.0, _const("y"))])
    scheduler = Scheduler([track], SimpleLinearTimeGenerator(0.0, 1.0))

    seen = []
    scheduler.schedule(on_value=lambda t, v: seen.append(v))
    assert seen == ["x", None, "y"]


def test_schedule_nothing_to_do(gen):
    report = Scheduler([Track([])], gen).schedule()
    assert report.steps == 0
    assert not report.interrupted


def test_schedule_interrupt_breaks_before_dispatch():
    log = []
    scheduler = Scheduler(_recording_tracks(log), SimpleLinearTimeGenerator(0.0, 1.0))
    scheduler.interruptible_with(
        lambda t: Interrupt.BREAK if t >= 4.0 else Interrupt.CONTINUE
    )

    report = scheduler.schedule()

    assert report.interrupted
    assert report.steps == 4
    assert report.last_t == 4.0
    assert [t for _, t in log] == [0.0, 1.0, 2.0, 3.0]


def test_schedule_flag_interrupt():
    flag = FlagInterrupt()
    calls = []

    def _act(t):
        calls.append(t)
        if t == 2.0:
            flag.request()  # observed on the next poll

    track = Track([Cut(0.0, 10.0, Behavior.from_fn(_act))])
    scheduler = Scheduler([track], SimpleLinearTimeGenerator(0.0, 1.0))
    scheduler.interruptible_with(flag)

    report = scheduler.schedule()

    assert report.interrupted
    assert calls == [0.0, 1.0, 2.0]
    assert flag.observed_at == 3.0


def test_schedule_interrupt_removed():
    log = []
    scheduler = Scheduler(_recording_tracks(log), SimpleLinearTimeGenerator(0.0, 1.0))
    scheduler.interruptible_with(lambda t: Interrupt.BREAK)
    scheduler.interruptible_with(None)

    assert scheduler.schedule().steps == 10


def test_schedule_max_steps():
    log = []
    scheduler = Scheduler(
        _recording_tracks(log),
        SimpleLinearTimeGenerator(0.0, 1.0),
        max_steps=5,
    )

    report = scheduler.schedule()
    assert report.steps == 5
    assert not report.interrupted


def test_schedule_propagates_behavior_errors():
    def _boom(t):
        raise RuntimeError("boom")

    track = Track([Cut(0.0, 1.0, Behavior.from_fn(_boom))])
    scheduler = Scheduler([track], SimpleLinearTimeGenerator(0.0, 0.5))

    with pytest.raises(RuntimeError, match="boom"):
        scheduler.schedule()


def test_from_config():
    track = Track([Cut(0.0, 1.0, _const(1))])
    scheduler = Scheduler.from_config(
        [track], SchedulerConfig(reset_value=0.0, delta=0.5, max_steps=1)
    )

    assert scheduler.max_steps == 1
    assert scheduler.time_generator.delta == 0.5
    assert scheduler.schedule().steps == 1


def test_schedule_dispatches_first_step_past_end():
    seen = []
    track = Track([Cut(0.0, 1.0, _const("x"))])
    scheduler = Scheduler([track], SimpleLinearTimeGenerator(5.0, 1.0))

    report = scheduler.schedule(on_value=lambda t, v: seen.append((t, v)))

    assert report.steps == 1
    assert report.last_t == 6.0
    assert seen == [(5.0, None)]


@pytest.mark.parametrize("delta", [-0.1, 0.0])
def test_schedule_rejects_clock_that_does_not_advance(delta):
    seen = []
    track = Track([Cut(0.0, 1.0, _const("x"))])
    scheduler = Scheduler([track], SimpleLinearTimeGenerator(0.0, delta))

    with pytest.raises(StalledClockError):
        scheduler.schedule(on_value=lambda t, v: seen.append(t))

    assert seen == [0.0]


@pytest.mark.parametrize("delta", [-0.1, 0.0])
def test_config_rejects_non_positive_delta(delta):
    with pytest.raises(ValidationError):
        SchedulerConfig(delta=delta)
