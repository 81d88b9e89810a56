import pytest

from pomodoro.timer import DEFAULT_DURATION_SECONDS, TimerState


def test_initial_state_is_idle() -> None:
    state = TimerState.initial()

    assert state.running is False
    assert state.seconds_elapsed == 0
    assert state.percent == 0.0
    assert state.duration_seconds == DEFAULT_DURATION_SECONDS
    assert state.remaining_seconds == DEFAULT_DURATION_SECONDS
    assert state.start_time is None


def test_start_sets_running_and_end_time() -> None:
    state = TimerState.initial().start(120, now=1000.0)

    assert state.running is True
    assert state.duration_seconds == 120
    assert state.start_time == 1000.0
    assert state.end_time == 1120.0
    assert state.remaining_seconds == 120


def test_start_without_duration_keeps_current_one() -> None:
    state = TimerState.initial(300).start(now=0.0)

    assert state.duration_seconds == 300


@pytest.mark.parametrize("duration", [1, 3, 7, 60])
def test_percent_follows_tick_count(duration: int) -> None:
    state = TimerState.initial().start(duration, now=0.0)
    for n in range(1, duration + 1):
        state = state.advance_one_tick(now=float(n))
        assert state.percent == n / duration


def test_completion_clamps_and_stops() -> None:
    state = TimerState.initial().start(3, now=0.0)
    for n in range(3):
        state = state.advance_one_tick(now=float(n + 1))

    assert state.percent == 1.0
    assert state.running is False
    assert state.complete is True


def test_tick_after_completion_is_ignored() -> None:
    state = TimerState.initial().start(1, now=0.0).advance_one_tick(now=1.0)

    assert state.advance_one_tick(now=2.0) is state


def test_full_pomodoro_scenario() -> None:
    state = TimerState.initial().start(1500, now=0.0)
    for n in range(1499):
        state = state.advance_one_tick(now=float(n + 1))

    assert state.percent == pytest.approx(0.99933, abs=1e-5)
    assert state.running is True

    state = state.advance_one_tick(now=1500.0)
    assert state.percent == 1.0
    assert state.running is False


def test_restart_resets_progress() -> None:
    state = TimerState.initial().start(10, now=0.0)
    state = state.advance_one_tick(now=1.0).advance_one_tick(now=2.0)

    restarted = state.start(10, now=5.0)

    assert restarted.seconds_elapsed == 0
    assert restarted.percent == 0.0
    assert restarted.start_time == 5.0


def test_remaining_follows_clock_not_ticks() -> None:
    state = TimerState.initial().start(10, now=100.0)
    # One tick delivered late: three wall-clock seconds have passed.
    state = state.advance_one_tick(now=103.4)

    assert state.seconds_elapsed == 1
    assert state.percent == pytest.approx(0.1)
    assert state.remaining_seconds == 7


def test_remaining_never_negative() -> None:
    state = TimerState.initial().start(2, now=0.0).advance_one_tick(now=50.0)

    assert state.remaining_seconds == 0


def test_resize_within_cap() -> None:
    state = TimerState.initial().resize(60, padding=3, max_width=80)

    assert state.render_width == 50
    assert state.remaining_seconds == DEFAULT_DURATION_SECONDS


def test_resize_pins_to_max_width() -> None:
    state = TimerState.initial().resize(100, padding=3, max_width=80)

    assert state.render_width == 80
    assert state.remaining_seconds is None


@pytest.mark.parametrize("width", [95, 120, 500])
def test_resize_cap_is_idempotent(width: int) -> None:
    state = TimerState.initial().resize(width, padding=3, max_width=80)

    assert state.render_width == 80
    assert state.resize(width, padding=3, max_width=80).render_width == 80


def test_resize_tiny_viewport_floors_at_zero() -> None:
    state = TimerState.initial().resize(4, padding=3, max_width=80)

    assert state.render_width == 0


def test_tick_restores_readout_after_cap() -> None:
    state = TimerState.initial().start(10, now=0.0).resize(200)
    assert state.remaining_seconds is None

    state = state.advance_one_tick(now=1.0)
    assert state.remaining_seconds == 9


def test_each_start_is_a_new_run() -> None:
    state = TimerState.initial()

    assert state.run == 0
    assert state.start(now=0.0).run == 1
    assert state.start(now=0.0).start(now=1.0).run == 2
