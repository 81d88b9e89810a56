import logging
from enum import Enum
from typing import Callable, List, Optional, Tuple

from . import timecalc
from .config import DEFAULT_PADDING_MIDDLE, Settings
from .events import (
    DONE_MESSAGE,
    QUIT_KEYS,
    START_KEYS,
    TICK_INTERVAL_SECONDS,
    Command,
    KeyPressed,
    PrintLine,
    Quit,
    ScheduleTick,
    TickElapsed,
    ViewportResized,
)
from .progress import render_progress as default_render_progress
from .timer import DEFAULT_MAX_WIDTH, DEFAULT_PADDING, TimerState

log = logging.getLogger(__name__)

HELP_TEXT = "Press ctrl+c or q to quit, Press ctrl+s or s to start. "

ProgressRenderer = Callable[[float, int], str]
TextStyle = Callable[[str], str]


class Phase(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETE = "complete"


def phase_of(state: TimerState) -> Phase:
    if state.complete:
        return Phase.COMPLETE
    if state.running:
        return Phase.RUNNING
    return Phase.IDLE


def _reduce_key(state: TimerState, event: KeyPressed, duration_seconds: Optional[int]) -> Tuple[TimerState, List[Command]]:
    key = event.key
    if key in QUIT_KEYS:
        return state, [Quit()]
    if key in START_KEYS:
        phase = phase_of(state)
        if phase == Phase.COMPLETE:
            return state, []
        started = state.start(duration_seconds, now=event.timestamp)
        # A tick still pending from an earlier run is ignored on arrival.
        return started, [ScheduleTick(TICK_INTERVAL_SECONDS, run=started.run)]
    return state, []


def _reduce_tick(state: TimerState, event: TickElapsed) -> Tuple[TimerState, List[Command]]:
    if phase_of(state) != Phase.RUNNING:
        return state, []
    if event.run is not None and event.run != state.run:
        return state, []
    state = state.advance_one_tick(event.timestamp)
    if state.complete:
        return state, [PrintLine(DONE_MESSAGE)]
    return state, [ScheduleTick(TICK_INTERVAL_SECONDS, run=state.run)]


def reduce(
    state: TimerState,
    event: object,
    duration_seconds: Optional[int] = None,
    padding: int = DEFAULT_PADDING,
    max_width: int = DEFAULT_MAX_WIDTH,
) -> Tuple[TimerState, List[Command]]:
    """Apply one event and return the next state with the commands to run.

    ``duration_seconds`` is the length used when a start key arrives; None
    keeps the state's own duration. Unknown events change nothing.
    """
    if isinstance(event, KeyPressed):
        return _reduce_key(state, event, duration_seconds)
    if isinstance(event, TickElapsed):
        return _reduce_tick(state, event)
    if isinstance(event, ViewportResized):
        return state.resize(event.width, padding, max_width), []
    return state, []


def _plain(text: str) -> str:
    return text


def remaining_text(state: TimerState) -> str:
    if state.remaining_seconds is None:
        return ""
    return timecalc.format_duration(state.remaining_seconds)


def render(
    state: TimerState,
    render_progress: ProgressRenderer = default_render_progress,
    help_style: TextStyle = _plain,
    padding: int = DEFAULT_PADDING,
    padding_middle: int = DEFAULT_PADDING_MIDDLE,
) -> str:
    pad = " " * padding
    pad_middle = " " * padding_middle
    return (
        "\n"
        + pad_middle + "\n\n"
        + pad_middle + remaining_text(state) + "\n\n"
        + pad + render_progress(state.percent, state.render_width) + "\n\n"
        + pad + help_style(HELP_TEXT) + "\n\n"
    )


class Controller:
    """Single owner of the timer state for one run."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        state: Optional[TimerState] = None,
        render_progress: ProgressRenderer = default_render_progress,
        help_style: TextStyle = _plain,
    ) -> None:
        self.settings = settings or Settings()
        self.state = state or TimerState.initial(self.settings.duration_seconds)
        self.render_progress = render_progress
        self.help_style = help_style

    @property
    def phase(self) -> Phase:
        return phase_of(self.state)

    def dispatch(self, event: object) -> List[Command]:
        before = self.phase
        self.state, commands = reduce(
            self.state,
            event,
            duration_seconds=self.settings.duration_seconds,
            padding=self.settings.padding,
            max_width=self.settings.max_width,
        )
        after = self.phase
        if before != after:
            log.info("timer %s -> %s", before.value, after.value)
        log.debug("event=%r commands=%r elapsed=%d", event, commands, self.state.seconds_elapsed)
        return commands

    def view(self) -> str:
        return render(
            self.state,
            render_progress=self.render_progress,
            help_style=self.help_style,
            padding=self.settings.padding,
            padding_middle=self.settings.padding_middle,
        )
