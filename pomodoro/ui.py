import curses
import logging
import sys
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from .config import Settings
from .controller import HELP_TEXT, Controller
from .events import Command, KeyPressed, PrintLine, Quit, ScheduleTick, TickElapsed, ViewportResized

log = logging.getLogger(__name__)

FRAME_DELAY = 1.0 / 24.0
HELP_COLOR_PAIR = 1

_CTRL_NAMES = {
    3: "ctrl+c",
    19: "ctrl+s",
}


def key_name(ch) -> str:
    """Name a raw getch()/get_wch() value the way the key sets spell it."""
    if isinstance(ch, str):
        if len(ch) == 1 and ord(ch) < 32:
            return key_name(ord(ch))
        return ch
    if ch in _CTRL_NAMES:
        return _CTRL_NAMES[ch]
    if 1 <= ch <= 26:
        return f"ctrl+{chr(ch + 96)}"
    if 32 <= ch <= 126:
        return chr(ch)
    try:
        return curses.keyname(ch).decode("ascii", "ignore")
    except (curses.error, ValueError):
        return ""


class TickScheduler:
    """One-shot delayed events, fired no earlier than their due time."""

    def __init__(self) -> None:
        self._pending: List[Tuple[float, Callable[[float], object]]] = []

    def __len__(self) -> int:
        return len(self._pending)

    def schedule_after(self, delay: float, produce: Callable[[float], object], now: Optional[float] = None) -> None:
        if now is None:
            now = time.time()
        self._pending.append((now + delay, produce))
        self._pending.sort(key=lambda entry: entry[0])

    def clear(self) -> None:
        self._pending.clear()

    def next_due(self) -> Optional[float]:
        if not self._pending:
            return None
        return self._pending[0][0]

    def pop_due(self, now: float) -> List[object]:
        events = []
        while self._pending and self._pending[0][0] <= now:
            _, produce = self._pending.pop(0)
            events.append(produce(now))
        return events


@dataclass
class HostState:
    scheduler: TickScheduler = field(default_factory=TickScheduler)
    notices: List[str] = field(default_factory=list)
    quitting: bool = False


def _tick_factory(run: Optional[int]) -> Callable[[float], TickElapsed]:
    def produce(now: float) -> TickElapsed:
        return TickElapsed(now, run)

    return produce


def apply_commands(host: HostState, commands: List[Command], now: float) -> None:
    for command in commands:
        if isinstance(command, ScheduleTick):
            # Only ticks are scheduled; a new one supersedes any still pending.
            host.scheduler.clear()
            host.scheduler.schedule_after(command.delay, _tick_factory(command.run), now=now)
        elif isinstance(command, Quit):
            host.quitting = True
        elif isinstance(command, PrintLine):
            host.notices.append(command.text)
        else:
            log.warning("unknown command %r", command)


def dispatch_all(controller: Controller, host: HostState, events: List[object], now: float) -> None:
    for event in events:
        apply_commands(host, controller.dispatch(event), now)
        if host.quitting:
            return


def _read_events(stdscr, now: float) -> List[object]:
    events: List[object] = []
    while True:
        ch = stdscr.getch()
        if ch == -1:
            return events
        if ch == curses.KEY_RESIZE:
            rows, cols = stdscr.getmaxyx()
            events.append(ViewportResized(cols, rows))
            continue
        events.append(KeyPressed(key_name(ch), now))


def _help_attr() -> int:
    # Gray help line; plain dim text where the terminal has no colors.
    try:
        curses.start_color()
        curses.use_default_colors()
        gray = 8 if curses.COLORS > 8 else curses.COLOR_WHITE
        curses.init_pair(HELP_COLOR_PAIR, gray, -1)
        return curses.color_pair(HELP_COLOR_PAIR) | curses.A_DIM
    except curses.error:
        return curses.A_DIM


def styled_lines(lines: List[str], help_attr: int) -> List[Tuple[str, int]]:
    help_text = HELP_TEXT.strip()
    return [(line, help_attr if line.strip() == help_text else 0) for line in lines]


def _draw(stdscr, lines: List[Tuple[str, int]]) -> None:
    rows, cols = stdscr.getmaxyx()
    stdscr.erase()
    for y, (line, attr) in enumerate(lines[:rows]):
        try:
            stdscr.addstr(y, 0, line[:cols], attr)
        except curses.error:
            pass
    stdscr.refresh()


def frame_lines(controller: Controller, host: HostState) -> List[str]:
    return list(host.notices) + controller.view().split("\n")


def run(settings: Settings) -> List[str]:
    """Drive the timer on the terminal until a quit key; return the notices."""
    stdscr = curses.initscr()
    sys.stdout.write("\x1b[?1049h")
    sys.stdout.flush()
    curses.noecho()
    # raw mode so ctrl+c and ctrl+s arrive as keys instead of signals/flow control
    curses.raw()
    stdscr.keypad(True)
    stdscr.nodelay(True)
    try:
        curses.curs_set(0)
    except curses.error:
        pass

    controller = Controller(settings)
    host = HostState()
    help_attr = _help_attr()
    rows, cols = stdscr.getmaxyx()
    log.info("starting host %dx%d duration=%ds", cols, rows, settings.duration_seconds)

    try:
        dispatch_all(controller, host, [ViewportResized(cols, rows)], time.time())
        while not host.quitting:
            now = time.time()
            events = _read_events(stdscr, now) + host.scheduler.pop_due(now)
            dispatch_all(controller, host, events, now)
            if host.quitting:
                break
            _draw(stdscr, styled_lines(frame_lines(controller, host), help_attr))
            time.sleep(FRAME_DELAY)
    finally:
        curses.noraw()
        stdscr.keypad(False)
        curses.echo()
        curses.endwin()
        sys.stdout.write("\x1b[?1049l")
        sys.stdout.flush()
    return host.notices
