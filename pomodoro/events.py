from dataclasses import dataclass
from typing import FrozenSet, Optional, Union

START_KEYS: FrozenSet[str] = frozenset({"ctrl+s", "s"})
QUIT_KEYS: FrozenSet[str] = frozenset({"ctrl+c", "q"})

TICK_INTERVAL_SECONDS = 1.0
DONE_MESSAGE = "Pomodoro Timer done!"


@dataclass(frozen=True)
class KeyPressed:
    key: str
    timestamp: Optional[float] = None


@dataclass(frozen=True)
class ViewportResized:
    width: int
    height: int


@dataclass(frozen=True)
class TickElapsed:
    timestamp: float
    # Run the tick was scheduled for; None is accepted by any run.
    run: Optional[int] = None


@dataclass(frozen=True)
class ScheduleTick:
    delay: float = TICK_INTERVAL_SECONDS
    run: Optional[int] = None


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class PrintLine:
    text: str


Command = Union[ScheduleTick, Quit, PrintLine]
