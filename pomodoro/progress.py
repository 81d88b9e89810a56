from dataclasses import dataclass

FULL_CHAR = "█"
EMPTY_CHAR = "░"


@dataclass(frozen=True)
class ProgressStyle:
    full_char: str = FULL_CHAR
    empty_char: str = EMPTY_CHAR
    show_percentage: bool = True


DEFAULT_STYLE = ProgressStyle()


def _clamp(percent: float) -> float:
    return max(0.0, min(1.0, percent))


def _percentage_text(percent: float) -> str:
    return f" {int(round(percent * 100)):3d}%"


def render_progress(percent: float, width: int, style: ProgressStyle = DEFAULT_STYLE) -> str:
    """Draw a one-line bar of at most ``width`` cells filled to ``percent``."""
    if width <= 0:
        return ""
    percent = _clamp(percent)
    suffix = _percentage_text(percent) if style.show_percentage else ""
    bar_width = width - len(suffix)
    if bar_width <= 0:
        return suffix[-width:]
    filled = int(round(bar_width * percent))
    filled = max(0, min(bar_width, filled))
    return style.full_char * filled + style.empty_char * (bar_width - filled) + suffix
