import math
from typing import Optional


def round_seconds(value: float) -> int:
    # Half rounds away from zero.
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def remaining_seconds(end_time: Optional[float], now: float) -> int:
    if end_time is None:
        return 0
    return max(0, round_seconds(end_time - now))


def format_duration(total_seconds: int) -> str:
    """Compact duration text: 25m0s, 1h2m3s, 59s, 0s."""
    total = max(0, int(total_seconds))
    hours = total // 3600
    minutes = (total % 3600) // 60
    seconds = total % 60
    if hours:
        return f"{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{minutes}m{seconds}s"
    return f"{seconds}s"
