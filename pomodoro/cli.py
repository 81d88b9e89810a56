import argparse
import curses
import logging
import sys

from . import __version__, timecalc
from .config import get_config_path, load_config, load_settings
from .logger import configure_logging, debug_enabled

log = logging.getLogger(__name__)


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid duration: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError("duration must be at least 1 second")
    return value


def parse_args(argv=None):
    epilog = "Controls: s or ctrl+s start, q or ctrl+c quit."
    parser = argparse.ArgumentParser(
        prog="pomodoro",
        description="Full-screen terminal Pomodoro countdown",
        epilog=epilog,
    )
    parser.add_argument(
        "--duration",
        type=_positive_int,
        default=None,
        metavar="SECONDS",
        help="countdown length in seconds (default: from config, else 1500)",
    )
    parser.add_argument("--debug", action="store_true", help="write debug records to the log file")
    parser.add_argument("--version", action="version", version=f"pomodoro {__version__}")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(debug=args.debug or debug_enabled())
    config = load_config()
    settings = load_settings(config, duration_seconds=args.duration)
    log.info(
        "config %s, duration %s",
        get_config_path(),
        timecalc.format_duration(settings.duration_seconds),
    )

    try:
        from .ui import run

        notices = run(settings)
    except KeyboardInterrupt:
        return 0
    except (curses.error, OSError) as exc:
        log.exception("terminal host failed")
        print(f"Oh no! {exc}", file=sys.stderr)
        return 1
    for line in notices:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
