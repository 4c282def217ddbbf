import argparse
import curses
import logging
import os
import sys

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

from _version import __version__
from app_state import AppState
from char_database import UnicodeDatabase, compute_max_code_point
from config_paths import load_config
from navigation import decode_rune, parse_code_point
from orchestrator import Orchestrator

logger = logging.getLogger(__name__)


def _start_point(text):
    try:
        return parse_code_point(text)
    except ValueError:
        pass
    if len(text) == 1:
        return decode_rune(text)
    raise argparse.ArgumentTypeError(
        f"not a code point or single character: {text!r}"
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog="unibrowse",
        description="unibrowse - terminal browser for Unicode code points",
    )
    parser.add_argument(
        "start",
        nargs="?",
        type=_start_point,
        default=0,
        help="code point to open at (65, 0x41, 0101, 0b1000001 or A)",
    )
    parser.add_argument(
        "-v", "-V", "--version", action="version", version=__version__
    )
    parser.add_argument("--log-file", help="write a debug log to this file")
    parser.add_argument(
        "--debug", action="store_true", help="log at DEBUG level (needs --log-file)"
    )
    return parser


def setup_logging(log_file=None, debug=False):
    if not log_file:
        # curses owns the terminal; keep logging off stderr
        logging.getLogger().addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file, args.debug)

    config = load_config()
    db = UnicodeDatabase(unicode_version=config["UNICODE_VERSION"])
    max_cp = compute_max_code_point(db)
    logger.info("Unicode %s, highest displayable code point U+%04X", db.version, max_cp)

    state = AppState(max_cp, current=min(args.start, max_cp))

    def curses_main(stdscr):
        Orchestrator(stdscr, state, db, config).run()

    try:
        curses.wrapper(curses_main)
    except curses.error as e:
        logger.error("terminal error: %s", e)
        print(f"unibrowse: terminal error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
