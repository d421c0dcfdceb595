"""Command-line entry point for confirm.

Asks a yes/no question and reports the answer through the exit status:
0 for yes, 1 for no or when the question went unanswered too many times.

    confirm "Delete all backups?" && rm -rf backups/
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Any, Callable, Optional

from pydantic import ValidationError

from . import __version__
from .config import (
    ENV_ASSUME_VAR,
    ConfigurationError,
    assumed_decision,
    parse_ask_count,
    parse_default_answer,
)
from .display import make_console
from .engine import ConfirmEngine
from .types import ConfirmResult, Decision, PromptConfig, ReaderMode

NOT_A_TTY_WARNING = "Warning: using confirm when stdin is not a tty is not supported."


def _argument_type(parse: Callable[[str], Any]) -> Callable[[str], Any]:
    """Adapt a config parser to argparse's ``type=`` protocol."""

    def convert(value: str) -> Any:
        try:
            return parse(value)
        except ConfigurationError as e:
            raise argparse.ArgumentTypeError(str(e)) from e

    return convert


def _stdin_is_tty() -> bool:
    try:
        return sys.stdin.isatty()
    except (AttributeError, ValueError):
        return False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="confirm",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "prompt",
        metavar="PROMPT",
        nargs="?",
        default="Continue?",
        help='Question to display; "Continue?" is shown as "Continue? [y/n]: "',
    )

    reading = parser.add_mutually_exclusive_group()
    reading.add_argument(
        "-f", "--full-words",
        action="store_true",
        help='Require an explicit "yes" or "no", not single letters',
    )
    reading.add_argument(
        "--no-enter",
        action="store_true",
        help="Read a single keystroke without waiting for enter",
    )

    parser.add_argument(
        "-d", "--default",
        dest="default_answer",
        type=_argument_type(parse_default_answer),
        default="retry",
        metavar="{yes,no,retry}",
        help="Answer used when the user just presses enter (default: retry, ask again)",
    )
    parser.add_argument(
        "-a", "--ask-count",
        dest="retry",
        type=_argument_type(parse_ask_count),
        default="3",
        metavar="N",
        help="Times to re-ask after the first prompt; 0 asks until answered (default: 3)",
    )

    assume = parser.add_mutually_exclusive_group()
    assume.add_argument(
        "--yes",
        dest="assume",
        action="store_const",
        const=Decision.YES,
        help="Don't ask, answer yes (exit 0)",
    )
    assume.add_argument(
        "--no",
        dest="assume",
        action="store_const",
        const=Decision.NO,
        help="Don't ask, answer no (exit 1)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log each attempt to stderr and show full tracebacks on error",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.epilog = (
        f"Set {ENV_ASSUME_VAR}=yes or {ENV_ASSUME_VAR}=no to answer without asking "
        "when neither --yes nor --no is given."
    )
    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def build_config(args: argparse.Namespace) -> PromptConfig:
    return PromptConfig(
        prompt=args.prompt,
        default_answer=args.default_answer,
        reader_mode=ReaderMode.SINGLE_CHAR if args.no_enter else ReaderMode.LINE_BUFFERED,
        retry=args.retry,
        full_words=args.full_words,
    )


def exit_code(result: ConfirmResult) -> int:
    return 0 if result.confirmed else 1


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the confirm CLI.

    Returns:
        Exit code (0 for yes, 1 for no or exhausted retries)
    """
    stderr = make_console(stderr=True)
    if not _stdin_is_tty():
        stderr.print(NOT_A_TTY_WARNING)

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    assume = args.assume
    if assume is None:
        try:
            assume = assumed_decision(os.environ)
        except ConfigurationError as e:
            parser.error(str(e))
    if assume is not None:
        return 0 if assume is Decision.YES else 1

    try:
        config = build_config(args)
    except ValidationError as e:
        parser.error("; ".join(error["msg"] for error in e.errors()))

    try:
        result = ConfirmEngine(config, stderr=stderr).run()
    except KeyboardInterrupt:
        print("\nAborted by user", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.debug:
            raise
        return 1

    return exit_code(result)


if __name__ == "__main__":
    sys.exit(main())
