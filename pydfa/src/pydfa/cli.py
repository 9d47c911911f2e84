"""
Interactive front end: load a DFA description and test strings against it.

    pydfa machine.dfa                 # prompt for strings until 'quit'
    pydfa machine.dfa -s ab -s aba    # test the given strings and exit
    pydfa                             # prompt for the file name first
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from pydfa.analysis.graph import reachable_states
from pydfa.analysis.table import accepts_batch
from pydfa.core.builder import DFABuilder
from pydfa.core.dfa import DFA
from pydfa.core.errors import DFAParseError, InvalidAutomaton

logger = logging.getLogger(__name__)

QUIT_COMMAND = "quit"

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_INVALID_DFA = 2


def request_input(msg: str) -> Optional[str]:
    """Prompt with `msg` and return the trimmed reply, or None at end of input."""
    try:
        return input(msg).strip()
    except EOFError:
        return None


def request_file() -> Optional[Path]:
    """Ask for a file name until an existing file is given."""
    while True:
        file_name = request_input("Enter the DFA file name: ")
        if file_name is None:
            return None

        path = Path(file_name)
        if path.is_file():
            return path
        logger.error("The specified file didn't exist!")


def load(path: Path) -> tuple[Optional[DFA], int]:
    try:
        builder = DFABuilder.from_path(path)
    except (DFAParseError, OSError) as e:
        logger.error("There was an error in the DFA: %s", e)
        return None, EXIT_PARSE_ERROR

    logger.info(
        "Read %d states over alphabet %s from %s",
        builder.num_states,
        "".join(sorted(builder.alphabet)),
        path,
    )

    try:
        dfa = builder.freeze()
    except InvalidAutomaton as e:
        logger.error(
            "The specified file was successfully parsed, but doesn't represent a valid DFA (%s).",
            e.reason.value,
        )
        return None, EXIT_INVALID_DFA

    unreachable = dfa.state_ids - reachable_states(dfa)
    if unreachable:
        logger.info("States never reached from state 0: %s", sorted(unreachable))

    return dfa, EXIT_OK


def repl(dfa: DFA) -> None:
    while True:
        line = request_input(f"Enter string ['{QUIT_COMMAND}' to exit]: ")
        if line is None or line == QUIT_COMMAND:
            break

        if dfa.is_valid_string(line):
            print("That line is valid with this DFA!")
        else:
            print("That line isn't valid with this DFA.")
        print()


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pydfa",
        description="Test strings against a DFA described in a text file.",
    )
    parser.add_argument(
        "dfa_file",
        nargs="?",
        help="DFA description file (prompted for when omitted)",
    )
    parser.add_argument(
        "-s",
        "--string",
        action="append",
        dest="strings",
        help="String to test; may be repeated. Skips the interactive prompt.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s: %(message)s",
    )

    path = Path(args.dfa_file) if args.dfa_file else request_file()
    if path is None:
        return EXIT_OK

    dfa, status = load(path)
    if dfa is None:
        return status

    if args.strings:
        for accepted in accepts_batch(dfa, args.strings):
            print("accept" if accepted else "reject")
        return EXIT_OK

    repl(dfa)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
