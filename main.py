"""CLI entrypoint for the wordquest crossword engine."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from wordquest.core.constants import VerifyResult
from wordquest.core.exceptions import CrosswordError
from wordquest.engine.session import CrosswordSession
from wordquest.io.dictionary_client import DictionaryClient
from wordquest.io.puzzles import load_puzzles
from wordquest.utils.logger import configure_logging, get_logger
from wordquest.utils.pretty import pretty_print_puzzle


LOGGER = get_logger("wordquest.cli")

PLAY_HELP = """Commands:
  <row> <col> <letter>   type a letter (an empty letter or '-' clears)
  focus <row> <col>      focus a cell
  verify                 check the grid
  reset                  clear all letters
  solve                  fill in the answers
  next                   go to the next puzzle
  show                   redraw the grid
  quit                   leave"""

VERDICTS = {
    VerifyResult.CORRECT: "Congratulations!",
    VerifyResult.INCORRECT: "Incorrect. Please try again.",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play vocabulary crosswords in the terminal")
    parser.add_argument(
        "--puzzles",
        type=Path,
        default=Path("puzzles/unit1.json"),
        help="JSON file with one clue list per level",
    )
    parser.add_argument("--level", type=int, default=0, help="0-based level to start from")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("show", help="Print the clues and the blank grid")
    answers = sub.add_parser("answers", help="Print the solved grid")
    answers.add_argument("--json", action="store_true", help="Emit the grid as JSON rows")
    sub.add_parser("play", help="Play interactively on stdin")
    define = sub.add_parser("define", help="Look up a word in the dictionary")
    define.add_argument("word")
    return parser


def _redraw(session: CrosswordSession, stream: TextIO) -> None:
    pretty_print_puzzle(
        session.grid,
        session.puzzle,
        label=(
            f"Level {session.level + 1}/{session.level_count} ({session.orientation.value}, "
            f"{session.grid.filled_ratio:.0%} filled)"
        ),
        focused=session.focused,
        stream=stream,
    )


def run_play(session: CrosswordSession, lines: Iterable[str], stream: TextIO) -> None:
    """Drive ``session`` from text commands until ``quit`` or end of input."""

    _redraw(session, stream)
    for raw in lines:
        parts = raw.split()
        if not parts:
            continue
        command = parts[0].lower()
        try:
            if command in ("quit", "exit"):
                return
            if command == "help":
                print(PLAY_HELP, file=stream)
                continue
            if command == "verify":
                print(VERDICTS[session.verify()], file=stream)
                continue
            if command == "reset":
                session.reset_puzzle()
            elif command == "solve":
                session.solve()
            elif command == "next":
                session.next_puzzle()
            elif command == "focus" and len(parts) == 3:
                session.focus_cell(int(parts[1]), int(parts[2]))
            elif command == "show":
                pass
            elif len(parts) in (2, 3) and parts[0].isdigit() and parts[1].isdigit():
                letter = parts[2] if len(parts) == 3 and parts[2] != "-" else ""
                session.set_cell(int(parts[0]), int(parts[1]), letter)
            else:
                print(f"Unknown command: {raw.strip()!r} (try 'help')", file=stream)
                continue
        except (CrosswordError, ValueError) as exc:
            print(f"Error: {exc}", file=stream)
            continue
        _redraw(session, stream)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        if args.command == "define":
            entry = DictionaryClient().define(args.word)
            print(f"{entry.word}: {entry.definition}")
            print(f"Example: {entry.example}")
            return 0

        session = CrosswordSession(load_puzzles(args.puzzles), level=args.level)
        if args.command == "show":
            _redraw(session, sys.stdout)
        elif args.command == "answers":
            session.solve()
            if args.json:
                print(json.dumps(session.grid.to_jsonable(), ensure_ascii=False, indent=2))
            else:
                _redraw(session, sys.stdout)
        elif args.command == "play":
            run_play(session, sys.stdin, sys.stdout)
    except CrosswordError as exc:
        LOGGER.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
