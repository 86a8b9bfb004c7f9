"""Command line entry point: pick random winners from a participant file.

Ejemplo:
  bombo participants.txt 3
  bombo participants.csv 2 --column nombre --seed 42

"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional, TextIO

from bombo.api.schemas import DrawResult
from bombo.core.errors import DrawError, InvalidWinnerCount, UsageError
from bombo.core.logging import setup_logging
from bombo.core.settings import Settings, settings
from bombo.services.loader import read_pool
from bombo.services.selector import draw, validate_winner_count

logger = logging.getLogger(__name__)

DESCRIPTION = "Randomly select winners from a text file with one nickname per line."
EPILOG = """Example:
  %(prog)s participants.txt 3
"""


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(f"Error: {message}")


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = _Parser(
        prog=prog,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input_file", help="Path to text file with one nickname per line")
    parser.add_argument("number_of_winners", help="Number of random winners to select")
    parser.add_argument("--seed", type=int, default=None, help="Fixed seed for a reproducible draw")
    parser.add_argument("--debug", action="store_true", help="List every loaded participant before drawing")
    parser.add_argument("--column", default=None, help="Read the input as CSV and draw from this column")
    parser.add_argument("--sep", default=None, help="CSV separator (with --column)")
    parser.add_argument("--encoding", default=None, help="Input file encoding")
    parser.add_argument("--json", action="store_true", help="Print the draw as JSON")
    return parser


def parse_winner_count(raw: str) -> int:
    try:
        n = int(raw)
    except (TypeError, ValueError):
        raise InvalidWinnerCount(raw)
    if n <= 0:
        raise InvalidWinnerCount(n)
    return n


def print_participants(participants: List[str], out: TextIO) -> None:
    print(f"DEBUG: Loaded {len(participants)} participants:", file=out)
    for i, name in enumerate(participants):
        print(f"  [{i}] '{name}'", file=out)
    print(file=out)


def format_result(result: DrawResult) -> str:
    lines = [f"🎉 Randomly selected {result.requested} winner(s) from {result.pool_size} participants:", ""]
    for w in result.winners:
        lines.append(f"  {w.position}. {w.name}")
    lines.append("")
    return "\n".join(lines) + "\n"


def main(argv: Optional[List[str]] = None, cfg: Optional[Settings] = None) -> int:
    cfg = cfg or settings
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print(e, file=sys.stderr)
        print(file=sys.stderr)
        parser.print_help(sys.stderr)
        return e.exit_code
    except SystemExit as e:
        # --help: argparse already printed and wants to exit
        return e.code if isinstance(e.code, int) else 0

    setup_logging(cfg.log_level)

    encoding = args.encoding or cfg.encoding
    sep = args.sep or cfg.csv_sep
    seed = args.seed if args.seed is not None else cfg.seed
    debug = args.debug or cfg.debug

    try:
        n = parse_winner_count(args.number_of_winners)
        participants = read_pool(args.input_file, column=args.column, encoding=encoding, sep=sep)
        validate_winner_count(n, len(participants))

        if debug:
            print_participants(participants, sys.stdout)

        result = draw(participants, n, seed=seed, source=args.input_file)
    except DrawError as e:
        logger.debug(f"Draw aborted: {type(e).__name__}")
        print(e, file=sys.stderr)
        return e.exit_code

    if args.json:
        sys.stdout.write(result.model_dump_json(indent=2) + "\n")
    else:
        sys.stdout.write(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
