"""
Main entry point for the damage-per-round calculator.

Loads the builds from a JSON file, evaluates their expected damage over a
range of armor class values and prints the comparison, optionally followed
by the Hunter's Mark break-even analysis of each build.
"""

import argparse
import logging
from pathlib import Path

from dpr.combat.breakeven import breakeven
from dpr.combat.expectation import damage_table
from dpr.core.constants import DEFAULT_MAX_AC, DEFAULT_MIN_AC
from dpr.core.content import BuildRepository
from dpr.core.logging import log_info, setup_logging
from dpr.core.utils import crule
from dpr.effects.modifiers import hunters_mark
from dpr.ui.tables import (
    build_breakeven_table,
    build_damage_table,
    print_tables,
    print_turn_sheet,
)

# Get the path to the data folder.
DEFAULT_DATA_FILE = Path(__file__).resolve().parent.parent / "data" / "builds.json"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dpr",
        description="Compare the expected damage per round of d20 builds.",
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=DEFAULT_DATA_FILE,
        help="JSON file with the builds to compare.",
    )
    parser.add_argument("--min-ac", type=int, default=DEFAULT_MIN_AC)
    parser.add_argument("--max-ac", type=int, default=DEFAULT_MAX_AC)
    parser.add_argument(
        "--mark",
        action="store_true",
        help="Also show the Hunter's Mark break-even of every build.",
    )
    parser.add_argument("--sheets", action="store_true", help="Print build sheets.")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)
    if args.min_ac > args.max_ac:
        parser.error("--min-ac cannot be greater than --max-ac")
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    repo = BuildRepository(args.data)
    log_info("Loaded builds", {"file": args.data, "turns": len(repo.turns)})

    if args.sheets:
        crule("Builds", style="bold green")
        for name, turn in repo.turns.items():
            print_turn_sheet(name, turn, repo.descriptions.get(name, ""))

    defenses = range(args.min_ac, args.max_ac + 1)

    crule("Expected damage", style="bold green")
    tables = [build_damage_table(damage_table(repo.turns, defenses))]

    if args.mark:
        for name, turn in repo.turns.items():
            marked = hunters_mark(turn)
            results = {defense: breakeven(marked, defense) for defense in defenses}
            tables.append(
                build_breakeven_table(results, title=f"Hunter's Mark: {name}")
            )

    print_tables(tables)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
