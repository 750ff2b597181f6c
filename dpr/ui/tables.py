"""
Module for printing damage tables and build sheets in a formatted way.
"""

from collections.abc import Iterable, Mapping

from rich.table import Table

from dpr.combat.breakeven import BreakEven
from dpr.combat.turn import Turn
from dpr.core.utils import cprint, format_float


def build_damage_table(
    results: Mapping[int, Mapping[str, float]],
    title: str = "Expected damage per round",
) -> Table:
    """
    Builds a table with one row per defense value and one column per build.

    The best build of each row is highlighted.

    Args:
        results (Mapping[int, Mapping[str, float]]): Damage by defense, then
            by build name, as returned by `damage_table`.
        title (str): Title of the table.

    Returns:
        Table: The rich table.

    """
    table = Table(title=title, header_style="bold")
    table.add_column("AC", justify="right", style="bold")
    names = list(next(iter(results.values()), {}))
    for name in names:
        table.add_column(name, justify="right")

    for defense, row in results.items():
        best = max(row.values()) if row else 0.0
        cells = []
        for name in names:
            value = format_float(row[name])
            cells.append(f"[bold green]{value}[/]" if row[name] == best else value)
        table.add_row(str(defense), *cells)
    return table


def build_breakeven_table(
    results: Mapping[int, BreakEven],
    title: str = "Hunter's Mark break-even",
) -> Table:
    """
    Builds a table with the break-even analysis of each defense value.

    Args:
        results (Mapping[int, BreakEven]): Break-even result by defense.
        title (str): Title of the table.

    Returns:
        Table: The rich table.

    """
    table = Table(title=title, header_style="bold")
    table.add_column("AC", justify="right", style="bold")
    table.add_column("Max", justify="right")
    table.add_column("Rounds", justify="right")
    table.add_column("Deficit", justify="right")
    for defense, result in results.items():
        rounds = str(result.rounds) if result.breaks_even else "[red]never[/]"
        table.add_row(
            str(defense),
            format_float(result.max_damage),
            rounds,
            format_float(result.deficit),
        )
    return table


def print_turn_sheet(name: str, turn: Turn, description: str = "") -> None:
    """
    Prints the attacks of a turn.

    Args:
        name (str): Name of the build.
        turn (Turn): The turn to display.
        description (str): Optional description of the build.

    """
    sheet = f"[blue]{name}[/]"
    if description:
        sheet += f', [italic]"{description}"[/]'
    cprint(sheet)
    for slot, attack in turn.slots():
        cprint(f"    {slot.colorize(slot.display_name)}: {attack}")
    if turn.once_per_turn.hit():
        cprint(f"    [magenta]Once per turn[/]: {turn.once_per_turn}")


def print_tables(tables: Iterable[Table]) -> None:
    for table in tables:
        cprint(table)
