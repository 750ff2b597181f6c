from .tables import (
    build_breakeven_table,
    build_damage_table,
    print_tables,
    print_turn_sheet,
)

__all__ = [
    "build_breakeven_table",
    "build_damage_table",
    "print_tables",
    "print_turn_sheet",
]
