"""
Core system module for the calculator.

Contains the game constants, the dice expression parser, logging setup and
console utilities. The build repository lives in `dpr.core.content`.
"""

from .constants import (
    CRIT_CHANCE,
    D4,
    D6,
    D8,
    D10,
    D12,
    AttackSlot,
    ModifierKind,
    die_average,
)
from .logging import (
    get_logger,
    log_debug,
    log_error,
    log_info,
    log_warning,
    setup_logging,
)
from .utils import Singleton, cprint, crule, format_float
from .dice_parser import DiceParser, DiceTerm

__all__ = [
    # Import from constants.py
    "CRIT_CHANCE",
    "D4",
    "D6",
    "D8",
    "D10",
    "D12",
    "AttackSlot",
    "ModifierKind",
    "die_average",
    # Import from logging.py
    "get_logger",
    "log_debug",
    "log_error",
    "log_info",
    "log_warning",
    "setup_logging",
    # Import from utils.py
    "Singleton",
    "cprint",
    "crule",
    "format_float",
    # Import from dice_parser.py
    "DiceParser",
    "DiceTerm",
]
