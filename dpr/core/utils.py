"""
Utilities module for the calculator.

Provides console printing with rich formatting and the singleton metaclass
used by the build repository.
"""

from __future__ import annotations

from typing import Any, Generic

from rich.console import Console
from rich.rule import Rule
from typing_extensions import TypeVar

# Initialize the rich console.
_console = Console(markup=True, width=120)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


# ---- Singleton Metaclass ----


_T = TypeVar("_T")


class Singleton(type, Generic[_T]):
    """Metaclass that returns the same instance every time."""

    _instances: dict[Singleton[_T], _T] = {}

    def __call__(cls, *args: Any, **kwargs: Any) -> _T:
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)
        elif args or kwargs:
            cls._instances[cls].__init__(*args, **kwargs)
        return cls._instances[cls]

    def reset(cls) -> None:
        """Drops the cached instance, mostly useful in tests."""
        cls._instances.pop(cls, None)


# ---- Formatting ----


def format_float(value: float, digits: int = 2) -> str:
    """
    Formats a float with a fixed number of decimals.

    Args:
        value (float): The value to format.
        digits (int): Number of decimals. Defaults to 2.

    Returns:
        str: The formatted value.

    """
    return f"{value:.{digits}f}"
