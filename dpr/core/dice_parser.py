"""
Dice parser module for the calculator.

Turns damage expressions such as "2d6+5" or "1d8 + 1d6 - 1" into their
expected value, split into the part that is doubled on a critical hit (the
dice) and the part that is not (the flat modifiers).
"""

import re

from pydantic import BaseModel, Field

from dpr.core.constants import die_average
from dpr.core.logging import log_debug


class DiceTerm(BaseModel):
    """A single signed term of a damage expression."""

    sign: int = Field(
        default=1,
        description="Either 1 or -1.",
    )
    count: int = Field(
        default=0,
        description="Number of dice, 0 for a flat modifier.",
    )
    sides: int = Field(
        default=0,
        description="Faces of the dice, 0 for a flat modifier.",
    )
    value: int = Field(
        default=0,
        description="Value of a flat modifier.",
    )

    def model_post_init(self, _) -> None:
        """Validates fields after model initialization."""
        if self.sign not in (1, -1):
            raise ValueError("sign must be either 1 or -1")
        if self.is_dice() and self.count < 1:
            raise ValueError("count must be positive for a dice term")

    def is_dice(self) -> bool:
        return self.sides > 0

    def average(self) -> float:
        """
        Returns the signed expected value of the term.

        Returns:
            float: The average roll of the dice, or the flat value.

        """
        if self.is_dice():
            return self.sign * self.count * die_average(self.sides)
        return float(self.sign * self.value)


class DiceParser:
    """Parser for additive dice expressions."""

    TERM = r"(?:\d*D\d+|\d+)"
    EXPRESSION_PATTERN = re.compile(rf"^[+-]?{TERM}(?:[+-]{TERM})*$")
    TERM_PATTERN = re.compile(r"([+-]?)(?:(\d*)D(\d+)|(\d+))")

    @staticmethod
    def parse_terms(expression: str) -> list[DiceTerm]:
        """
        Splits an expression into its signed terms.

        Args:
            expression (str): Expression like "2d6+5".

        Returns:
            list[DiceTerm]: The parsed terms, in order.

        Raises:
            ValueError: If the expression is empty or malformed.

        """
        if not expression or not expression.strip():
            raise ValueError("Invalid dice expression: empty")

        expr = expression.replace(" ", "").upper()
        if not DiceParser.EXPRESSION_PATTERN.match(expr):
            raise ValueError(f"Invalid dice expression: '{expression}'")

        terms: list[DiceTerm] = []
        for sign, count, sides, value in DiceParser.TERM_PATTERN.findall(expr):
            sign_num = -1 if sign == "-" else 1
            if sides:
                if int(sides) < 1:
                    raise ValueError(f"Invalid die size in '{expression}'")
                terms.append(
                    DiceTerm(
                        sign=sign_num,
                        count=int(count) if count else 1,
                        sides=int(sides),
                    )
                )
            else:
                terms.append(DiceTerm(sign=sign_num, value=int(value)))
        return terms

    @staticmethod
    def parse_average(expression: str) -> tuple[float, float]:
        """
        Computes the expected value of an expression.

        Args:
            expression (str): Expression like "1d6+6".

        Returns:
            tuple[float, float]: The average of the dice and the flat total.

        """
        terms = DiceParser.parse_terms(expression)
        average_roll = sum(term.average() for term in terms if term.is_dice())
        flat = sum(term.average() for term in terms if not term.is_dice())
        log_debug(
            "Parsed dice expression",
            {"expression": expression, "average_roll": average_roll, "flat": flat},
        )
        return float(average_roll), float(flat)
