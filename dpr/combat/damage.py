"""
Damage module for the calculator.

Defines the expected value of a damage component, split into the part that
is doubled on a critical hit and the part that is not.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from dpr.core.dice_parser import DiceParser


class DamageValue(BaseModel):
    """Expected damage of a component, as average dice roll plus flat bonus.

    The average roll is the expected value of the dice, and it is doubled on a
    critical hit. The flat part is added once regardless of the outcome.
    """

    model_config = ConfigDict(frozen=True)

    average_roll: float = Field(
        default=0.0,
        description="Expected value of the dice, doubled on a critical hit.",
    )
    flat: float = Field(
        default=0.0,
        description="Fixed modifier, never doubled.",
    )

    @classmethod
    def from_expression(cls, expression: str) -> "DamageValue":
        """
        Builds a damage value from a dice expression.

        Args:
            expression (str): Expression like "2d6+5".

        Returns:
            DamageValue: The expected value of the expression.

        """
        average_roll, flat = DiceParser.parse_average(expression)
        return cls(average_roll=average_roll, flat=flat)

    @classmethod
    def coerce(cls, data: Any) -> "DamageValue":
        """
        Builds a damage value from build data.

        Args:
            data (Any): A DamageValue, a dice expression, a number (flat
                damage) or a mapping with `average_roll` and `flat`.

        Returns:
            DamageValue: The resulting damage value.

        """
        if isinstance(data, DamageValue):
            return data
        if isinstance(data, str):
            return cls.from_expression(data)
        if isinstance(data, (int, float)) and not isinstance(data, bool):
            return cls(flat=data)
        if isinstance(data, dict):
            return cls.model_validate(data)
        raise ValueError(f"Cannot build a damage value from {data!r}")

    def hit(self) -> float:
        """Damage dealt on an ordinary hit."""
        return self.average_roll + self.flat

    def crit(self) -> float:
        """Damage dealt on a critical hit, with the dice doubled."""
        return self.average_roll + self.hit()

    def __add__(self, other: "DamageValue") -> "DamageValue":
        if not isinstance(other, DamageValue):
            return NotImplemented
        return DamageValue(
            average_roll=self.average_roll + other.average_roll,
            flat=self.flat + other.flat,
        )

    def __str__(self) -> str:
        return f"{self.average_roll:g}+{self.flat:g}"
