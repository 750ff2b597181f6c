"""
Constants and enumerations for the calculator.

Defines the d20 resolution constants, the average values of the common damage
dice and the enumerations used to label attacks and modifiers.
"""

from enum import Enum


def die_average(sides: int) -> float:
    """
    Returns the expected value of a single roll of a die.

    Args:
        sides (int): The number of faces of the die.

    Returns:
        float: The average roll, (1 + sides) / 2.

    """
    if sides < 1:
        raise ValueError(f"A die must have at least one face, got {sides}")
    return (1 + sides) / 2


# Average rolls of the standard damage dice.
D4 = die_average(4)
D6 = die_average(6)
D8 = die_average(8)
D10 = die_average(10)
D12 = die_average(12)

# Faces of the attack die.
D20_FACES = 20
# Probability of a natural 20, independent of bonuses and defense.
CRIT_CHANCE = 1 / D20_FACES
# Natural rolls 2-19 are resolved against the defense value, so at most 18
# faces can produce an ordinary hit.
MIN_HIT_FACES = 0
MAX_HIT_FACES = 18

# Default defense sweep of the command line tool.
DEFAULT_MIN_AC = 14
DEFAULT_MAX_AC = 28


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().replace("_", " ").capitalize()


class AttackSlot(NiceEnum):
    """Defines the part of the turn an attack is taken in."""

    PRIMARY = "PRIMARY"
    SECONDARY = "SECONDARY"

    @property
    def color(self) -> str:
        """Returns the color string associated with this slot."""
        return {
            AttackSlot.PRIMARY: "bold blue",
            AttackSlot.SECONDARY: "bold cyan",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies slot color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class ModifierKind(NiceEnum):
    """Defines the named modifiers that build data can request."""

    SHARPSHOOTER = "sharpshooter"
    FAVORED_FOE = "favored_foe"
