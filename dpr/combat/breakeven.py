"""
Break-even module for the calculator.

A buff like Hunter's Mark costs the secondary action in the round it is
cast, then adds damage to every attack of every later round. This module
measures how many rounds it takes for the later gain to pay back the loss.
"""

import math

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dpr.combat.turn import Turn
from dpr.core.logging import log_debug


class BuffedTurnSet(BaseModel):
    """The three versions of a turn involved in casting a damage buff."""

    model_config = ConfigDict(frozen=True)

    baseline: Turn = Field(
        description="The turn without the buff.",
    )
    first_round: Turn = Field(
        description="The turn in which the buff is cast.",
    )
    sustained: Turn = Field(
        description="Every later turn, with the buff active.",
    )

    @model_validator(mode="after")
    def _check_attack_counts(self) -> "BuffedTurnSet":
        if len(self.first_round.primary_attacks) != len(self.baseline.primary_attacks):
            raise ValueError("first_round must keep the primary attacks of baseline")
        if self.first_round.secondary_attacks:
            raise ValueError("first_round cannot have secondary attacks")
        if len(self.sustained.primary_attacks) != len(
            self.baseline.primary_attacks
        ) or len(self.sustained.secondary_attacks) != len(
            self.baseline.secondary_attacks
        ):
            raise ValueError("sustained must have the same attacks as baseline")
        return self

    def breakeven(self, defense: int) -> "BreakEven":
        return breakeven(self, defense)


class BreakEven(BaseModel):
    """
    Result of a break-even analysis.

    `rounds` counts the casting round. It is None when the buff never pays
    for itself, that is when the sustained turn does not out-damage the
    baseline.
    """

    model_config = ConfigDict(frozen=True)

    max_damage: float = Field(
        description="Expected damage of a turn with the buff active.",
    )
    rounds: int | None = Field(
        description="Rounds until the casting round loss is recovered.",
    )
    deficit: float = Field(
        description="Damage of the casting round minus the baseline damage.",
    )

    @property
    def breaks_even(self) -> bool:
        return self.rounds is not None

    def as_tuple(self) -> tuple[float, int | None, float]:
        return self.max_damage, self.rounds, self.deficit


def breakeven(buffed: BuffedTurnSet, defense: int) -> BreakEven:
    """
    Computes the break-even point of a buff against a defense value.

    Args:
        buffed (BuffedTurnSet): The turns before, while and after casting.
        defense (int): The defense value of the target.

    Returns:
        BreakEven: The sustained damage, the rounds needed and the deficit.

    """
    base = buffed.baseline.expected_damage(defense)
    first = buffed.first_round.expected_damage(defense)
    best = buffed.sustained.expected_damage(defense)

    deficit = first - base
    gain = best - base

    if gain <= 0:
        log_debug(
            "Buff never breaks even",
            {"defense": defense, "base": round(base, 4), "sustained": round(best, 4)},
        )
        rounds = None
    elif deficit >= 0:
        rounds = 1
    else:
        rounds = 1 + math.ceil(-deficit / gain)

    return BreakEven(max_damage=best, rounds=rounds, deficit=deficit)
