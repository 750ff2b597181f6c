"""
Turn module for the calculator.

A turn is everything a character attacks with in one round: the attacks of
the primary action, the attacks of the secondary action, and a damage bonus
that applies at most once per round on the first attack that hits.
"""

from collections.abc import Iterator
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dpr.combat.attack import Attack
from dpr.combat.damage import DamageValue
from dpr.core.constants import CRIT_CHANCE, AttackSlot
from dpr.core.logging import log_debug


class Turn(BaseModel):
    """One round of attacks, in the order they are taken."""

    model_config = ConfigDict(frozen=True)

    primary_attacks: tuple[Attack, ...] = Field(
        default=(),
        description="Attacks granted by the primary action.",
    )
    secondary_attacks: tuple[Attack, ...] = Field(
        default=(),
        description="Attacks granted by the secondary action.",
    )
    once_per_turn: DamageValue = Field(
        default_factory=DamageValue,
        description="Damage added once per round, on the first attack that hits.",
    )

    @field_validator("once_per_turn", mode="before")
    @classmethod
    def _coerce_damage(cls, value):
        return DamageValue.coerce(value)

    def attacks(self) -> Iterator[Attack]:
        """Yields primary attacks first, then secondary attacks."""
        yield from self.primary_attacks
        yield from self.secondary_attacks

    def slots(self) -> Iterator[tuple[AttackSlot, Attack]]:
        """Yields every attack together with the slot it is taken in."""
        for attack in self.primary_attacks:
            yield AttackSlot.PRIMARY, attack
        for attack in self.secondary_attacks:
            yield AttackSlot.SECONDARY, attack

    def count(self) -> int:
        return len(self.primary_attacks) + len(self.secondary_attacks)

    def without_secondary(self) -> "Turn":
        """Returns the same turn with the secondary action spent elsewhere."""
        return Turn(
            primary_attacks=self.primary_attacks,
            once_per_turn=self.once_per_turn,
        )

    def expected_damage(self, defense: int) -> float:
        """
        Expected damage of the whole round against the given defense value.

        Attacks are summed independently. The once per turn damage is added
        with the probability that at least one attack hits; its dice are
        added a second time weighted by the probability that the first
        attack to connect does so with a critical hit.

        Args:
            defense (int): The defense value of the target.

        Returns:
            float: The expected damage of the round.

        """
        total = 0.0
        # Probability that every attack so far dealt no damage.
        miss_all = 1.0
        # Probability that the first critical lands before any other hit.
        first_crit = 0.0

        for attack in self.attacks():
            total += attack.expected_damage(defense)
            first_crit += CRIT_CHANCE * miss_all
            miss_all *= 1.0 - (attack.hit_chance(defense) + CRIT_CHANCE)

        total += (1.0 - miss_all) * self.once_per_turn.hit()
        total += first_crit * self.once_per_turn.average_roll

        log_debug(
            "Computed turn expectation",
            {"defense": defense, "attacks": self.count(), "total": round(total, 4)},
        )
        return total

    def __add__(self, other: Union[Attack, DamageValue]) -> "Turn":
        if not isinstance(other, (Attack, DamageValue)):
            return NotImplemented
        return Turn(
            primary_attacks=tuple(attack + other for attack in self.primary_attacks),
            secondary_attacks=tuple(
                attack + other for attack in self.secondary_attacks
            ),
            once_per_turn=self.once_per_turn,
        )
