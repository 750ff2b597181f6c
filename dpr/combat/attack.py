"""
Attack module for the calculator.

Models a single attack roll: its bonus to hit, the damage it deals on any hit
and the extra damage it deals only on a critical hit. Provides the hit
probability model and the expected damage of the attack against a defense
value.
"""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dpr.combat.damage import DamageValue
from dpr.core.constants import CRIT_CHANCE, D20_FACES, MAX_HIT_FACES, MIN_HIT_FACES


class Attack(BaseModel):
    """
    A single attack roll.

    `on_hit` is dealt on every hit, critical hits included. `on_crit_bonus` is
    dealt on top of it only on a critical hit, and its dice are doubled as
    well.
    """

    model_config = ConfigDict(frozen=True)

    hit_bonus: int = Field(
        default=0,
        description="Bonus added to the attack roll.",
    )
    on_hit: DamageValue = Field(
        default_factory=DamageValue,
        description="Damage dealt on any hit.",
    )
    on_crit_bonus: DamageValue = Field(
        default_factory=DamageValue,
        description="Extra damage dealt only on a critical hit.",
    )

    @field_validator("on_hit", "on_crit_bonus", mode="before")
    @classmethod
    def _coerce_damage(cls, value):
        return DamageValue.coerce(value)

    def hit_chance(self, defense: int) -> float:
        """
        Probability of an ordinary (non critical) hit.

        A natural 1 always misses and a natural 20 is a critical hit, so only
        the faces 2 to 19 are resolved against the defense value.

        Args:
            defense (int): The defense value of the target.

        Returns:
            float: The probability of an ordinary hit.

        """
        faces = D20_FACES + self.hit_bonus - defense
        return min(MAX_HIT_FACES, max(MIN_HIT_FACES, faces)) / D20_FACES

    def miss_chance(self, defense: int) -> float:
        """Probability of dealing no damage at all."""
        return 1.0 - (self.hit_chance(defense) + CRIT_CHANCE)

    def expected_damage(self, defense: int) -> float:
        """
        Expected damage of the attack against the given defense value.

        Args:
            defense (int): The defense value of the target.

        Returns:
            float: The expected damage.

        """
        return self.hit_chance(defense) * self.on_hit.hit() + CRIT_CHANCE * (
            self.on_hit.crit() + self.on_crit_bonus.crit()
        )

    def __add__(self, other: Union["Attack", DamageValue]) -> "Attack":
        if isinstance(other, Attack):
            return Attack(
                hit_bonus=self.hit_bonus + other.hit_bonus,
                on_hit=self.on_hit + other.on_hit,
                on_crit_bonus=self.on_crit_bonus + other.on_crit_bonus,
            )
        if isinstance(other, DamageValue):
            return self.model_copy(update={"on_hit": self.on_hit + other})
        return NotImplemented

    def __str__(self) -> str:
        sign = "+" if self.hit_bonus >= 0 else ""
        return f"{sign}{self.hit_bonus} to hit, {self.on_hit} ({self.on_crit_bonus} on crit)"
