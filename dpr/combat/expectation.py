"""
Expected damage interface shared by attacks and turns.
"""

from collections.abc import Iterable, Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class ExpectedDamage(Protocol):
    """Anything that can report its expected damage against a defense value."""

    def expected_damage(self, defense: int) -> float: ...


def expected_damage(entity: ExpectedDamage, defense: int) -> float:
    """
    Expected damage of an attack or a turn against the given defense value.

    Args:
        entity (ExpectedDamage): An Attack, a Turn, or anything implementing
            the same method.
        defense (int): The defense value of the target.

    Returns:
        float: The expected damage.

    Raises:
        TypeError: If the entity does not provide an expected damage.

    """
    if not isinstance(entity, ExpectedDamage):
        raise TypeError(f"{type(entity).__name__} has no expected damage")
    return entity.expected_damage(defense)


def damage_table(
    entities: Mapping[str, ExpectedDamage],
    defenses: Iterable[int],
) -> dict[int, dict[str, float]]:
    """
    Evaluates several builds over a range of defense values.

    Args:
        entities (Mapping[str, ExpectedDamage]): Builds to compare, by name.
        defenses (Iterable[int]): Defense values to evaluate.

    Returns:
        dict[int, dict[str, float]]: Expected damage by defense, then by name.

    """
    return {
        defense: {
            name: expected_damage(entity, defense) for name, entity in entities.items()
        }
        for defense in defenses
    }
