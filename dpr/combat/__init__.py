from .damage import DamageValue
from .attack import Attack
from .turn import Turn
from .expectation import ExpectedDamage, damage_table, expected_damage
from .breakeven import BreakEven, BuffedTurnSet, breakeven

__all__ = [
    "DamageValue",
    "Attack",
    "Turn",
    "ExpectedDamage",
    "damage_table",
    "expected_damage",
    "BreakEven",
    "BuffedTurnSet",
    "breakeven",
]
