"""
Expected damage-per-round calculator for d20 attack sequences.
"""

from dpr.combat import (
    Attack,
    BreakEven,
    BuffedTurnSet,
    DamageValue,
    ExpectedDamage,
    Turn,
    breakeven,
    expected_damage,
)
from dpr.effects import favored_foe, hunters_mark, sharpshooter

__all__ = [
    "Attack",
    "BreakEven",
    "BuffedTurnSet",
    "DamageValue",
    "ExpectedDamage",
    "Turn",
    "breakeven",
    "expected_damage",
    "favored_foe",
    "hunters_mark",
    "sharpshooter",
]
