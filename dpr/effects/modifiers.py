"""
Modifiers module for the calculator.

Feats and buffs expressed as pure transformations: each one takes an attack
or a turn and returns a new value, leaving the original untouched.
"""

from collections.abc import Callable

from dpr.combat.attack import Attack
from dpr.combat.breakeven import BuffedTurnSet
from dpr.combat.damage import DamageValue
from dpr.combat.turn import Turn
from dpr.core.constants import D4, D6, ModifierKind

AttackModifier = Callable[[Attack], Attack]
TurnModifier = Callable[[Turn], Turn]

# Sharpshooter trades 5 points of attack bonus for 10 points of damage.
SHARPSHOOTER = Attack(hit_bonus=-5, on_hit=DamageValue(flat=10))


def sharpshooter(attack: Attack) -> Attack:
    """Applies the -5 to hit / +10 damage trade to an attack."""
    return attack + SHARPSHOOTER


def favored_foe(turn: Turn) -> Turn:
    """
    Adds the Favored Foe die to the once per turn damage.

    Args:
        turn (Turn): The turn to modify.

    Returns:
        Turn: The same attacks with an extra d4 once per turn.

    """
    return Turn(
        primary_attacks=turn.primary_attacks,
        secondary_attacks=turn.secondary_attacks,
        once_per_turn=turn.once_per_turn + DamageValue(average_roll=D4),
    )


def hunters_mark(turn: Turn) -> BuffedTurnSet:
    """
    Builds the turns involved in casting Hunter's Mark.

    Casting takes the secondary action, so the first round loses the
    secondary attacks. Once active, every attack deals an extra d6.

    Args:
        turn (Turn): The turn without the buff.

    Returns:
        BuffedTurnSet: Baseline, casting round and sustained turns.

    """
    return BuffedTurnSet(
        baseline=turn,
        first_round=turn.without_secondary(),
        sustained=turn + DamageValue(average_roll=D6),
    )


def apply_to_turn(turn: Turn, modifier: AttackModifier) -> Turn:
    """
    Applies an attack modifier to every attack of a turn.

    Args:
        turn (Turn): The turn to modify.
        modifier (AttackModifier): The transformation to apply to each attack.

    Returns:
        Turn: A new turn with every attack transformed.

    """
    return Turn(
        primary_attacks=tuple(modifier(attack) for attack in turn.primary_attacks),
        secondary_attacks=tuple(
            modifier(attack) for attack in turn.secondary_attacks
        ),
        once_per_turn=turn.once_per_turn,
    )


ATTACK_MODIFIERS: dict[ModifierKind, AttackModifier] = {
    ModifierKind.SHARPSHOOTER: sharpshooter,
}

TURN_MODIFIERS: dict[ModifierKind, TurnModifier] = {
    ModifierKind.FAVORED_FOE: favored_foe,
}


def apply_modifier(turn: Turn, kind: ModifierKind) -> Turn:
    """
    Applies a named modifier to a turn.

    Attack modifiers are applied to every attack of the turn.

    Args:
        turn (Turn): The turn to modify.
        kind (ModifierKind): The modifier to apply.

    Returns:
        Turn: The modified turn.

    Raises:
        ValueError: If the modifier does not transform a turn.

    """
    if kind in ATTACK_MODIFIERS:
        return apply_to_turn(turn, ATTACK_MODIFIERS[kind])
    if kind in TURN_MODIFIERS:
        return TURN_MODIFIERS[kind](turn)
    raise ValueError(f"Modifier {kind} cannot be applied to a turn")
