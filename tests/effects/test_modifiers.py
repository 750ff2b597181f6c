"""
Tests for feat and buff modifiers.
"""

import pytest
from dpr.combat.attack import Attack
from dpr.combat.damage import DamageValue
from dpr.combat.turn import Turn
from dpr.core.constants import D4, D6, ModifierKind
from dpr.effects.modifiers import (
    apply_modifier,
    apply_to_turn,
    favored_foe,
    hunters_mark,
    sharpshooter,
)


@pytest.fixture
def dmg():
    return DamageValue(average_roll=1.0, flat=1)


@pytest.fixture
def turn(dmg):
    atk = Attack(hit_bonus=10, on_hit=dmg, on_crit_bonus=dmg)
    return Turn(
        primary_attacks=[atk] * 2,
        secondary_attacks=[atk],
        once_per_turn=DamageValue(average_roll=1.0, flat=2),
    )


def test_attack_sharpshooter(dmg):
    atk = Attack(hit_bonus=10, on_hit=dmg, on_crit_bonus=dmg)
    sharp = Attack(
        hit_bonus=5,
        on_hit=DamageValue(average_roll=1.0, flat=11),
        on_crit_bonus=dmg,
    )
    assert sharpshooter(atk) == sharp
    # The original attack is left untouched.
    assert atk.hit_bonus == 10


def test_turn_foe():
    turn = favored_foe(Turn(primary_attacks=[Attack()]))
    assert turn.expected_damage(20) == pytest.approx((1.0 / 20.0) * 2.0 * D4)


def test_foe_only_changes_once_per_turn(turn):
    foe = favored_foe(turn)
    assert foe.primary_attacks == turn.primary_attacks
    assert foe.secondary_attacks == turn.secondary_attacks
    assert foe.once_per_turn.average_roll == turn.once_per_turn.average_roll + D4
    assert foe.once_per_turn.flat == turn.once_per_turn.flat


def test_hunters_mark(turn):
    marked = hunters_mark(turn)

    assert marked.baseline == turn
    assert marked.first_round.primary_attacks == turn.primary_attacks
    assert marked.first_round.secondary_attacks == ()
    assert marked.first_round.once_per_turn == turn.once_per_turn
    assert marked.sustained.once_per_turn == turn.once_per_turn
    for before, after in zip(turn.attacks(), marked.sustained.attacks()):
        assert after.on_hit == before.on_hit + DamageValue(average_roll=D6)
        assert after.on_crit_bonus == before.on_crit_bonus
        assert after.hit_bonus == before.hit_bonus


def test_apply_to_turn(turn):
    sharp = apply_to_turn(turn, sharpshooter)
    assert all(atk.hit_bonus == 5 for atk in sharp.attacks())
    assert all(atk.on_hit.flat == 11 for atk in sharp.attacks())
    assert sharp.once_per_turn == turn.once_per_turn


def test_apply_modifier(turn):
    assert apply_modifier(turn, ModifierKind.SHARPSHOOTER) == apply_to_turn(
        turn, sharpshooter
    )
    assert apply_modifier(turn, ModifierKind.FAVORED_FOE) == favored_foe(turn)
