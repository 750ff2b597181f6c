"""
Tests for the Turn model and the per-round aggregation.
"""

import pytest
from dpr.combat.attack import Attack
from dpr.combat.damage import DamageValue
from dpr.combat.turn import Turn
from dpr.core.constants import AttackSlot


@pytest.fixture
def big_attack():
    return Attack(on_hit=DamageValue(average_roll=20.0, flat=20))


def test_turn_actions(big_attack):
    turn = Turn(primary_attacks=[big_attack])
    assert turn.expected_damage(11) == pytest.approx(big_attack.expected_damage(11))

    turn = Turn(primary_attacks=[big_attack] * 2)
    assert turn.expected_damage(11) == pytest.approx(2 * big_attack.expected_damage(11))


def test_turn_bonus_actions(big_attack):
    turn = Turn(secondary_attacks=[big_attack])
    assert turn.expected_damage(11) == pytest.approx(big_attack.expected_damage(11))

    turn = Turn(secondary_attacks=[big_attack] * 2)
    assert turn.expected_damage(11) == pytest.approx(2 * big_attack.expected_damage(11))


@pytest.mark.parametrize("defense", [0, 11, 17, 25])
def test_turn_actions_and_bonus_actions(big_attack, defense):
    turn = Turn(primary_attacks=[big_attack] * 2, secondary_attacks=[big_attack] * 2)
    assert turn.expected_damage(defense) == pytest.approx(
        4 * big_attack.expected_damage(defense)
    )


def test_turn_empty_deals_nothing():
    assert Turn(once_per_turn=DamageValue(average_roll=5, flat=5)).expected_damage(10) == 0.0


def test_turn_add_damage():
    dmg = DamageValue(average_roll=1.0, flat=1)
    dbl_dmg = DamageValue(average_roll=2.0, flat=2)
    atk = Attack(hit_bonus=1, on_hit=dmg, on_crit_bonus=dmg)
    doublish_atk = Attack(hit_bonus=1, on_hit=dbl_dmg, on_crit_bonus=dmg)

    turn = Turn(
        primary_attacks=[atk] * 2,
        secondary_attacks=[atk] * 3,
        once_per_turn=dmg,
    )

    assert turn + dmg == Turn(
        primary_attacks=[doublish_atk] * 2,
        secondary_attacks=[doublish_atk] * 3,
        once_per_turn=dmg,
    )


def test_turn_add_attack():
    dmg = DamageValue(average_roll=1.0, flat=1)
    dbl_dmg = DamageValue(average_roll=2.0, flat=2)
    atk = Attack(hit_bonus=1, on_hit=dmg, on_crit_bonus=dmg)
    dbl_atk = Attack(hit_bonus=2, on_hit=dbl_dmg, on_crit_bonus=dbl_dmg)

    turn = Turn(
        primary_attacks=[atk] * 2,
        secondary_attacks=[atk] * 3,
        once_per_turn=dmg,
    )

    assert turn + atk == Turn(
        primary_attacks=[dbl_atk] * 2,
        secondary_attacks=[dbl_atk] * 3,
        once_per_turn=dmg,
    )


def test_turn_once_on_hit_fixed_one_attack():
    turn = Turn(
        primary_attacks=[Attack(hit_bonus=20)],
        once_per_turn=DamageValue(flat=20),
    )
    assert turn.expected_damage(0) == pytest.approx(19.0)


def test_turn_once_on_hit_fixed_multiple_attacks():
    turn = Turn(primary_attacks=[Attack()] * 2, once_per_turn=DamageValue(flat=20))
    assert turn.expected_damage(20) == pytest.approx(1.95)

    turn = Turn(primary_attacks=[Attack()] * 4, once_per_turn=DamageValue(flat=20))
    assert turn.expected_damage(20) == pytest.approx(3.71, abs=5e-3)


def test_turn_once_on_hit_crit_one_attack():
    turn = Turn(
        primary_attacks=[Attack(hit_bonus=20)],
        once_per_turn=DamageValue(average_roll=20.0),
    )
    assert turn.expected_damage(0) == pytest.approx(20.0)


def test_turn_once_on_hit_crit_multiple_attacks():
    turn = Turn(primary_attacks=[Attack()] * 2, once_per_turn=DamageValue(average_roll=20.0))
    assert turn.expected_damage(20) == pytest.approx(2 * 1.95)

    turn = Turn(primary_attacks=[Attack()] * 4, once_per_turn=DamageValue(average_roll=20.0))
    assert turn.expected_damage(20) == pytest.approx(2 * 3.709875)


def test_turn_once_on_hit_split_between_slots():
    once = DamageValue(flat=20)
    split = Turn(
        primary_attacks=[Attack()],
        secondary_attacks=[Attack()],
        once_per_turn=once,
    )
    together = Turn(primary_attacks=[Attack()] * 2, once_per_turn=once)
    assert split.expected_damage(20) == pytest.approx(together.expected_damage(20))


def test_turn_attack_order(big_attack):
    weak = Attack(hit_bonus=-3)
    turn = Turn(primary_attacks=[big_attack, weak], secondary_attacks=[weak, big_attack])

    assert list(turn.attacks()) == [big_attack, weak, weak, big_attack]
    assert [slot for slot, _ in turn.slots()] == [
        AttackSlot.PRIMARY,
        AttackSlot.PRIMARY,
        AttackSlot.SECONDARY,
        AttackSlot.SECONDARY,
    ]
    assert turn.count() == 4


def test_turn_without_secondary(big_attack):
    once = DamageValue(average_roll=2.5)
    turn = Turn(
        primary_attacks=[big_attack],
        secondary_attacks=[big_attack],
        once_per_turn=once,
    )
    first = turn.without_secondary()

    assert first.primary_attacks == turn.primary_attacks
    assert first.secondary_attacks == ()
    assert first.once_per_turn == once


def test_turn_accepts_dice_expression_for_once_per_turn():
    turn = Turn(once_per_turn="1d10+4")
    assert turn.once_per_turn == DamageValue(average_roll=5.5, flat=4)
