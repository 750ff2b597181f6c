"""
Tests for the DamageValue model.
"""

import pytest
from dpr.combat.damage import DamageValue
from pydantic import ValidationError


@pytest.fixture
def one_one():
    return DamageValue(average_roll=1.0, flat=1)


def test_damage_hit(one_one):
    assert one_one.hit() == 2.0


def test_damage_crit_doubles_only_dice(one_one):
    assert one_one.crit() == 3.0


def test_damage_add(one_one):
    assert one_one + one_one == DamageValue(average_roll=2.0, flat=2)


def test_damage_add_commutative_and_associative():
    a = DamageValue(average_roll=3.5, flat=2)
    b = DamageValue(average_roll=2.5, flat=-1)
    c = DamageValue(average_roll=5.5, flat=4)
    assert a + b == b + a
    assert (a + b) + c == a + (b + c)
    assert (a + b).average_roll == a.average_roll + b.average_roll
    assert (a + b).flat == a.flat + b.flat


def test_damage_zero_is_identity(one_one):
    assert one_one + DamageValue() == one_one


def test_damage_add_rejects_other_types(one_one):
    with pytest.raises(TypeError):
        one_one + 1


def test_damage_is_immutable(one_one):
    with pytest.raises(ValidationError):
        one_one.flat = 5


def test_damage_from_expression():
    assert DamageValue.from_expression("2d6+5") == DamageValue(average_roll=7.0, flat=5)


@pytest.mark.parametrize(
    "data, expected",
    [
        ("1d6", DamageValue(average_roll=3.5)),
        (3, DamageValue(flat=3)),
        ({"average_roll": 1.5, "flat": 2}, DamageValue(average_roll=1.5, flat=2)),
        (DamageValue(flat=7), DamageValue(flat=7)),
    ],
)
def test_damage_coerce(data, expected):
    assert DamageValue.coerce(data) == expected


def test_damage_coerce_invalid():
    with pytest.raises(ValueError):
        DamageValue.coerce([1, 2])
