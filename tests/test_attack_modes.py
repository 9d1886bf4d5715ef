"""Tests for attack behaviors."""

import pytest

from adventure.engine.actions import AttackAction, DefendAction, HealAction
from adventure.engine.attack_modes import DefeatedAttack, NormalAttack, PoweredUpAttack, get_attack_behavior
from adventure.engine.effects import BoostEffect, DamageEffect
from adventure.engine.fight_modes import MagicFight, MeleeFight, RangedFight
from adventure.models.modes import AttackMode


class TestAttackModes:
    """Test suite for attack behaviors."""

    def test_normal_attack(self, character, console, output):
        """Test that a normal attack adds one strength."""
        NormalAttack().attack(character, console)
        assert character.strength == 11
        assert "💥 Character attacks with standard strength!" in output.getvalue()

    def test_powered_up_attack(self, character, console):
        """Test fresh character, powered up, attack -> strength 15."""
        character.attack_mode = AttackMode.POWERED_UP
        character.attack(console)
        assert character.strength == 15

    def test_defeated_attack_zeroes_strength(self, character, console, output):
        """Test that a defeated attack sets strength to exactly 0."""
        character.strength = 73
        character.attack_mode = AttackMode.DEFEATED
        character.attack(console)
        assert character.strength == 0
        assert "💀 character is defeated and cannot attack." in output.getvalue()

    @pytest.mark.parametrize(
        "modes",
        [
            [AttackMode.NORMAL] * 5,
            [AttackMode.POWERED_UP] * 30,
            [AttackMode.NORMAL, AttackMode.POWERED_UP, AttackMode.NORMAL, AttackMode.POWERED_UP] * 10,
        ],
    )
    def test_strength_grows_and_caps(self, character, console, modes):
        """Test that repeated attacks never lower strength nor pass 100."""
        for mode in modes:
            before = character.strength
            character.attack_mode = mode
            character.attack(console)
            assert before <= character.strength <= 100
        assert character.strength <= 100

    def test_get_attack_behavior(self):
        """Test behavior lookup by mode and by value."""
        assert isinstance(get_attack_behavior(AttackMode.NORMAL), NormalAttack)
        assert isinstance(get_attack_behavior("powered_up"), PoweredUpAttack)
        assert isinstance(get_attack_behavior(AttackMode.DEFEATED), DefeatedAttack)

    def test_get_attack_behavior_unknown(self):
        """Test that unknown modes raise ValueError."""
        with pytest.raises(ValueError):
            get_attack_behavior("berserk")


@pytest.mark.parametrize(
    "variant",
    [
        NormalAttack,
        PoweredUpAttack,
        DefeatedAttack,
        MeleeFight,
        RangedFight,
        MagicFight,
        AttackAction,
        DefendAction,
        HealAction,
        BoostEffect,
        DamageEffect,
    ],
)
def test_variants_are_documented(variant):
    """Test that every concrete variant carries its own docstring."""
    assert variant.__dict__.get("__doc__")
