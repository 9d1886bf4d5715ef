"""Tests for GameSettings and the configuration defaults."""

import logging

import pytest
from pydantic import ValidationError

from adventure.config import (
    DEFAULT_LOG_FORMAT,
    DEFAULT_MAX_HP,
    DEFAULT_MAX_INPUT_LENGTH,
    DEFAULT_MAX_STRENGTH,
    DEFAULT_STARTING_HP,
    DEFAULT_STARTING_STRENGTH,
)
from adventure.models.character import Character
from adventure.models.modes import AttackMode, FightMode
from adventure.settings import GameSettings


class TestGameSettings:
    """Test suite for GameSettings."""

    def test_config_imports_successfully(self):
        """Test that config constants have sensible values."""
        assert DEFAULT_MAX_HP >= 1
        assert DEFAULT_MAX_STRENGTH >= 1
        assert DEFAULT_STARTING_HP is not None
        assert DEFAULT_STARTING_STRENGTH is not None
        assert DEFAULT_MAX_INPUT_LENGTH >= 1
        assert "%(message)s" in DEFAULT_LOG_FORMAT

    def test_defaults(self):
        """Test GameSettings picks up the configuration defaults."""
        settings = GameSettings()
        assert settings.max_hp == DEFAULT_MAX_HP
        assert settings.starting_strength == DEFAULT_STARTING_STRENGTH
        assert settings.max_input_length == DEFAULT_MAX_INPUT_LENGTH

    def test_new_character(self):
        """Test the starting character is built from the settings."""
        settings = GameSettings(max_hp=100, max_strength=100, starting_hp=100, starting_strength=10)
        character = settings.new_character()
        assert isinstance(character, Character)
        assert (character.hp, character.strength) == (100, 10)
        assert character.attack_mode == AttackMode.NORMAL
        assert character.fight_mode == FightMode.MELEE

    def test_new_character_respects_floor_setting(self):
        """Test that clamp_hp_floor is handed to the character."""
        character = GameSettings(clamp_hp_floor=True).new_character()
        character.hp -= 1000
        assert character.hp == 0

    def test_log_level_normalized(self):
        """Test that lowercase level names are accepted."""
        settings = GameSettings(log_level="debug")
        assert settings.log_level == "DEBUG"
        assert settings.log_level_number == logging.DEBUG

    def test_invalid_log_level(self):
        """Test that unknown level names are rejected."""
        with pytest.raises(ValidationError):
            GameSettings(log_level="chatty")

    def test_invalid_limits(self):
        """Test that non-positive limits are rejected."""
        with pytest.raises(ValidationError):
            GameSettings(max_hp=0)
        with pytest.raises(ValidationError):
            GameSettings(max_input_length=0)

    def test_settings_are_frozen(self):
        """Test that settings cannot be changed after creation."""
        settings = GameSettings()
        with pytest.raises(ValidationError):
            settings.max_hp = 5
