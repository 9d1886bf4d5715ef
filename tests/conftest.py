"""Pytest configuration and fixtures."""

import io

import pytest

from adventure.console import Console, InputReader
from adventure.engine.menu import GameMenu
from adventure.models.character import Character


@pytest.fixture
def character():
    """Fresh character with the starting stats."""
    return Character()


@pytest.fixture
def output():
    """Captured game output."""
    return io.StringIO()


@pytest.fixture
def console(output):
    """Console with no input, writing to the captured output."""
    return Console(InputReader(io.StringIO("")), output)


@pytest.fixture
def play(character, output):
    """Run a scripted session and return the menu once it has exited."""

    def _play(script: str) -> GameMenu:
        menu = GameMenu(character, Console(InputReader(io.StringIO(script)), output))
        menu.run()
        return menu

    return _play
