"""Text menu loop driving the character."""

import logging
from enum import Enum
from typing import Callable, Optional

from adventure.console import Console, EndOfInput
from adventure.engine.actions import get_action
from adventure.engine.effects import get_effect
from adventure.helpers.debug import log_call
from adventure.models.character import Character
from adventure.models.modes import ActionType, AttackMode, EffectType, FightMode

logger = logging.getLogger(__name__)

INVALID_OPTION = "invalid option. please try again."
GO_BACK = "returning to main menu..."
WELCOME = "🎮 welcome to the adventure game!"
FAREWELL = "thank you for playing! see you on your next adventure!"

MAIN_MENU_TEXT = "\n".join(
    [
        "\n🌟 game menu 🌟",
        "1. change character state",
        "2. select fighting strategy",
        "3. perform game action",
        "4. apply effect to character",
        "5. exit",
        "────────────────────────────────",
    ]
)


class MenuState(str, Enum):
    """States of the menu loop."""

    MAIN_MENU = "main_menu"
    CHANGE_STATE = "change_state"
    SELECT_STRATEGY = "select_strategy"
    PERFORM_ACTION = "perform_action"
    APPLY_EFFECT = "apply_effect"
    EXIT = "exit"


# Top-level choices, in menu order
MAIN_MENU_CHOICES = {
    1: MenuState.CHANGE_STATE,
    2: MenuState.SELECT_STRATEGY,
    3: MenuState.PERFORM_ACTION,
    4: MenuState.APPLY_EFFECT,
    5: MenuState.EXIT,
}

ATTACK_MODE_CHOICES = {1: AttackMode.NORMAL, 2: AttackMode.POWERED_UP, 3: AttackMode.DEFEATED}
FIGHT_MODE_CHOICES = {1: FightMode.MELEE, 2: FightMode.RANGED, 3: FightMode.MAGIC}
ACTION_CHOICES = {1: ActionType.ATTACK, 2: ActionType.DEFEND, 3: ActionType.HEAL}
EFFECT_CHOICES = {1: EffectType.BOOST, 2: EffectType.DAMAGE}


class GameMenu:
    """State machine over the main menu and its four submenus."""

    def __init__(self, character: Character, console: Console) -> None:
        """
        Initialize the menu.

        Args:
            character: Character mutated by the menu choices
            console: Console used for prompts and output
        """
        self._character = character
        self._console = console
        self._state = MenuState.MAIN_MENU
        self._handlers: dict[MenuState, Callable[[], MenuState]] = {
            MenuState.MAIN_MENU: self.main_menu,
            MenuState.CHANGE_STATE: self.change_state,
            MenuState.SELECT_STRATEGY: self.select_strategy,
            MenuState.PERFORM_ACTION: self.perform_action,
            MenuState.APPLY_EFFECT: self.apply_effect,
        }

    @property
    def character(self) -> Character:
        """Get the character driven by this menu."""
        return self._character

    @property
    def state(self) -> MenuState:
        """Get the current menu state."""
        return self._state

    def run(self) -> None:
        """Run until the player exits or input runs out."""
        say = self._console.say
        say(WELCOME)
        while self._state != MenuState.EXIT:
            try:
                self._state = self._handlers[self._state]()
            except EndOfInput:
                logger.info("Input exhausted, leaving the game")
                say()  # end the dangling prompt line
                self._state = MenuState.EXIT
        say(FAREWELL)

    @log_call
    def main_menu(self) -> MenuState:
        """Show status and the main menu, then pick the next state."""
        self._console.say(self._character.status_report())
        self._console.say(MAIN_MENU_TEXT)
        choice = self._console.prompt("choose an option (1-5): ")
        next_state = MAIN_MENU_CHOICES.get(choice)
        if next_state is None:
            self._reject(choice)
            return MenuState.MAIN_MENU
        return next_state

    @log_call
    def change_state(self) -> MenuState:
        mode = self._submenu(
            "\n🔄 choose a new state:",
            ["normal", "powered up", "defeated"],
            "select state",
            ATTACK_MODE_CHOICES,
        )
        if mode is not None:
            self._character.set_attack_mode(mode, self._console)
        return MenuState.MAIN_MENU

    @log_call
    def select_strategy(self) -> MenuState:
        mode = self._submenu(
            "\n⚔️ choose a new fighting strategy:",
            ["melee", "ranged", "magic"],
            "select strategy",
            FIGHT_MODE_CHOICES,
        )
        if mode is not None:
            self._character.set_fight_mode(mode, self._console)
        return MenuState.MAIN_MENU

    @log_call
    def perform_action(self) -> MenuState:
        action_type = self._submenu(
            "\n🎬 choose an action:",
            ["attack", "defend", "heal"],
            "select action",
            ACTION_CHOICES,
        )
        if action_type is not None:
            get_action(action_type).execute_action(self._character, self._console)
        return MenuState.MAIN_MENU

    @log_call
    def apply_effect(self) -> MenuState:
        effect_type = self._submenu(
            "\n💥 choose an effect:",
            ["boost", "damage"],
            "select effect",
            EFFECT_CHOICES,
        )
        if effect_type is not None:
            get_effect(effect_type).apply(self._character, self._console)
        return MenuState.MAIN_MENU

    def _submenu(self, title: str, labels: list[str], prompt: str, choices: dict[int, Enum]) -> Optional[Enum]:
        """
        Show a numbered submenu with a trailing "go back" entry.

        Returns:
            The chosen enum member, or None for "go back" and invalid input
        """
        go_back = len(labels) + 1
        self._console.say(title)
        for number, label in enumerate(labels, start=1):
            self._console.say(f"{number}. {label}")
        self._console.say(f"{go_back}. go back")

        choice = self._console.prompt(f"{prompt} (1-{go_back}): ")
        if choice == go_back:
            self._console.say(GO_BACK)
            return None
        selected = choices.get(choice)
        if selected is None:
            self._reject(choice)
        return selected

    def _reject(self, choice: Optional[int]) -> None:
        logger.debug(f"invalid menu choice: {choice!r}")
        self._console.say(INVALID_OPTION)
