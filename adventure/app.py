"""Console entry point."""

import logging
import sys
from typing import Optional, TextIO

from adventure.console import Console
from adventure.engine.menu import FAREWELL, GameMenu
from adventure.settings import GameSettings

logger = logging.getLogger(__name__)


def configure_logging(settings: GameSettings) -> None:
    """Send diagnostics to stderr so they never mix with the game text."""
    logging.basicConfig(level=settings.log_level_number, format=settings.log_format, stream=sys.stderr)


def main(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    settings: Optional[GameSettings] = None,
) -> int:
    """
    Play one game session.

    Args:
        stdin: Input stream (defaults to sys.stdin)
        stdout: Output stream (defaults to sys.stdout)
        settings: Game settings (defaults to environment-derived values)

    Returns:
        Process exit code
    """
    settings = settings or GameSettings()
    configure_logging(settings)

    console = Console.from_streams(stdin, stdout, max_length=settings.max_input_length)
    menu = GameMenu(settings.new_character(), console)

    logger.info("Starting game session")
    try:
        menu.run()
    except KeyboardInterrupt:
        console.say()
        console.say(FAREWELL)
        return 130
    logger.info("Game session finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
