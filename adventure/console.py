"""Console input and output for the menu loop."""

import logging
import re
import sys
import unicodedata
from typing import Iterator, Optional, TextIO

from adventure.config import DEFAULT_MAX_INPUT_LENGTH

logger = logging.getLogger(__name__)


class EndOfInput(EOFError):
    """Raised when the input stream has no more tokens."""


class InputReader:
    """Reads whitespace-delimited integer tokens from a text stream.

    Several integers typed on one line are handed out one per call, so a
    scripted session like ``"2 3 5"`` answers three prompts in a row.
    """

    def __init__(self, stream: TextIO, max_length: int = DEFAULT_MAX_INPUT_LENGTH) -> None:
        """Initialize reader over ``stream`` with a per-token length limit."""
        self.max_length = max_length
        self._stream = stream
        self._tokens: Iterator[str] = iter(())

    def next_token(self) -> str:
        """Return the next raw token, reading more lines as needed."""
        while True:
            token = next(self._tokens, None)
            if token is not None:
                return token
            line = self._stream.readline()
            if not line:
                raise EndOfInput("input stream exhausted")
            self._tokens = iter(line.split())

    def sanitize(self, token: str) -> str:
        """
        Sanitize a token by:
        1. Normalizing unicode (so full-width digits parse)
        2. Removing control characters
        3. Stripping whitespace
        """
        normalized = unicodedata.normalize("NFKC", token)
        cleaned = re.sub(r"[\x00-\x1F\x7F]", "", normalized)
        return cleaned.strip()

    def read_int(self) -> Optional[int]:
        """
        Read the next token as an integer.

        Returns:
            The parsed integer, or None when the token is not a usable number.
            The rejected token is consumed either way.

        Raises:
            EndOfInput: if the stream is exhausted
        """
        token = self.sanitize(self.next_token())
        if len(token) > self.max_length:
            logger.warning(f"Rejected input token longer than {self.max_length} characters")
            return None
        if not re.fullmatch(r"[+-]?\d+", token):
            logger.warning(f"Rejected non-numeric input: {token!r}")
            return None
        return int(token)


class Console:
    """Output sink plus integer prompt used by the game and its behaviors."""

    def __init__(self, reader: InputReader, out: TextIO) -> None:
        self.reader = reader
        self.out = out

    @classmethod
    def from_streams(
        cls,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        max_length: int = DEFAULT_MAX_INPUT_LENGTH,
    ) -> "Console":
        """Build a console over the given streams, defaulting to the process ones."""
        return cls(InputReader(stdin or sys.stdin, max_length=max_length), stdout or sys.stdout)

    def say(self, text: str = "") -> None:
        """Write one line of output."""
        print(text, file=self.out)

    def prompt(self, text: str) -> Optional[int]:
        """Write ``text`` without a newline and read one integer answer."""
        print(text, end="", file=self.out, flush=True)
        return self.reader.read_int()
