"""
Console Output - Writes rendered messages to the output stream.
"""

from __future__ import annotations
import sys
from typing import Any, TextIO

from .messages import Message


class Console:
    """
    Thin writer over an output stream (stdout by default).

    Prompts are written without a newline and flushed so the player
    types on the same line.
    """

    def __init__(self, out: TextIO | None = None):
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def say(self, message: Message, **params: Any):
        """Print a message on its own line."""
        print(message.render(**params), file=self.out)

    def prompt(self, message: Message, **params: Any):
        """Print a message and leave the cursor after it."""
        print(message.render(**params), end="", file=self.out, flush=True)

    def rule(self, width: int, char: str = "="):
        """Print a horizontal rule."""
        print(char * width, file=self.out)

    def blank(self):
        print(file=self.out)
