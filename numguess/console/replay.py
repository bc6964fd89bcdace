"""
Replay Prompt - Asks whether to start another round.
"""

from __future__ import annotations
import logging

from .messages import Messages
from .output import Console
from .reader import InputReader

logger = logging.getLogger(__name__)

AFFIRMATIVE = frozenset({"y", "yes", "是"})
NEGATIVE = frozenset({"n", "no", "否"})


def interpret_answer(text: str) -> bool | None:
    """
    Map a yes/no answer to a decision.

    Returns True for yes, False for no, None if the answer is not understood.
    """
    answer = text.strip().lower()
    if answer in AFFIRMATIVE:
        return True
    if answer in NEGATIVE:
        return False
    return None


class ReplayPrompt:
    """
    Keeps asking until the player answers yes or no.

    End of input counts as "no" so a closed stdin ends the program
    cleanly instead of failing.
    """

    def __init__(self, reader: InputReader, console: Console):
        self.reader = reader
        self.console = console

    def ask(self) -> bool:
        """Ask once per line until a decision is made."""
        while True:
            self.console.prompt(Messages.REPLAY_PROMPT)

            line = self.reader.read_line()
            if line is None:
                self.console.blank()
                self.console.say(Messages.REPLAY_READ_FAILURE)
                logger.info("Input ended at replay prompt, not replaying")
                return False

            decision = interpret_answer(line)
            if decision is not None:
                return decision

            self.console.say(Messages.REPLAY_HINT)
