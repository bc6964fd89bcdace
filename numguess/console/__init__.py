"""
Console - Line-oriented terminal I/O for the game.

- Messages: bilingual (Chinese / English) fixed strings
- Console: writes messages and prompts to the output stream
- InputReader: reads and validates guesses
- ReplayPrompt: asks whether to play another round
"""

from .messages import Message, Messages, READ_ERROR_REASONS
from .output import Console
from .reader import InputReader, ReadError, ReadResult, parse_guess
from .replay import ReplayPrompt, interpret_answer, AFFIRMATIVE, NEGATIVE

__all__ = [
    "Message",
    "Messages",
    "READ_ERROR_REASONS",
    "Console",
    "InputReader",
    "ReadError",
    "ReadResult",
    "parse_guess",
    "ReplayPrompt",
    "interpret_answer",
    "AFFIRMATIVE",
    "NEGATIVE",
]
