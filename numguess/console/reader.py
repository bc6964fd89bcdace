"""
Input Reader - Reads one guess per line from the console.

Bad input is not an exception. Every read returns a ReadResult that
either carries the validated guess or names what was wrong with the
line, so the game loop can report it and ask again.
"""

from __future__ import annotations
import logging
import re
import sys
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from ..engine_core.rules import GameRules, DEFAULT_RULES

logger = logging.getLogger(__name__)

# Optional sign followed by ASCII digits only. int() alone would also
# accept "1_0" and non-ASCII digits.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Stand-in for a line whose bytes could not be decoded.
UNDECODABLE = "\ufffd\n"


class ReadError(str, Enum):
    """Why a line could not be used as a guess."""
    READ_FAILURE = "read_failure"  # Stream closed or exhausted
    EMPTY_INPUT = "empty_input"
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"


@dataclass
class ReadResult:
    """
    Result of reading a guess.

    Exactly one of value / error is set.
    """
    success: bool
    value: int | None = None
    error: ReadError | None = None
    raw: str | None = None  # Trimmed text that was read, if any

    @classmethod
    def ok(cls, value: int, raw: str | None = None) -> ReadResult:
        """Create a success result."""
        return cls(success=True, value=value, raw=raw)

    @classmethod
    def failure(cls, error: ReadError, raw: str | None = None) -> ReadResult:
        """Create a failure result."""
        return cls(success=False, error=error, raw=raw)


def _bound_digits(rules: GameRules) -> int:
    return max(len(str(abs(rules.minimum))), len(str(abs(rules.maximum))))


def parse_guess(text: str, rules: GameRules = DEFAULT_RULES) -> ReadResult:
    """
    Validate one line of text as a guess.

    Surrounding whitespace is ignored.
    """
    trimmed = text.strip()
    if not trimmed:
        return ReadResult.failure(ReadError.EMPTY_INPUT, raw=trimmed)

    if not _INTEGER_RE.fullmatch(trimmed):
        return ReadResult.failure(ReadError.NOT_A_NUMBER, raw=trimmed)

    # More significant digits than either bound has cannot be in range,
    # and int() refuses very long digit strings.
    digits = trimmed.lstrip("+-").lstrip("0")
    if len(digits) > _bound_digits(rules):
        return ReadResult.failure(ReadError.OUT_OF_RANGE, raw=trimmed)

    guess = int(digits) if digits else 0
    if trimmed.startswith("-"):
        guess = -guess
    if not rules.contains(guess):
        return ReadResult.failure(ReadError.OUT_OF_RANGE, raw=trimmed)

    return ReadResult.ok(guess, raw=trimmed)


class InputReader:
    """
    Reads lines from an input stream (stdin by default).

    Once the stream reports end of input, `exhausted` is set and every
    further read fails with READ_FAILURE.
    """

    def __init__(self, stream: TextIO | None = None, rules: GameRules = DEFAULT_RULES):
        self._stream = stream
        self.rules = rules
        self.exhausted = False

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdin

    def read_line(self) -> str | None:
        """
        Read one raw line.

        Returns None at end of input or if the stream can no longer be read.
        """
        if self.exhausted:
            return None

        try:
            line = self._readline()
        except UnicodeDecodeError as e:
            # Undecodable bytes are a bad line, not the end of input.
            logger.debug("Undecodable input line: %s", e)
            return UNDECODABLE
        except (OSError, ValueError) as e:
            logger.debug("Input stream failed: %s", e)
            line = ""

        if line == "":
            logger.debug("Input stream exhausted")
            self.exhausted = True
            return None
        return line

    def _readline(self) -> str:
        """
        Read one line of text.

        Streams backed by a binary buffer (like sys.stdin) are read a byte
        line at a time and decoded with replacement, so an undecodable line
        never takes the following lines with it.
        """
        stream = self.stream
        buffer = getattr(stream, "buffer", None)
        if buffer is None:
            return stream.readline()

        encoding = getattr(stream, "encoding", None) or "utf-8"
        return buffer.readline().decode(encoding, errors="replace")

    def read_guess(self) -> ReadResult:
        """Read one line and validate it as a guess."""
        line = self.read_line()
        if line is None:
            return ReadResult.failure(ReadError.READ_FAILURE)

        result = parse_guess(line, self.rules)
        if not result.success:
            logger.debug("Rejected input %r: %s", result.raw, result.error.value)
        return result
