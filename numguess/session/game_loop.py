"""
Game Loop - Drives one session from first guess to a terminal state.

The loop:
1. Prompt for a guess
2. Read and validate the line
3. Invalid -> report and ask again (no attempt counted)
4. Valid -> record it, report too high / too low / correct
5. Repeat until correct, or until console input ends
"""

from __future__ import annotations
import logging
from dataclasses import dataclass

from ..console.messages import Messages, READ_ERROR_REASONS
from ..console.output import Console
from ..console.reader import InputReader, ReadError, ReadResult
from ..engine_core.evaluator import GuessOutcome
from .manager import Session, SessionState

logger = logging.getLogger(__name__)

_OUTCOME_MESSAGES = {
    GuessOutcome.TOO_HIGH: Messages.TOO_HIGH,
    GuessOutcome.TOO_LOW: Messages.TOO_LOW,
}


@dataclass
class TurnResult:
    """Result of handling one line of input."""
    success: bool
    session_state: SessionState
    attempts: int
    outcome: GuessOutcome | None = None
    error: ReadError | None = None


class GameLoop:
    """
    The per-round driver.

    Usage:
        loop = GameLoop(session, reader, console)
        loop.play()
    """

    def __init__(self, session: Session, reader: InputReader, console: Console):
        self.session = session
        self.reader = reader
        self.console = console

    def play(self) -> SessionState:
        """Run the round until it finishes or is abandoned."""
        rules = self.session.rules
        self.console.say(Messages.WELCOME)
        self.console.say(Messages.INTRO, minimum=rules.minimum, maximum=rules.maximum)

        while self.session.is_active():
            self.console.prompt(Messages.GUESS_PROMPT)
            self.handle(self.reader.read_guess())

        return self.session.state

    def handle(self, result: ReadResult) -> TurnResult:
        """Apply one read result to the session and report it."""
        if not result.success:
            return self._reject(result.error)

        outcome = self.session.record_guess(result.value)
        logger.debug(
            "Session %s guess #%d: %d -> %s",
            self.session.session_id, self.session.attempts,
            result.value, outcome.name,
        )

        if outcome == GuessOutcome.CORRECT:
            self.console.say(Messages.CORRECT, attempts=self.session.attempts)
        else:
            self.console.say(_OUTCOME_MESSAGES[outcome])

        return TurnResult(
            success=True,
            session_state=self.session.state,
            attempts=self.session.attempts,
            outcome=outcome,
        )

    def _reject(self, error: ReadError) -> TurnResult:
        rules = self.session.rules
        if error == ReadError.READ_FAILURE:
            self.console.blank()

        reason = READ_ERROR_REASONS[error]
        self.console.say(
            Messages.INVALID_INPUT,
            reason=reason,
            minimum=rules.minimum,
            maximum=rules.maximum,
        )

        # End of input ends the round.
        if error == ReadError.READ_FAILURE and self.reader.exhausted:
            self.session.abandon()
            logger.info("Input ended, abandoning session %s", self.session.session_id)

        return TurnResult(
            success=False,
            session_state=self.session.state,
            attempts=self.session.attempts,
            error=error,
        )
