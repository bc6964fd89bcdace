"""
Session Manager - Creates, tracks and ends game sessions.

LIFECYCLE:
1. Driver asks for a session -> target drawn from the picker
2. Game loop records guesses on the session
3. Correct guess -> FINISHED; input ended -> ABANDONED
4. Driver ends the session -> RoundSummary kept in history
5. Replay -> a brand new session with a new target

History is kept for the lifetime of the process only.
"""

from __future__ import annotations
import logging
import time
import uuid
from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, Field

from ..engine_core.evaluator import GuessOutcome, classify_guess
from ..engine_core.picker import RandomPicker, RandomSource
from ..engine_core.rules import GameRules, DEFAULT_RULES

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    """State of a game session."""
    AWAITING_GUESS = "awaiting_guess"  # Initial state, round in progress
    FINISHED = "finished"  # Target guessed
    ABANDONED = "abandoned"  # Input ended before the target was guessed


class RoundSummary(BaseModel):
    """Record of one ended round."""
    session_id: str
    target: int
    attempts: int = Field(ge=0)
    guesses: list[int] = Field(default_factory=list)
    state: SessionState
    duration_seconds: float = Field(ge=0.0)


@dataclass
class Session:
    """
    A single round.

    Only valid, in-range guesses reach record_guess(); invalid input
    never touches the attempt counter.
    """
    session_id: str
    target: int
    created_at: float
    rules: GameRules = DEFAULT_RULES

    state: SessionState = SessionState.AWAITING_GUESS
    attempts: int = 0
    guesses: list[int] = field(default_factory=list)
    ended_at: float | None = None

    def __post_init__(self):
        if not self.rules.contains(self.target):
            raise ValueError(
                f"Target {self.target} outside "
                f"{self.rules.minimum}-{self.rules.maximum}"
            )

    def is_active(self) -> bool:
        """Check if the round is still being played."""
        return self.state == SessionState.AWAITING_GUESS

    def record_guess(self, guess: int) -> GuessOutcome:
        """
        Count a guess and compare it to the target.

        A correct guess finishes the session.
        """
        if not self.is_active():
            raise ValueError(f"Session is {self.state.value} - no guesses allowed")

        self.attempts += 1
        self.guesses.append(guess)
        outcome = classify_guess(guess, self.target)

        if outcome == GuessOutcome.CORRECT:
            self.state = SessionState.FINISHED
            self.ended_at = time.time()
        return outcome

    def abandon(self):
        """Stop the round without a correct guess."""
        if self.is_active():
            self.state = SessionState.ABANDONED
            self.ended_at = time.time()

    def summary(self) -> RoundSummary:
        """Snapshot of the round so far."""
        end = self.ended_at if self.ended_at is not None else time.time()
        return RoundSummary(
            session_id=self.session_id,
            target=self.target,
            attempts=self.attempts,
            guesses=list(self.guesses),
            state=self.state,
            duration_seconds=max(0.0, end - self.created_at),
        )


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions with targets from the picker
    - Track active sessions
    - Keep summaries of ended sessions
    """

    def __init__(
        self,
        rng: RandomSource | None = None,
        rules: GameRules = DEFAULT_RULES,
    ):
        self.rules = rules
        self.picker = RandomPicker(rng=rng, rules=rules)
        self._sessions: dict[str, Session] = {}
        self.history: list[RoundSummary] = []

    def create_session(self, target: int | None = None) -> Session:
        """
        Create a new session.

        Args:
            target: Fixed target, drawn from the picker if None

        Returns:
            New Session awaiting its first guess
        """
        if target is None:
            target = self.picker.pick()

        session = Session(
            session_id=str(uuid.uuid4()),
            target=target,
            created_at=time.time(),
            rules=self.rules,
        )
        self._sessions[session.session_id] = session
        logger.debug("Created session %s", session.session_id)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> RoundSummary | None:
        """
        End a session and remove it from memory.

        A session still awaiting a guess is abandoned. Returns the
        summary, or None if the session is unknown.
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            return None

        session.abandon()
        summary = session.summary()
        self.history.append(summary)
        logger.info(
            "Session %s %s after %d attempt(s)",
            session_id, summary.state.value, summary.attempts,
        )
        return summary

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    @property
    def rounds_played(self) -> int:
        return len(self.history)
