"""
Tests for sessions and the per-round game loop.

Tests:
- Session state machine and attempt counting
- Session manager lifecycle and history
- Game loop output for each kind of input
"""

import pytest

from ..console import ReadError, ReadResult
from ..engine_core import GuessOutcome
from ..session import GameLoop, RoundSummary, Session, SessionManager, SessionState
from .conftest import FixedRandom


@pytest.fixture
def manager() -> SessionManager:
    return SessionManager(rng=FixedRandom(50))


class TestSession:
    """Tests for a single round's state."""

    def test_new_session_state(self, manager):
        """New sessions await a guess with no attempts."""
        session = manager.create_session()

        assert session.state == SessionState.AWAITING_GUESS
        assert session.attempts == 0
        assert session.guesses == []
        assert 1 <= session.target <= 100

    def test_target_outside_range_rejected(self):
        with pytest.raises(ValueError):
            Session(session_id="s", target=0, created_at=0.0)

    def test_wrong_guesses_count(self, manager):
        """Every recorded guess is one attempt."""
        session = manager.create_session()

        assert session.record_guess(80) == GuessOutcome.TOO_HIGH
        assert session.record_guess(20) == GuessOutcome.TOO_LOW
        assert session.attempts == 2
        assert session.is_active()

    def test_correct_guess_finishes(self, manager):
        session = manager.create_session()
        session.record_guess(10)

        assert session.record_guess(50) == GuessOutcome.CORRECT
        assert session.state == SessionState.FINISHED
        assert session.attempts == 2
        assert session.guesses == [10, 50]

    def test_no_guesses_after_finish(self, manager):
        """A finished session rejects further guesses."""
        session = manager.create_session()
        session.record_guess(50)

        with pytest.raises(ValueError):
            session.record_guess(50)

    def test_abandon(self, manager):
        session = manager.create_session()
        session.abandon()

        assert session.state == SessionState.ABANDONED
        assert not session.is_active()

    def test_abandon_keeps_finished_state(self, manager):
        session = manager.create_session()
        session.record_guess(50)
        session.abandon()

        assert session.state == SessionState.FINISHED

    def test_summary(self, manager):
        session = manager.create_session()
        session.record_guess(60)
        session.record_guess(50)

        summary = session.summary()
        assert isinstance(summary, RoundSummary)
        assert summary.target == 50
        assert summary.attempts == 2
        assert summary.guesses == [60, 50]
        assert summary.state == SessionState.FINISHED
        assert summary.duration_seconds >= 0.0


class TestSessionManager:
    """Tests for session lifecycle."""

    def test_target_from_picker(self):
        manager = SessionManager(rng=FixedRandom(12, 88))

        assert manager.create_session().target == 12
        assert manager.create_session().target == 88

    def test_explicit_target(self, manager):
        assert manager.create_session(target=3).target == 3

    def test_sessions_get_unique_ids(self, manager):
        first = manager.create_session()
        second = manager.create_session()
        assert first.session_id != second.session_id

    def test_session_lifecycle(self, manager):
        """Sessions can be created, looked up and ended."""
        session = manager.create_session()
        session_id = session.session_id

        assert session_id in manager.list_active_sessions()
        assert manager.get_session(session_id) is session

        session.record_guess(50)
        summary = manager.end_session(session_id)

        assert summary.state == SessionState.FINISHED
        assert manager.get_session(session_id) is None
        assert manager.history == [summary]
        assert manager.rounds_played == 1

    def test_end_active_session_abandons(self, manager):
        session = manager.create_session()
        summary = manager.end_session(session.session_id)

        assert summary.state == SessionState.ABANDONED
        assert session.session_id not in manager.list_active_sessions()

    def test_end_unknown_session(self, manager):
        assert manager.end_session("missing") is None
        assert manager.history == []


class TestGameLoop:
    """Tests for the per-round driver."""

    def test_handle_invalid_input(self, manager, make_reader, console, output):
        """Rejected input is reported and not counted."""
        session = manager.create_session()
        loop = GameLoop(session, make_reader(), console)

        result = loop.handle(ReadResult.failure(ReadError.NOT_A_NUMBER))

        assert not result.success
        assert result.error == ReadError.NOT_A_NUMBER
        assert session.attempts == 0
        assert "please enter a valid number" in output.getvalue()

    def test_handle_out_of_range_names_bounds(self, manager, make_reader, console, output):
        loop = GameLoop(manager.create_session(), make_reader(), console)
        loop.handle(ReadResult.failure(ReadError.OUT_OF_RANGE))

        assert "between 1 and 100" in output.getvalue()

    def test_handle_guesses(self, manager, make_reader, console, output):
        session = manager.create_session()
        loop = GameLoop(session, make_reader(), console)

        assert loop.handle(ReadResult.ok(80)).outcome == GuessOutcome.TOO_HIGH
        assert loop.handle(ReadResult.ok(20)).outcome == GuessOutcome.TOO_LOW
        result = loop.handle(ReadResult.ok(50))

        assert result.outcome == GuessOutcome.CORRECT
        assert result.session_state == SessionState.FINISHED
        assert result.attempts == 3

    def test_play_until_correct(self, manager, make_reader, console, output):
        """Invalid lines are skipped without counting as attempts."""
        session = manager.create_session()
        reader = make_reader("", "abc", "0", "70", "50")

        state = GameLoop(session, reader, console).play()

        assert state == SessionState.FINISHED
        assert session.attempts == 2
        text = output.getvalue()
        assert "Welcome to the number guessing game!" in text
        assert "input must not be empty" in text
        assert "Too high! Try again." in text
        assert "You got it in 2 attempts." in text

    def test_play_abandons_at_end_of_input(self, manager, make_reader, console, output):
        """Input ending mid-round abandons the session instead of looping."""
        session = manager.create_session()
        reader = make_reader("30")

        state = GameLoop(session, reader, console).play()

        assert state == SessionState.ABANDONED
        assert session.attempts == 1
        assert "failed to read input" in output.getvalue()
