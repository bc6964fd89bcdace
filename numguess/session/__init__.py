"""
Session Module - One round of the game from target to correct guess.

A session:
- Is created with a fresh random target and zero attempts
- Counts every valid guess
- Finishes when the target is guessed
- Is abandoned if console input ends mid-round

Sessions live in memory only. Nothing survives the process.
"""

from .manager import SessionManager, Session, SessionState, RoundSummary
from .game_loop import GameLoop, TurnResult

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
    "RoundSummary",
    "GameLoop",
    "TurnResult",
]
