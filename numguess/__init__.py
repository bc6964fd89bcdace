"""
numguess - Console Number Guessing Game

A small interactive game played over stdin/stdout:
- The engine picks a secret number in a fixed range
- The player guesses until the number is found
- Each guess is answered with "too high", "too low" or "correct"
- After each round the player decides whether to play again
"""

__version__ = "0.1.0"
