"""Guess classification for the country guessing game."""

from globeguess.guesses.guessapi import (
    GuessOutcome,
    GuessResult,
    GuessTurn,
    resolve_guess,
    is_answer,
    check_guess,
)

__all__ = [
    "GuessOutcome",
    "GuessResult",
    "GuessTurn",
    "resolve_guess",
    "is_answer",
    "check_guess",
]
