"""Hangman, Snake and Wordle behind one menu, with a shared leaderboard."""

__version__ = "0.1.0"
__all__ = ["__version__"]