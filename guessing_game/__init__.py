"""Guess-the-number console game."""

__version__ = "0.1.0"
