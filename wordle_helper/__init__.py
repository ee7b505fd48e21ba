"""Candidate filtering and next-guess ranking for Wordle-style games."""

__version__ = "0.1.0"
