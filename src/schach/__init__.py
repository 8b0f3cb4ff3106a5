"""Schach — a chess rules engine with a small Qt front end."""

__version__ = "0.1.0"
