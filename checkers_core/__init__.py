"""Checkers rule engine: board state, move legality and turn handling."""

__version__ = "0.1.0"
