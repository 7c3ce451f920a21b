"""Utility functions and classes."""

from .encoding import StateEncoder, from_square_number, to_square_number

__all__ = ['StateEncoder', 'from_square_number', 'to_square_number']
