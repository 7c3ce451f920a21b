"""
Command modules for the checkers CLI.

This package contains the individual command implementations for the CLI.
"""

from . import show
from . import moves
from . import play
from . import simulate

__all__ = ['show', 'moves', 'play', 'simulate']
