"""
CLI interface for the checkers rule engine.

Provides command-line tools for:
- Printing positions
- Listing and validating moves
- Replaying move sequences
- Running random self-play games
"""

__all__ = ['cli']

# Lazy import to avoid circular dependencies
def __getattr__(name):
    if name == 'cli':
        from .main import cli
        return cli
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
