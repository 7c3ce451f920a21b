"""
Utility functions for the checkers CLI.

Provides board file loading, board rendering, move parsing, progress bars and
error display.
"""

import json
from typing import Any, List, Optional, Tuple
import click

from .config import get_config
from ..game.constants import BOARD_SIZE, Player, PieceType, is_playable_square
from ..game.board import Board
from ..game.game_state import GameState
from ..game.types import Move

PIECE_COLORS = {
    PieceType.RED: 'red',
    PieceType.RED_KING: 'red',
    PieceType.BLACK: 'cyan',
    PieceType.BLACK_KING: 'cyan',
}


def show_progress(iterable, length=None, label="Processing", show_eta=True, hidden=False):
    """Show a progress bar for long-running operations."""
    config = get_config()
    if hidden or config.get('quiet', False):
        # In quiet mode, don't show progress bars
        return _NullProgress(iterable)

    return click.progressbar(
        iterable,
        length=length,
        label=label,
        show_eta=show_eta,
        show_percent=True,
        show_pos=True
    )


class _NullProgress:
    """Context-manager stand-in for click.progressbar in quiet mode."""

    def __init__(self, iterable):
        self._iterable = iterable

    def __enter__(self):
        return self._iterable

    def __exit__(self, *exc_info):
        return False


def load_game_state(path: Optional[str]) -> GameState:
    """Build a standalone GameState from a JSON board file.

    The file holds either a bare 8x8 matrix or an object with a "board"
    matrix and an optional "current_player" color name. With no path, the
    starting layout is returned.
    """
    game_state = GameState()
    if path is None:
        return game_state

    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise click.ClickException(f"Cannot read board file {path}: {e}")

    try:
        if isinstance(data, dict):
            matrix = data.get('board')
            current_player = Player.from_string(data.get('current_player', 'red'))
        else:
            matrix = data
            current_player = Player.RED
        board = Board.from_matrix(matrix)
    except (TypeError, ValueError) as e:
        raise click.ClickException(f"Invalid board file {path}: {e}")

    game_state.board = board
    game_state.current_player = current_player
    game_state.my_color = current_player
    return game_state


def parse_square(text: str) -> Tuple[int, int]:
    """Parse "row,col" into a coordinate pair."""
    try:
        row, col = (int(part) for part in text.split(','))
    except ValueError:
        raise click.BadParameter(f"Expected ROW,COL but got {text!r}")
    return row, col


def parse_move(text: str) -> Tuple[int, int, int, int]:
    """Parse "r1,c1:r2,c2" into from/to coordinates."""
    if ':' not in text:
        raise click.BadParameter(f"Expected FROM_ROW,FROM_COL:TO_ROW,TO_COL but got {text!r}")
    source, destination = text.split(':', 1)
    return parse_square(source) + parse_square(destination)


def render_board(board: Board, use_color: bool = True,
                 highlights: Optional[List[Move]] = None) -> str:
    """Render the board as text, optionally marking move destinations with '*'."""
    targets = {(m.destination.row, m.destination.col) for m in highlights or []}

    lines = ["   " + " ".join(str(col) for col in range(BOARD_SIZE))]
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            piece = board.grid[row][col]
            if (row, col) in targets:
                cell = click.style('*', fg='yellow', bold=True) if use_color else '*'
            elif piece != PieceType.EMPTY:
                cell = piece.symbol
                if use_color:
                    cell = click.style(cell, fg=PIECE_COLORS[piece], bold=piece.is_king())
            else:
                cell = '.' if is_playable_square(row, col) else ' '
            cells.append(cell)
        lines.append(f"{row:2d} " + " ".join(cells))
    return "\n".join(lines)


def echo_json(data: Any):
    click.echo(json.dumps(data, indent=2))


def handle_error(error: Exception, verbose: bool = False, context: str = None) -> None:
    """Display an error with its context."""
    click.echo(click.style(f"✗ Error: {error}", fg='red'), err=True)

    if context:
        click.echo(f"  Context: {context}", err=True)

    if verbose:
        click.echo(click.style("\nDetailed traceback:", fg='cyan'), err=True)
        import traceback
        click.echo(traceback.format_exc(), err=True)
    else:
        click.echo("\nUse --verbose for detailed error information", err=True)


def verbose_echo(message: str, **kwargs):
    """Echo message only in verbose mode."""
    config = get_config()
    if config.get('verbose', False):
        click.echo(message, **kwargs)


def quiet_echo(message: str, **kwargs):
    """Echo message unless in quiet mode."""
    config = get_config()
    if not config.get('quiet', False):
        click.echo(message, **kwargs)
