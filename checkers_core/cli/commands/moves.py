"""
Commands for querying move legality.
"""

import click
from typing import Optional

from ..config import get_config
from ..utils import load_game_state, render_board, echo_json
from ...game.moves import MoveValidator


@click.command(name='moves')
@click.argument('row', type=int)
@click.argument('col', type=int)
@click.option('--board', '-b', 'board_file', type=click.Path(dir_okay=False),
              help='JSON board file (defaults to the starting layout)')
@click.option('--format', '-f', 'output_format',
              type=click.Choice(['text', 'json']),
              help='Output format')
def moves(row: int, col: int, board_file: Optional[str], output_format: Optional[str]):
    """
    List the legal moves of the piece on ROW COL.

    Forced capture applies: if any piece of the same color can jump,
    only jumps are listed.

    \b
    Examples:
        checkers moves 5 0
        checkers moves 2 3 --board position.json --format json
    """
    config = get_config()
    output_format = output_format or config.get('output_format', 'text')

    game_state = load_game_state(board_file)
    validator = MoveValidator(game_state)
    possible = validator.get_possible_moves(row, col)

    if output_format == 'json':
        echo_json([
            {'row': m.destination.row, 'col': m.destination.col, 'type': m.type.value}
            for m in possible
        ])
        return

    if not possible:
        click.echo(f"No legal moves for ({row},{col})")
        piece = game_state.board.get_piece(row, col)
        owner = piece.get_player() if piece is not None else None
        if owner is not None and validator.has_available_capture(owner):
            click.echo("A capture is available elsewhere and must be taken.")
        return

    click.echo(render_board(game_state.board, use_color=config.get('color_output', True),
                            highlights=possible))
    click.echo("")
    for move in possible:
        click.echo(f"  {move.destination} {move.type.value}")


@click.command(name='validate')
@click.argument('from_row', type=int)
@click.argument('from_col', type=int)
@click.argument('to_row', type=int)
@click.argument('to_col', type=int)
@click.option('--board', '-b', 'board_file', type=click.Path(dir_okay=False),
              help='JSON board file (defaults to the starting layout)')
@click.pass_context
def validate(ctx, from_row: int, from_col: int, to_row: int, to_col: int,
             board_file: Optional[str]):
    """
    Check whether moving FROM_ROW FROM_COL to TO_ROW TO_COL is legal.

    Exits with status 1 when the move is illegal.
    """
    game_state = load_game_state(board_file)
    validator = MoveValidator(game_state)

    if validator.is_valid_move(from_row, from_col, to_row, to_col):
        kind = 'capture' if validator.is_capture_move(from_row, from_col, to_row, to_col) else 'move'
        click.echo(click.style(f"valid ({kind})", fg='green'))
        return

    click.echo(click.style("invalid", fg='red'))
    ctx.exit(1)
