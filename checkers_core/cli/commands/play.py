"""
Play command for applying a sequence of moves.
"""

import click
from typing import Optional, Tuple

from ..config import get_config
from ..utils import (
    load_game_state,
    parse_move,
    render_board,
    echo_json,
    handle_error,
    quiet_echo,
)
from ...game.turns import TurnManager
from ...game.types import GameResult, TurnPhase


@click.command(name='play')
@click.argument('moves', nargs=-1, required=True)
@click.option('--board', '-b', 'board_file', type=click.Path(dir_okay=False),
              help='JSON board file to start from (defaults to the starting layout)')
@click.option('--format', '-f', 'output_format',
              type=click.Choice(['text', 'json']),
              help='Output format')
@click.pass_context
def play(ctx, moves: Tuple[str, ...], board_file: Optional[str], output_format: Optional[str]):
    """
    Apply MOVES in order and print the resulting position.

    Each move is written FROM_ROW,FROM_COL:TO_ROW,TO_COL. A multi-jump is
    entered as one move per jump; the turn only passes once the jumping
    piece has no capture left.

    \b
    Examples:
        checkers play 5,0:4,1 2,1:3,2
        checkers play --board position.json 2,3:4,5 4,5:6,7
    """
    config = get_config()
    verbose = config.get('verbose', False)
    output_format = output_format or config.get('output_format', 'text')

    game_state = load_game_state(board_file)
    manager = TurnManager(game_state)
    selection = None

    for text in moves:
        from_row, from_col, to_row, to_col = parse_move(text)

        if selection is not None and selection.chain:
            if (selection.row, selection.col) != (from_row, from_col):
                handle_error(ValueError(f"{game_state.current_player.name} must keep jumping "
                                        f"with the piece on ({selection.row},{selection.col})"),
                             verbose, context=text)
                ctx.exit(1)
        else:
            picked = manager.select(from_row, from_col)
            if picked.phase != TurnPhase.SELECTED:
                reason = picked.message or f"No movable {game_state.current_player.name} piece there"
                handle_error(ValueError(reason), verbose, context=text)
                ctx.exit(1)
            selection = picked.selection

        outcome = manager.attempt_move(selection, to_row, to_col)
        if outcome.move is None:
            reason = outcome.message or "Illegal move"
            handle_error(ValueError(reason), verbose, context=text)
            ctx.exit(1)

        if output_format != 'json':
            suffix = " (continue jumping)" if outcome.chain_continues else ""
            quiet_echo(f"{outcome.move}{suffix}")
        selection = outcome.selection if outcome.phase == TurnPhase.SELECTED else None

    result = game_state.get_result() if selection is None else GameResult.IN_PROGRESS

    if output_format == 'json':
        echo_json({
            'board': game_state.board.to_matrix(),
            'current_player': game_state.current_player.value,
            'result': result.value,
            'moves': [
                {'from': [m.source.row, m.source.col], 'to': [m.destination.row, m.destination.col],
                 'type': m.type.value, 'player': m.player.value}
                for m in game_state.move_history
            ],
        })
        return

    click.echo("")
    click.echo(render_board(game_state.board, use_color=config.get('color_output', True)))
    click.echo(f"\n{game_state.current_player.name} to move")
    if result != GameResult.IN_PROGRESS:
        click.echo(f"Game over: {result.value}")
