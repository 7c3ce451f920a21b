"""
Show command for printing a board.
"""

import click
from typing import Optional

from ..config import get_config
from ..utils import load_game_state, render_board, echo_json
from ...game.constants import Player
from ...game.types import GameResult


@click.command(name='show')
@click.option('--board', '-b', 'board_file', type=click.Path(dir_okay=False),
              help='JSON board file (defaults to the starting layout)')
@click.option('--format', '-f', 'output_format',
              type=click.Choice(['text', 'json']),
              help='Output format')
def show(board_file: Optional[str], output_format: Optional[str]):
    """
    Print a board, the side to move and the game status.

    \b
    Examples:
        checkers show
        checkers show --board position.json --format json
    """
    config = get_config()
    output_format = output_format or config.get('output_format', 'text')

    game_state = load_game_state(board_file)
    result = game_state.get_result()

    if output_format == 'json':
        echo_json({
            'board': game_state.board.to_matrix(),
            'current_player': game_state.current_player.value,
            'pieces': {player.value: game_state.board.count(player) for player in Player},
            'result': result.value,
        })
        return

    click.echo(render_board(game_state.board, use_color=config.get('color_output', True)))
    click.echo(f"\n{game_state.current_player.name} to move")
    if result != GameResult.IN_PROGRESS:
        click.echo(f"Game over: {result.value}")
