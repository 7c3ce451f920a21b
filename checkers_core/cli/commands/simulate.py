"""
Simulate command for random self-play.
"""

import click
from collections import Counter
from typing import Optional

from ..config import get_config
from ..utils import show_progress, echo_json, verbose_echo
from ...game.computer_player import play_random_game
from ...game.types import GameResult


@click.command(name='simulate')
@click.option('--games', '-n', type=int,
              help='Number of games to play (default from config)')
@click.option('--max-moves', type=int,
              help='Moves before a game is scored as a draw (default from config)')
@click.option('--seed', type=int,
              help='Random seed for reproducible runs')
@click.option('--format', '-f', 'output_format',
              type=click.Choice(['text', 'json']),
              help='Output format')
def simulate(games: Optional[int], max_moves: Optional[int], seed: Optional[int],
             output_format: Optional[str]):
    """
    Play random games between two computer players and tally the results.

    \b
    Examples:
        checkers simulate --games 100
        checkers simulate -n 20 --max-moves 150 --seed 7 --format json
    """
    config = get_config()
    games = games if games is not None else config.get('simulation_games', 10)
    max_moves = max_moves if max_moves is not None else config.get('max_moves', 200)
    seed = seed if seed is not None else config.get('seed')
    output_format = output_format or config.get('output_format', 'text')

    if games < 1:
        raise click.BadParameter("must be at least 1", param_hint='--games')

    results = Counter()
    total_moves = total_captures = total_promotions = 0

    with show_progress(range(games), label="Playing games",
                       hidden=output_format == 'json') as game_indices:
        for index in game_indices:
            game_seed = None if seed is None else seed + index
            record = play_random_game(max_moves=max_moves, seed=game_seed)
            results[record.result] += 1
            total_moves += len(record.moves)
            total_captures += record.captures
            total_promotions += record.promotions
            verbose_echo(f"\nGame {index + 1}: {record.result.value} in {len(record.moves)} moves")

    summary = {
        'games': games,
        'red_wins': results[GameResult.RED_WINS],
        'black_wins': results[GameResult.BLACK_WINS],
        'draws': results[GameResult.DRAW],
        'average_moves': round(total_moves / games, 2),
        'captures': total_captures,
        'promotions': total_promotions,
    }

    if output_format == 'json':
        echo_json(summary)
        return

    click.echo("\nSimulation results:")
    click.echo("=" * 30)
    for key, value in summary.items():
        click.echo(f"{key:<15}: {value}")
