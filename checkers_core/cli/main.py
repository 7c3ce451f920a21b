"""
Main CLI entry point for the checkers rule engine.

This module provides the main command-line interface for the checkers tool.
"""

import logging
import click
from typing import Optional

from .config import get_config, set_config, CLIConfig
from .commands import show, moves, play, simulate
from .. import __version__


def setup_logging(verbose: bool = False, quiet: bool = False):
    """Setup logging configuration."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@click.group(name='checkers', invoke_without_command=True)
@click.option('--config', '-c',
              help='Path to configuration file')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True,
              help='Suppress non-essential output')
@click.option('--no-color', is_flag=True,
              help='Disable colored output')
@click.version_option(version=__version__, prog_name='checkers')
@click.pass_context
def cli(ctx, config: Optional[str], verbose: bool, quiet: bool, no_color: bool):
    """
    Checkers rule engine CLI

    Inspect positions, query legal moves, replay move sequences and run
    random self-play games on an 8x8 American checkers board.

    Examples:
        checkers show
        checkers moves 5 2
        checkers validate 5 2 4 3
        checkers play 5,2:4,3 2,1:3,2
        checkers simulate --games 50
    """
    # If no command is provided, show help
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    setup_logging(verbose, quiet)

    # Load configuration
    if config:
        cli_config = CLIConfig(config_file=config)
    else:
        cli_config = get_config()

    # Override config with command line options
    if verbose:
        cli_config.set('verbose', True)
    if quiet:
        cli_config.set('quiet', True)
    if no_color:
        cli_config.set('color_output', False)

    set_config(cli_config)

    ctx.ensure_object(dict)
    ctx.obj['config'] = cli_config


# Register commands
cli.add_command(show.show)
cli.add_command(moves.moves)
cli.add_command(moves.validate)
cli.add_command(play.play)
cli.add_command(simulate.simulate)


@cli.command()
@click.pass_context
def config(ctx):
    """Show current configuration."""
    config_obj = ctx.obj['config']

    click.echo("Current configuration:")
    click.echo("=" * 50)

    for key, value in config_obj.to_dict().items():
        click.echo(f"{key:<25}: {value}")

    if config_obj.config_file:
        click.echo(f"\nLoaded from: {config_obj.config_file}")
    else:
        click.echo("\nUsing default configuration (no config file found)")


if __name__ == '__main__':
    cli()
