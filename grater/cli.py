"""
Command Line Interface Module

Provides CLI commands for running and configuring grater.
"""

import sys

import click
import yaml

from .app import ExitCode, Grater
from .config import ConfigManager, DEFAULT_CONFIG_PATH
from .display import get_primary_bounds
from .errors import GraterError
from .logging_setup import setup_logging, get_logger


def _start(ctx, min_delay=None, max_delay=None, title=None):
    """Apply overrides, run grater and exit with its code."""
    config = ctx.obj['config']
    logger = ctx.obj['logger']

    if min_delay is not None:
        config.set('delay.min_seconds', min_delay)
    if max_delay is not None:
        config.set('delay.max_seconds', max_delay)
    if title:
        config.set('window.title', title)

    logger.info("Starting grater")

    try:
        code = Grater(config).run()
    except GraterError as e:
        logger.info(f"Startup failed: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.STARTUP_FAILURE)
    except Exception as e:
        logger.info(f"Failed to start grater: {e}")
        click.echo(f"Error starting grater: {e}", err=True)
        sys.exit(ExitCode.STARTUP_FAILURE)

    sys.exit(int(code))


@click.group(invoke_without_command=True)
@click.option('--config', '-c', default=DEFAULT_CONFIG_PATH,
              help='Path to configuration file')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose logging')
@click.pass_context
def cli(ctx, config, verbose):
    """grater - keep the screen awake by moving the mouse around."""
    ctx.ensure_object(dict)

    try:
        # Only an explicitly chosen file has to exist
        required = ctx.get_parameter_source('config') != click.core.ParameterSource.DEFAULT
        config_manager = ConfigManager(config, required=required)
        ctx.obj['config'] = config_manager

        log_level = 'DEBUG' if verbose else config_manager.get('logging.level', 'INFO')
        log_file = config_manager.get_log_file_path()
        setup_logging(
            str(log_file) if log_file else None,
            log_level,
            'DEBUG' if verbose else 'WARNING',
            config_manager.get('logging.max_log_size_mb', 50),
            config_manager.get('logging.backup_count', 5),
        )
        ctx.obj['logger'] = get_logger('cli')

    except Exception as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(ExitCode.STARTUP_FAILURE)

    if ctx.invoked_subcommand is None:
        _start(ctx)


@cli.command()
@click.option('--min-delay', type=int, default=None,
              help='Shortest pause between moves in seconds')
@click.option('--max-delay', type=int, default=None,
              help='Exclusive upper bound of the pause in seconds')
@click.option('--title', '-t', default=None,
              help='Window title')
@click.pass_context
def run(ctx, min_delay, max_delay, title):
    """Run grater until its window is closed."""
    _start(ctx, min_delay, max_delay, title)


@cli.command()
@click.pass_context
def monitor(ctx):
    """Show the bounds cursor positions are drawn from."""
    logger = ctx.obj['logger']

    try:
        bounds = get_primary_bounds()
    except GraterError as e:
        logger.info(f"Monitor lookup failed: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.STARTUP_FAILURE)

    click.echo(f"Primary monitor: {bounds.max_x}x{bounds.max_y} at ({bounds.origin_x}, {bounds.origin_y})")
    click.echo(f"Cursor range: x in [0, {bounds.max_x}), y in [0, {bounds.max_y})")


@cli.command()
@click.option('--key', required=True, help='Configuration key (e.g., delay.max_seconds)')
@click.option('--value', required=True, help='Configuration value')
@click.pass_context
def config_set(ctx, key, value):
    """Set a configuration value."""
    config = ctx.obj['config']
    logger = ctx.obj['logger']

    try:
        if value.lower() in ('true', 'false'):
            value = value.lower() == 'true'
        elif value.lstrip('-').isdigit():
            value = int(value)
        elif value.lstrip('-').replace('.', '', 1).isdigit():
            value = float(value)

        config.set(key, value)
        if key.startswith('delay.'):
            config.validate_delays()
        if key.startswith('logging.'):
            config.validate_logging()
        config.save_config()

        click.echo(f"Configuration updated: {key} = {value}")
        logger.info(f"Configuration updated: {key} = {value}")

    except Exception as e:
        logger.info(f"Failed to update configuration: {e}")
        click.echo(f"Error updating configuration: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.option('--key', help='Specific configuration key to show')
@click.pass_context
def config_get(ctx, key):
    """Get configuration value(s)."""
    config = ctx.obj['config']

    if key:
        value = config.get(key)
        if value is not None:
            click.echo(f"{key}: {value}")
        else:
            click.echo(f"Configuration key '{key}' not found")
    else:
        click.echo(yaml.dump(config.config, default_flow_style=False))


if __name__ == '__main__':
    cli()
