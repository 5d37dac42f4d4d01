"""
Build Notifier CLI

Command-line interface for sending and previewing build notifications.

Usage:
    build-notify [OPTIONS] COMMAND [ARGS]...

Commands:
    send      Send a Slack notification for build data
    render    Preview the Slack payloads without sending
"""

import click
import logging
import sys
from dotenv import load_dotenv

# Load .env file
load_dotenv()


def setup_logging(verbose: bool):
    """Configure logging to output to stdout."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(message)s',  # Simple format for CLI
        handlers=[logging.StreamHandler(sys.stdout)]
    )


@click.group()
@click.option('-v', '--verbose', is_flag=True, help='Verbose output (show DEBUG logs)')
@click.option('-q', '--quiet', is_flag=True, help='Quiet mode (only show warnings/errors)')
@click.pass_context
def cli(ctx, verbose, quiet):
    """Build Notifier - Slack notifications for build status events."""
    if quiet:
        logging.basicConfig(level=logging.WARNING, format='%(message)s')
    else:
        setup_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose


# Import and register commands
from .notify import send, render

cli.add_command(send)
cli.add_command(render)


if __name__ == '__main__':
    cli()
