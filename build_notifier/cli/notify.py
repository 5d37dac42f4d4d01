"""Notification commands."""

import json

import click

from ..config import ConfigError, NotifierConfig
from ..notifier import SlackNotifier, prepare_notification
from ..sentry import init_sentry
from ..slack import SlackTransportError
from ..types import NotifyResult


def _load_build_data(event_file):
    try:
        return json.load(event_file)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="EVENT_FILE")


def _print_result(result: NotifyResult):
    if result.is_sent:
        click.echo(f"Sent to {', '.join(result.channels)}")
    elif result.is_skipped:
        click.echo(f"Skipped: {result.message}")
    else:
        click.echo(f"Ignored: {result.message}")


@click.command()
@click.argument('event_file', type=click.File('r'))
@click.option('--token', envvar='SLACK_TOKEN', help='Slack bot token (default: $SLACK_TOKEN)')
@click.pass_context
def send(ctx, event_file, token):
    """Send a Slack notification for the build data in EVENT_FILE ('-' for stdin)."""
    build_data = _load_build_data(event_file)

    config = NotifierConfig.from_env()
    if token:
        config.slack_token = token

    try:
        notifier = SlackNotifier(config)
    except ConfigError as e:
        raise click.UsageError(str(e))

    init_sentry(config)

    try:
        result = notifier.notify(build_data)
    except SlackTransportError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    _print_result(result)


@click.command()
@click.argument('event_file', type=click.File('r'))
def render(event_file):
    """Print the Slack payloads for EVENT_FILE without sending them."""
    build_data = _load_build_data(event_file)

    prepared = prepare_notification(build_data)
    if isinstance(prepared, NotifyResult):
        _print_result(prepared)
        return

    payloads = [prepared.message.to_payload(channel) for channel in prepared.settings.channels]
    click.echo(json.dumps(payloads, indent=2))
