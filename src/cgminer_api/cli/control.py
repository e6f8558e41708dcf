"""CLI: cgminer restart|quit|raw"""

import json

import click
from rich.console import Console

from cgminer_api.models.envelope import Envelope

console = Console()


def _run(ctx, call):
    from cgminer_api.cli.main import _run
    return _run(ctx, call)


class _RawEnvelope(Envelope):
    """Envelope that keeps the command-specific payload keys."""

    model_config = {"populate_by_name": True, "extra": "allow"}


@click.command("restart")
@click.pass_context
def restart_cmd(ctx):
    """Restart the miner software."""
    _run(ctx, lambda c: c.restart())
    console.print("[green]Restart requested.[/green]")


@click.command("quit")
@click.pass_context
def quit_cmd(ctx):
    """Stop the miner software."""
    _run(ctx, lambda c: c.quit())
    console.print("[green]Quit requested.[/green]")


@click.command("raw")
@click.argument("command")
@click.argument("parameter", required=False, default="")
@click.pass_context
def raw_cmd(ctx, command, parameter):
    """Send any COMMAND and print the decoded envelope."""
    envelope = _run(ctx, lambda c: c.call(command, parameter, response_model=_RawEnvelope))
    click.echo(json.dumps(envelope.model_dump(by_alias=True), indent=2))
