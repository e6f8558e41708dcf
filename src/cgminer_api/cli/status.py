"""CLI: cgminer version|summary|stats|devs|devdetails"""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

console = Console()

MODELS = ("s7", "s9", "t9", "d3", "l3")


def _run(ctx, call):
    from cgminer_api.cli.main import _run
    return _run(ctx, call)


def _dump(records):
    from cgminer_api.cli.main import _dump
    return _dump(records)


def _print_record(title: str, record) -> None:
    table = Table(title=title, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for key, value in record.model_dump(by_alias=True).items():
        if value in ("", None):
            continue
        table.add_row(key, str(value))
    console.print(table)


@click.command("version")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def version_cmd(ctx, json_output):
    """Show miner software versions and hardware type."""
    version = _run(ctx, lambda c: c.version())
    if json_output:
        _dump(version)
        return
    _print_record(f"{version.type or 'Miner'} version", version)


@click.command("summary")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def summary_cmd(ctx, json_output):
    """Show hashrate and share counters."""
    summary = _run(ctx, lambda c: c.summary())
    if json_output:
        _dump(summary)
        return
    _print_record("Summary", summary)


@click.command("stats")
@click.option("--model", type=click.Choice(MODELS), default=None, help="Narrow to one hardware model.")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def stats_cmd(ctx, model: Optional[str], json_output):
    """Show per-board statistics."""
    stats = _run(ctx, lambda c: c.stats())
    record = getattr(stats, model)() if model else stats
    if json_output:
        _dump(record)
        return
    _print_record(f"Stats ({model.upper() if model else stats.type or 'generic'})", record)


@click.command("devs")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def devs_cmd(ctx, json_output):
    """List devices."""
    devs = _run(ctx, lambda c: c.devs())
    if json_output:
        _dump(devs)
        return
    table = Table(title=f"Devices ({len(devs)})")
    table.add_column("GPU", style="bold")
    table.add_column("Enabled")
    table.add_column("Status")
    table.add_column("Temp")
    table.add_column("MHS av")
    table.add_column("Accepted")
    table.add_column("Rejected")
    for d in devs:
        table.add_row(str(d.gpu), d.enabled, d.status, f"{d.temperature:.1f}",
                      f"{d.mhs_av:.2f}", str(d.accepted), str(d.rejected))
    console.print(table)


@click.command("devdetails")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def devdetails_cmd(ctx, json_output):
    """List device details."""
    details = _run(ctx, lambda c: c.devdetails())
    if json_output:
        _dump(details)
        return
    table = Table(title=f"Device details ({len(details)})")
    table.add_column("ID", style="bold")
    table.add_column("Model")
    table.add_column("Kernel")
    table.add_column("Path")
    for d in details:
        table.add_row(str(d.id), d.model, d.kernel, d.device_path)
    console.print(table)
