"""CLI: cgminer pools, cgminer pool add|enable|disable|remove|switch"""

import click
from rich.console import Console
from rich.table import Table

console = Console()


def _run(ctx, call):
    from cgminer_api.cli.main import _run
    return _run(ctx, call)


def _dump(records):
    from cgminer_api.cli.main import _dump
    return _dump(records)


@click.command("pools")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def pools_cmd(ctx, json_output):
    """List configured pools."""
    pools = _run(ctx, lambda c: c.pools())
    if json_output:
        _dump(pools)
        return
    table = Table(title=f"Pools ({len(pools)})")
    table.add_column("POOL", style="bold")
    table.add_column("URL")
    table.add_column("User")
    table.add_column("Status")
    table.add_column("Priority")
    table.add_column("Accepted")
    table.add_column("Rejected")
    for p in pools:
        table.add_row(str(p.pool), p.url, p.user, p.status, str(p.priority),
                      str(p.accepted), str(p.rejected))
    console.print(table)


@click.group()
def pool():
    """Pool management."""


@pool.command("add")
@click.argument("url")
@click.argument("user")
@click.argument("password")
@click.pass_context
def pool_add(ctx, url, user, password):
    """Add a pool (commas in arguments are not escaped)."""
    _run(ctx, lambda c: c.add_pool(url, user, password))
    console.print(f"[green]Pool {url} added.[/green]")


def _pool_command(name: str, method: str, verb: str):
    @pool.command(name, help=f"{verb.capitalize()} pool INDEX.")
    @click.argument("index", type=int)
    @click.pass_context
    def command(ctx, index):
        _run(ctx, lambda c: getattr(c, method)(index))
        console.print(f"[green]Pool {index} {verb}.[/green]")

    return command


pool_enable = _pool_command("enable", "enable_pool", "enabled")
pool_disable = _pool_command("disable", "disable_pool", "disabled")
pool_remove = _pool_command("remove", "remove_pool", "removed")
pool_switch = _pool_command("switch", "switch_pool", "switched to")
