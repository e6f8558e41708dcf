"""
cgminer CLI — `cgminer` command.

Commands:
  cgminer version              Miner software versions
  cgminer summary              Hashrate and share counters
  cgminer stats [--model s9]   Per-board statistics
  cgminer devs | devdetails    Device list
  cgminer pools                Configured pools
  cgminer pool <cmd>           Add, enable, disable, remove, switch pools
  cgminer restart | quit       Control commands
  cgminer raw <cmd> [param]    Any command, raw envelope
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Callable, Optional

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.markup import escape
except ImportError:
    raise SystemExit("CLI requires extras: pip install cgminer-api[cli]")

from cgminer_api.client import AsyncCGMiner, DEFAULT_PORT, DEFAULT_TIMEOUT
from cgminer_api.errors import CGMinerError

console = Console()
CONFIG_FILE = Path.home() / ".cgminer" / "config.json"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _get_client(ctx: click.Context) -> AsyncCGMiner:
    opts = ctx.find_root().obj or {}
    cfg = _load_config()
    host = opts.get("host") or cfg.get("host")
    if not host:
        console.print(f"[red]No miner host. Pass --host, set CGMINER_HOST or add it to {CONFIG_FILE}.[/red]")
        raise SystemExit(1)
    port = opts.get("port") or cfg.get("port") or DEFAULT_PORT
    timeout = opts.get("timeout") or cfg.get("timeout") or DEFAULT_TIMEOUT
    return AsyncCGMiner(host, port=int(port), timeout=float(timeout))


def _run(ctx: click.Context, call: Callable[[AsyncCGMiner], Any]) -> Any:
    """Run one client call, turning API failures into a red message and exit 1."""
    client = _get_client(ctx)
    try:
        return asyncio.run(call(client))
    except CGMinerError as e:
        console.print(f"[red]{type(e).__name__}: {escape(str(e))}[/red]")
        raise SystemExit(1)


def _dump(records: Any) -> None:
    if isinstance(records, list):
        data = [r.model_dump(by_alias=True) for r in records]
    else:
        data = records.model_dump(by_alias=True)
    click.echo(json.dumps(data, indent=2))


@click.group()
@click.version_option("0.1.0")
@click.option("--host", envvar="CGMINER_HOST", default=None, help="Miner address.")
@click.option("--port", envvar="CGMINER_PORT", default=None, type=int, help=f"API port (default {DEFAULT_PORT}).")
@click.option("--timeout", envvar="CGMINER_TIMEOUT", default=None, type=float, help="Seconds per call.")
@click.option("-v", "--verbose", is_flag=True, help="Log protocol traffic.")
@click.pass_context
def main(ctx: click.Context, host: Optional[str], port: Optional[int], timeout: Optional[float], verbose: bool):
    """cgminer API client — query and control ASIC miners."""
    ctx.obj = {"host": host, "port": port, "timeout": timeout}
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=[RichHandler(console=console)])


# Register subcommands from separate modules
from cgminer_api.cli.status import version_cmd, summary_cmd, stats_cmd, devs_cmd, devdetails_cmd
from cgminer_api.cli.pools import pools_cmd, pool
from cgminer_api.cli.control import restart_cmd, quit_cmd, raw_cmd

main.add_command(version_cmd)
main.add_command(summary_cmd)
main.add_command(stats_cmd)
main.add_command(devs_cmd)
main.add_command(devdetails_cmd)
main.add_command(pools_cmd)
main.add_command(pool)
main.add_command(restart_cmd)
main.add_command(quit_cmd)
main.add_command(raw_cmd)


if __name__ == "__main__":
    main()
