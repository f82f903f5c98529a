#!/usr/bin/env python3
import asyncio
import json
import logging
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from shared.rpc import RpcError, generate_skill_markdown, render_error

from .tool import DESCRIPTION, PROCEDURES, TOOL_NAME, get_dispatcher

console = Console()


def _is_error(output: str) -> bool:
    try:
        data = json.loads(output)
    except ValueError:
        return False
    return isinstance(data, dict) and data.get("error") is True


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log outbound requests")
def cli(verbose: bool):
    """Kilo Cloud tool CLI"""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("procedure")
@click.argument("params", required=False)
@click.option("--raw", is_flag=True, help="Return the body as text with its HTTP status")
@click.option("--timeout", type=float, default=None, help="Request timeout in seconds")
@click.option("--audit/--no-audit", default=None, help="Record the call in the audit log")
def call(procedure: str, params: Optional[str], raw: bool, timeout: Optional[float], audit: Optional[bool]):
    """Execute a procedure, e.g. call webhookTriggers.get '{"triggerId": "x"}'"""
    try:
        dispatcher = get_dispatcher(audit=audit)
    except RpcError as e:
        output = render_error(e)
    else:
        output = asyncio.run(dispatcher.dispatch(procedure, params, raw=raw, timeout=timeout))
    click.echo(output)
    if _is_error(output):
        raise SystemExit(1)


@cli.command()
def describe():
    """Print the tool description given to the agent"""
    click.echo(DESCRIPTION)


@cli.command()
def skill():
    """Print skill markdown for the tool"""
    click.echo(generate_skill_markdown(
        PROCEDURES,
        name=TOOL_NAME,
        description="Control Kilo Cloud agents, sessions and webhooks",
    ))


@cli.command(name="list")
@click.option("--namespace", help="Only show one namespace")
def list_procedures(namespace: Optional[str]):
    """List available procedures"""
    procs = [p for p in PROCEDURES.values() if namespace is None or p.namespace == namespace]

    if not procs:
        console.print("[yellow]No procedures found[/yellow]")
        return

    table = Table(title="Procedures")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Method", style="magenta", no_wrap=True)
    table.add_column("Path", style="blue")
    table.add_column("Description", style="white")

    for proc in procs:
        table.add_row(proc.key, proc.method, proc.path, proc.descriptor.description)

    console.print(table)


def main():
    cli()


if __name__ == "__main__":
    main()
