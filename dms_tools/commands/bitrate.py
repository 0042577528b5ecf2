"""Bit rate mode parsing command."""

from __future__ import annotations

import json

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dms_tools.core.config import AppConfig
from dms_tools.core.types import BitRateMode


@click.command()
@click.argument("labels", nargs=-1, required=True)
@click.option(
    "--lenient",
    "-l",
    is_flag=True,
    help="Use the configured default mode for unrecognized labels instead of failing",
)
@click.pass_context
def bitrate(ctx: click.Context, labels: tuple[str, ...], lenient: bool) -> None:
    """Parse bit rate mode labels such as CBR or Variable."""
    config: AppConfig = ctx.obj["config"]
    console: Console = ctx.obj["console"]

    fallback = config.default_bit_rate_mode
    results = [(label, BitRateMode.parse(label)) for label in labels]

    if config.output_format == "json":
        data = []
        for label, mode in results:
            resolved = mode or (fallback if lenient else None)
            data.append({
                "label": label,
                "mode": resolved.name if resolved else None,
                "display_name": resolved.display_name() if resolved else None,
                "recognized": mode is not None,
                "fallback": fallback.name,
            })
        print(json.dumps(data, indent=2))
    else:
        table = Table(title="Bit Rate Modes")
        table.add_column("Label", style="cyan")
        table.add_column("Mode", style="green")
        table.add_column("Display Name", style="green")

        for label, mode in results:
            if mode is not None:
                table.add_row(escape(repr(label)), mode.name, mode.display_name())
            elif lenient:
                table.add_row(escape(repr(label)), f"[yellow]{fallback.name} (default)[/yellow]", fallback.display_name())
            else:
                table.add_row(escape(repr(label)), "[red]unrecognized[/red]", f"default: {fallback.display_name()}")

        console.print(table)

    if not lenient and any(mode is None for _, mode in results):
        ctx.exit(1)
