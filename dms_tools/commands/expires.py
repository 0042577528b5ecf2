"""Expiration time inspection command."""

from __future__ import annotations

import json

import click
from rich.console import Console
from rich.markup import escape

from dms_tools.core.config import AppConfig
from dms_tools.core.expirable import BasicExpirable, ExpiringValue
from dms_tools.core.utils import format_datetime


@click.command()
@click.argument("millis", type=int, required=False)
@click.option(
    "--ttl",
    type=click.IntRange(min=0),
    help="Lifetime in seconds when MILLIS is omitted, defaults to the configured TTL",
)
@click.pass_context
def expires(ctx: click.Context, millis: int | None, ttl: int | None) -> None:
    """Show whether an epoch millisecond timestamp has expired.

    Without MILLIS, shows when a value cached now would expire.
    """
    config: AppConfig = ctx.obj["config"]
    console: Console = ctx.obj["console"]

    expirable: BasicExpirable
    if millis is None:
        lifetime = config.expirable_ttl if ttl is None else ttl
        expirable = ExpiringValue.after(None, lifetime)
    else:
        if ttl is not None:
            raise click.UsageError("--ttl only applies when MILLIS is omitted")
        expirable = BasicExpirable(millis)

    if config.output_format == "json":
        info = {
            "expiration_time": expirable.expiration_time(),
            "formatted": format_datetime(expirable.expiration_time()),
            "expired": expirable.is_expired(),
        }
        print(json.dumps(info, indent=2))
    else:
        style = "red" if expirable.is_expired() else "green"
        console.print(f"[{style}]{escape(expirable.expiry_text())}[/{style}]")
