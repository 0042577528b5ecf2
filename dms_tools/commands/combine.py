"""Sequence combining command."""

from __future__ import annotations

import json

import click
from rich.console import Console

from dms_tools.core.config import AppConfig
from dms_tools.core.sequences import SequenceCombiner


@click.command()
@click.argument("lists", nargs=-1)
@click.pass_context
def combine(ctx: click.Context, lists: tuple[str, ...]) -> None:
    """Combine comma-separated lists into a single sequence.

    Even-numbered arguments are absorbed as lists and odd-numbered ones as
    one-shot iterators.
    """
    config: AppConfig = ctx.obj["config"]
    console: Console = ctx.obj["console"]

    combiner: SequenceCombiner[str] = SequenceCombiner()
    for index, arg in enumerate(lists):
        items = [item.strip() for item in arg.split(",") if item.strip()]
        if index % 2 == 0:
            combiner.add_list(items)
        else:
            combiner.add_iterator(iter(items))

    if config.output_format == "json":
        print(json.dumps({"size": combiner.size(), "elements": list(combiner)}, indent=2))
    else:
        # Elements are user text, never markup
        console.print(", ".join(combiner.combined_iterator()), markup=False, highlight=False)
        console.print(f"[cyan]{combiner.size()}[/cyan] elements")
