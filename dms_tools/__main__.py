"""Main entry point for dms-tools CLI."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click
import structlog
from rich.console import Console

from dms_tools import __version__
from dms_tools.commands.bitrate import bitrate
from dms_tools.commands.combine import combine
from dms_tools.commands.expires import expires
from dms_tools.core.config import AppConfig


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # Resolve sys.stderr per logger so redirected streams are honoured
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(level: str = "WARNING", colors: bool = False) -> None:
    """Configure structured logging, dropping events below ``level``."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=colors),
        ],
        logger_factory=_stderr_logger,
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        cache_logger_on_first_use=False,
    )


configure_logging()

logger = structlog.get_logger()


@click.group()
@click.version_option(version=__version__, prog_name="dms-tools")
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Log informational events")
@click.option("--debug", "-d", is_flag=True, help="Log debug events in color")
@click.option(
    "--output",
    "-o",
    type=click.Choice(["rich", "json", "plain"], case_sensitive=False),
    default=None,
    help="Output format, overrides the configured one",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_file: Path | None,
    verbose: bool,
    debug: bool,
    output: str | None,
) -> None:
    """Value utilities for a digital media server."""
    try:
        app_config = AppConfig.load(config_file)
    except (OSError, ValueError) as e:
        logger.error("config_load_failed", path=str(config_file), error=str(e))
        ctx.exit(1)

    if debug:
        app_config.log_level = "DEBUG"
    elif verbose:
        app_config.log_level = "INFO"
    if output:
        app_config.output_format = output.lower()

    configure_logging(app_config.log_level, colors=debug)

    rich_output = app_config.output_format == "rich"
    ctx.obj = {
        "config": app_config,
        "console": Console(
            force_terminal=rich_output,
            no_color=not rich_output,
            width=None if rich_output else 120,
        ),
        "verbose": verbose or debug,
        "debug": debug,
    }

    logger.info("cli_started", log_level=app_config.log_level, output=app_config.output_format)
    logger.debug("cli_config", config=app_config.model_dump(mode="json"))


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    config: AppConfig = ctx.obj["config"]
    info = {
        "name": "dms-tools",
        "version": __version__,
        "python_version": sys.version.split()[0],
        "platform": sys.platform,
    }

    if config.output_format == "json":
        print(json.dumps(info, indent=2))
        return

    console: Console = ctx.obj["console"]
    console.print(f"{info['name']} {info['version']}")
    if ctx.obj["verbose"]:
        console.print(f"Python {info['python_version']} on {info['platform']}")


main.add_command(bitrate)
main.add_command(combine)
main.add_command(expires)


if __name__ == "__main__":
    main()
