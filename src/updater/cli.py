"""CLI interface for updater."""

import asyncio
import sys
from decimal import Decimal, InvalidOperation, localcontext

import click
from rich.console import Console
from rich.markup import escape

from updater import __version__
from updater.core.config import get_config
from updater.core.credentials import resolve_credential
from updater.core.errors import ConfigError
from updater.core.pipeline import build_steps, run_pipeline
from updater.utils.logging import configure_logging
from updater.utils.progress import stderr_console as console

stdout_console = Console()

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, "-v", "--version", message="%(version)s")
@click.option("-i", "--input", "input_path", help="Input file")
@click.option("-o", "--output", "output_path", help="Output file")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Configuration file (default: $UPDATER_CONFIG or ~/.config/updater/config.toml)",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging on stderr")
@click.pass_context
def cli(
    ctx: click.Context,
    input_path: str | None,
    output_path: str | None,
    config_path: str | None,
    verbose: bool,
):
    """updater - Read an input file, sync it with an external system, write the output."""
    configure_logging(verbose)

    if not input_path or not output_path:
        click.echo("You must specify both an input and output file")
        click.echo(ctx.get_help())
        sys.exit(1)

    try:
        config = get_config(config_path)
    except ConfigError as e:
        console.print(f"[red]✗ Invalid configuration:[/red] {escape(str(e))}")
        sys.exit(1)

    credential = resolve_credential(
        config.credentials.user_env, config.credentials.password_env
    )
    steps = build_steps(input_path, output_path, credential, config.steps)

    try:
        asyncio.run(run_pipeline(steps, color=config.indicator.color))
    except Exception as e:
        console.print(f"[red]✗ Pipeline failed:[/red] {escape(str(e))}")
        sys.exit(1)

    stdout_console.print("[green]Done![/green]")


def _parse_number(value: str) -> Decimal | None:
    try:
        number = Decimal(value)
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return number


def _format_number(number: Decimal) -> str:
    """Plain notation, no trailing fractional zeros: 1E+3 -> 1000, 1.50 -> 1.5."""
    text = format(number, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _exact_sum(values: list[Decimal]) -> Decimal:
    # enough digits to span the largest and smallest place of any input
    top = max(n.adjusted() for n in values)
    bottom = min(n.as_tuple().exponent for n in values)
    with localcontext() as ctx:
        ctx.prec = max(top - bottom + 2, ctx.prec)
        return sum(values, Decimal(0))


@click.command(
    "sum",
    context_settings={**CONTEXT_SETTINGS, "ignore_unknown_options": True},
)
@click.version_option(__version__, "-v", "--version", message="%(version)s")
@click.argument("numbers", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def sum_cli(ctx: click.Context, numbers: tuple[str, ...]):
    """Add up numbers: updater-sum <number1> <number2> ... <numberN>."""
    if not numbers:
        click.echo(ctx.get_help())
        return

    parsed = [_parse_number(n) for n in numbers]
    if any(n is None for n in parsed):
        click.echo("All arguments must be numbers")
        click.echo(ctx.get_help())
        sys.exit(1)

    values = [n for n in parsed if n is not None]
    total = _exact_sum(values)
    terms = " + ".join(_format_number(n) for n in values)
    click.echo(f"{terms} = {_format_number(total)}")


if __name__ == "__main__":
    cli()
