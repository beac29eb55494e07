"""Command line entry point: ``rd-utils``."""

import click

from rd_utils.cli.common import (
    apply_log_overrides,
    emit_json,
    exit_with_message,
    resolve_log_level,
)
from rd_utils.cli.handlers import (
    handle_cash,
    handle_custom,
    handle_format,
    handle_validate,
)
from rd_utils.constants import FRACTION_DIGITS, NAMED_TEMPLATES
from rd_utils.core.logging import log_operation, setup_logging
from rd_utils.result import Result, error_message

# Exit codes
EXIT_INVALID = 1
EXIT_FORMAT_ERROR = 2


def _finish(ctx: click.Context, result: Result) -> None:
    if ctx.obj["json"]:
        emit_json(result)
        if not result["ok"]:
            ctx.exit(EXIT_FORMAT_ERROR)
        return
    if not result["ok"]:
        exit_with_message(f"Error: {error_message(result)}", code=EXIT_FORMAT_ERROR)
    click.echo(result["value"])


@click.group()
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    default=False,
    help="Output results as JSON ({ok, value, error}).",
)
@click.option(
    "--quiet",
    is_flag=True,
    default=None,
    help="Only log errors (also honored when RDU_LOG=quiet).",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=None,
    help="Log debug details (also honored when RDU_LOG=verbose).",
)
@click.version_option(package_name="rd-utils")
@click.pass_context
def cli(ctx, output_json, quiet, verbose):
    """Dominican identity number validation and display formatting."""
    quiet, verbose = apply_log_overrides(quiet=quiet or None, verbose=verbose or None)
    setup_logging(resolve_log_level(quiet=quiet, verbose=verbose))
    ctx.ensure_object(dict)
    ctx.obj["json"] = output_json


@cli.command()
@click.argument("identifier")
@click.option(
    "--normalize",
    is_flag=True,
    default=False,
    help="Strip dashes and spaces before validating.",
)
@click.pass_context
def validate(ctx, identifier, normalize):
    """Check the cédula checksum of IDENTIFIER (exit code 1 if invalid)."""
    with log_operation("Validating identity number", normalize=normalize):
        result = handle_validate(identifier, normalize=normalize)

    valid = result["value"]["valid"]
    if ctx.obj["json"]:
        emit_json(result)
    else:
        click.echo("valid" if valid else "invalid")
    if not valid:
        ctx.exit(EXIT_INVALID)


@cli.group(name="format")
def format_group():
    """Format a plain value for display."""


def _named_format_command(kind: str, template: str) -> click.Command:
    @click.command(name=kind, help=f"Format VALUE as {template}")
    @click.argument("value")
    @click.pass_context
    def command(ctx, value):
        with log_operation("Formatting value", kind=kind):
            result = handle_format(kind, value)
        _finish(ctx, result)

    return command


for _kind, _template in NAMED_TEMPLATES.items():
    format_group.add_command(_named_format_command(_kind, _template))


@format_group.command()
@click.argument("value")
@click.argument("template")
@click.pass_context
def custom(ctx, value, template):
    """Format VALUE following the example TEMPLATE (e.g. 0000-0000-00-0)."""
    with log_operation("Formatting value", template=template):
        result = handle_custom(value, template)
    _finish(ctx, result)


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("amount")
@click.option(
    "--decimals",
    type=click.Choice([str(digits) for digits in FRACTION_DIGITS]),
    default=None,
    help="Fraction digits (default from RDU_DEFAULT_FRACTION_DIGITS, else 0).",
)
@click.pass_context
def cash(ctx, amount, decimals):
    """Format AMOUNT as currency, e.g. 4623 -> 4,623 (negatives allowed)."""
    digits = int(decimals) if decimals is not None else None
    with log_operation("Formatting amount", decimals=digits):
        result = handle_cash(amount, digits)
    _finish(ctx, result)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
