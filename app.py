#!/usr/bin/env python3

import click
import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from wphelpers.config import get_settings
from wphelpers.errors import WpHelpersError, get_error_human_message
from wphelpers.file import RandomFilename
from wphelpers.notifier import Notice, Notifier, Severity
from wphelpers.result import result_from_dict
from wphelpers.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx) -> None:
    """WpHelpers - results, notices and file names"""
    load_dotenv()
    setup_logging()
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("document", type=click.File("r"))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "markdown"]),
    default="text",
    show_default=True,
    help="Rendering to print",
)
def render(document, output_format) -> None:
    """Render a result document (JSON or YAML, '-' for stdin)"""
    try:
        data = yaml.safe_load(document)
        result = result_from_dict(data)
    except (WpHelpersError, yaml.YAMLError) as e:
        logger.debug("Could not read result document", error=str(e))
        raise click.ClickException(get_error_human_message(e)) from e

    if output_format == "markdown":
        click.echo(result.to_markdown())
    else:
        click.echo(result.to_text())


@cli.command()
@click.argument("extension")
def filename(extension) -> None:
    """Print a random file name with the given extension"""
    try:
        click.echo(str(RandomFilename(extension)))
    except WpHelpersError as e:
        raise click.ClickException(get_error_human_message(e)) from e


@cli.command("notice-url")
@click.argument("url")
@click.argument("text")
@click.option(
    "--type",
    "severity",
    type=click.Choice([s.value for s in Severity]),
    default=Severity.INFO.value,
    show_default=True,
    help="Severity of the notice",
)
def notice_url(url, text, severity) -> None:
    """Print URL with a notice attached to its query string"""
    try:
        notifier = Notifier(get_settings().notifier.prefix)
        click.echo(notifier.redirect_url(url, Notice(severity, text)))
    except (WpHelpersError, ValidationError) as e:
        raise click.ClickException(get_error_human_message(e)) from e


if __name__ == "__main__":
    cli()
