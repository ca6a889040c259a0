"""CLI entry point for md2html."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

log = logging.getLogger(__name__)


def _load_config_or_fail(config_path: str | None) -> dict:
    from md2html.config import ConfigError, load_config

    try:
        return load_config(Path(config_path) if config_path else None)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc


def _setup_logging(config: dict, verbose: bool) -> None:
    level = "DEBUG" if verbose else config["logging"]["level"].upper()
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@click.group()
def cli() -> None:
    """md2html: convert lightweight markdown to HTML."""


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_file", type=click.Path(dir_okay=False))
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a YAML config file (default: ./.md2html.yaml if present).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def convert(input_file: str, output_file: str, config_path: str | None, verbose: bool) -> None:
    """Convert INPUT_FILE to HTML and write it to OUTPUT_FILE."""
    from md2html.paragraphs import convert_document

    config = _load_config_or_fail(config_path)
    _setup_logging(config, verbose)

    click.echo("Conversion started...")
    try:
        text = Path(input_file).read_text(encoding=config["encoding"]["input"])
        log.info("Read %s (%d chars)", input_file, len(text))

        html = convert_document(text, separator=config["output"]["separator"])
        if html and config["output"]["trailing_newline"]:
            html += "\n"

        Path(output_file).write_text(html, encoding=config["encoding"]["output"])
        log.info("Wrote %s (%d chars)", output_file, len(html))
    except UnicodeDecodeError as exc:
        raise click.ClickException(f"Cannot decode {input_file}: {exc}") from exc
    except OSError as exc:
        raise click.ClickException(f"Input/output error: {exc}") from exc

    click.echo(f"Success: file {input_file} converted to HTML and saved as {output_file}.")


@cli.command()
@click.argument("text", required=False)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a YAML config file (default: ./.md2html.yaml if present).",
)
def render(text: str | None, config_path: str | None) -> None:
    """Convert TEXT (or stdin) and print the HTML."""
    from md2html.paragraphs import convert_document

    config = _load_config_or_fail(config_path)
    if text is None:
        text = sys.stdin.read()
    click.echo(convert_document(text, separator=config["output"]["separator"]))


@cli.command("check-header")
@click.argument("text")
def check_header(text: str) -> None:
    """Print the header level (0-6) detected for TEXT."""
    from md2html.header import header_level

    click.echo(str(header_level(text)))
