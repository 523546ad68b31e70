"""Command-line interface for pagesift."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO

import click
import structlog
from rich.console import Console
from rich.table import Table

from pagesift import __version__
from pagesift.config.config import Config, settings
from pagesift.exceptions import ConfigurationError, InvalidBaseURLError
from pagesift.formatter import annotate, render_json, render_text
from pagesift.observability import export_prometheus
from pagesift.observability.logging import configure_logging
from pagesift.pipeline import DocumentPipeline
from pagesift.utils.urls import is_absolute_http_url

# Diagnostics go to stderr so stdout carries only the rendered document
console = Console(stderr=True)
logger = structlog.get_logger(__name__)

INVALID_URL_EXIT_CODE = 2


def load_config(config_path: Optional[Path]) -> Config:
    """Load the given YAML file, or a private copy of the global settings."""
    if config_path is None:
        return settings.model_copy(deep=True)
    return Config.from_yaml(config_path)


def validate_base_url(base_url: str) -> str:
    if not is_absolute_http_url(base_url):
        raise InvalidBaseURLError(f"Base URL must be an absolute http or https URL: {base_url!r}")
    return base_url


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", type=click.Path(exists=True, dir_okay=False), help="Configuration file path")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (overrides the configuration file)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], log_level: Optional[str]) -> None:
    """pagesift - clean, scored text and metadata from HTML pages."""
    ctx.ensure_object(dict)
    try:
        loaded = load_config(Path(config) if config else None)
    except ConfigurationError as e:
        console.print(f"Configuration error: {e}", style="red", markup=False)
        sys.exit(1)

    if log_level:
        loaded.monitoring = loaded.monitoring.model_copy(update={"log_level": log_level.upper()})
    configure_logging(loaded.monitoring)

    ctx.obj["config"] = loaded


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--base-url", required=True, help="Absolute http(s) URL the HTML was fetched from")
@click.option("--max-chars", type=click.IntRange(min=1), default=None, help="Character budget for the content preview")
@click.option("--max-links", type=click.IntRange(min=0), default=None, help="Maximum links listed under Sources")
@click.option(
    "--format",
    "output_format",
    default="text",
    type=click.Choice(["text", "json"]),
    help="Output format",
)
@click.option("--raw-html/--no-raw-html", default=True, help="Include the original HTML in JSON output")
@click.option(
    "--metrics-file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write Prometheus metrics to this file after extracting",
)
@click.pass_context
def extract(
    ctx: click.Context,
    source: TextIO,
    base_url: str,
    max_chars: Optional[int],
    max_links: Optional[int],
    output_format: str,
    raw_html: bool,
    metrics_file: Optional[Path],
) -> None:
    """Extract a document from an HTML file (use - for stdin)."""
    config: Config = ctx.obj["config"]

    try:
        validate_base_url(base_url)
    except InvalidBaseURLError as e:
        console.print(str(e), style="red", markup=False)
        sys.exit(INVALID_URL_EXIT_CODE)

    html = source.read()
    logger.debug("Read HTML source", name=getattr(source, "name", "-"), chars=len(html))
    pipeline = DocumentPipeline(config.extraction, record_metrics=config.monitoring.metrics_enabled)
    document = pipeline.extract(html, base_url)

    display = annotate(
        document,
        max_chars if max_chars is not None else config.formatting.max_chars,
        short_content_words=config.formatting.short_content_words,
        low_score_threshold=config.formatting.low_score_threshold,
    )

    if output_format == "json":
        click.echo(render_json(display, include_raw_html=raw_html))
    else:
        click.echo(render_text(display, max_links if max_links is not None else config.formatting.max_links))

    if metrics_file is not None:
        metrics_file.write_text(export_prometheus(), encoding="utf-8")
        logger.debug("Metrics written", path=str(metrics_file))


@cli.command()
@click.pass_context
def validate_config(ctx: click.Context) -> None:
    """Show the effective configuration."""
    config: Config = ctx.obj["config"]

    table = Table(title="pagesift Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")
    for section in ("extraction", "formatting", "monitoring"):
        for key, value in getattr(config, section).model_dump().items():
            table.add_row(f"{section}.{key}", str(value))

    console.print(table)
    console.print("[green]Configuration is valid[/green]")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
