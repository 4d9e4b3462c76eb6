"""CLI entry point: parse a saved API reference page and print the result."""

from __future__ import annotations

import logging
import sys

import click

from lol_api_doc.config import AppConfig, load_config
from lol_api_doc.domain.exceptions import ApiDocError
from lol_api_doc.infrastructure.html.loader import load_html_file
from lol_api_doc.infrastructure.overrides.default_patches import default_registry
from lol_api_doc.infrastructure.overrides.registry import OverrideRegistry
from lol_api_doc.infrastructure.overrides.yaml_loader import load_registry
from lol_api_doc.infrastructure.riot.document_parser import RiotDocumentParser
from lol_api_doc.presentation.formatter import MarkdownFormatter
from lol_api_doc.presentation.serializer import document_to_json


@click.command()
@click.option("--config", "-c", default=None, help="Path to YAML config file")
@click.option(
    "--html",
    "html_path",
    default=None,
    help="Path to the saved API reference page (overrides config/env)",
)
@click.option(
    "--registry",
    "registry_path",
    default=None,
    help="Path to a YAML override registry; the built-in table is used otherwise",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["markdown", "json"]),
    default=None,
    help="Output format (overrides config/env)",
)
@click.option(
    "--audit",
    is_flag=True,
    default=None,
    help="Report page content the parser did not consume",
)
@click.option("--verbose", "-v", is_flag=True, default=None, help="Enable debug logging")
def cli(
    config: str | None,
    html_path: str | None,
    registry_path: str | None,
    output_format: str | None,
    audit: bool | None,
    verbose: bool | None,
) -> None:
    """Parse the League of Legends API reference page into a typed API description.

    Configuration priority: YAML config < env vars (LOL_API_DOC_*) < CLI arguments.
    """
    app_config = load_config(
        config_path=config,
        cli_overrides={
            "document.html_path": html_path,
            "registry.path": registry_path,
            "output.format": output_format,
            "output.audit": audit,
            "logging.verbose": verbose,
        },
    )

    log_level = logging.DEBUG if app_config.logging.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not app_config.document.html_path:
        click.echo(
            "Error: document.html_path is required. "
            "Set via --html, LOL_API_DOC_HTML_PATH, or config file.",
            err=True,
        )
        sys.exit(1)

    try:
        output = run(app_config)
    except ApiDocError as e:
        click.echo(MarkdownFormatter().format_error(e), err=True)
        sys.exit(1)

    click.echo(output)


def run(app_config: AppConfig) -> str:
    """Parse the configured page and render it in the configured format."""
    registry = _load_registry(app_config)
    soup = load_html_file(app_config.document.html_path, app_config.document.encoding)

    parser = RiotDocumentParser(registry)
    doc = parser.parse(soup)

    formatter = MarkdownFormatter()
    if app_config.output.format == "json":
        output = document_to_json(doc)
    else:
        output = formatter.format_document(doc)

    if app_config.output.audit:
        click.echo(formatter.format_audit(parser.unconsumed()), err=True)

    return output


def _load_registry(app_config: AppConfig) -> OverrideRegistry:
    if app_config.registry.path:
        return load_registry(app_config.registry.path)
    return default_registry()


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
