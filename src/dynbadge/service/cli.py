"""CLI tool for extracting badge values.

Usage:
    dynbadge https://example.com/README.md --search "version - (.*)" --replace '$1'
    dynbadge ./CHANGELOG.md --search "## (\\d+\\.\\d+\\.\\d+)" --replace '$1' --json
"""

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import replace as dc_replace

import click

from dynbadge.badge import render_dynamic_badge
from dynbadge.extraction import PipelineError, run_detailed
from dynbadge.shared.fetch import FetchConfig, TransportError, create_fetcher

logger = logging.getLogger(__name__)


@click.command()
@click.argument("source")
@click.option("--search", "-s", required=True, help="re2 expression; only the first match is used")
@click.option("--replace", "-r", default=None, help="Replacement template, e.g. '$1'")
@click.option("--flags", "-f", default="", help="Regex flags: i, m, s, U")
@click.option("--no-match", default="", help="Value printed when nothing matches (default: empty)")
@click.option("--label", default=None, help="Badge label (with --json)")
@click.option("--timeout", type=float, default=None, help="HTTP timeout in seconds")
@click.option("--max-bytes", type=int, default=None, help="Largest accepted document size")
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output the badge JSON instead of the bare value",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(
    source: str,
    search: str,
    replace: str | None,
    flags: str,
    no_match: str,
    label: str | None,
    timeout: float | None,
    max_bytes: int | None,
    json_output: bool,
    verbose: bool,
) -> None:
    """Extract a value from SOURCE (a URL or a local file) with a regex."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else os.environ.get("LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = FetchConfig.from_env()
    if timeout is not None:
        config = dc_replace(config, timeout=timeout)
    if max_bytes is not None:
        config = dc_replace(config, max_bytes=max_bytes)

    try:
        content = create_fetcher(source, config).fetch(source)
        result = run_detailed(content, search, flags, replace, no_match)
    except PipelineError as e:
        click.echo(f"Error: {e.pretty_message}", err=True)
        sys.exit(1)
    except TransportError as e:
        click.echo(f"Error: could not read {e}", err=True)
        sys.exit(1)

    if json_output:
        badge = render_dynamic_badge(result.value, label=label)
        click.echo(json.dumps(badge.model_dump(by_alias=True), indent=2))
    else:
        click.echo(result.value)


if __name__ == "__main__":
    main()
