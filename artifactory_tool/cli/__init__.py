"""
Unified CLI entry point for Artifactory Tool operations using Click.

This module provides the main CLI group and shared options.
"""

import sys
from typing import Optional

import click

from . import build, delete, download, info, upload
from .._version import __version__

# ============================================================================
# CLI Group
# ============================================================================


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="artifactory-tool")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to the client config file (default: ~/.config/artifactory/client.toml)",
)
@click.option(
    "-d",
    "--debug",
    count=True,
    help="Increase verbosity (use -d for INFO, -dd for DEBUG, -ddd for DEBUG with HTTP logs)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], debug: int) -> None:
    """Artifactory Tool - Upload, download and manage artifacts in Artifactory."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["debug"] = debug


# Register subcommands
cli.add_command(info.info)
cli.add_command(info.exists)
cli.add_command(upload.upload)
cli.add_command(download.download)
cli.add_command(delete.delete)
cli.add_command(build.publish_build)


# ============================================================================
# Main Entry Point
# ============================================================================


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()  # pylint: disable=no-value-for-parameter  # Click handles parameters
    except KeyboardInterrupt:
        click.echo("\n\nOperation cancelled by user", err=True)
        sys.exit(130)


__all__ = ["cli", "main"]
