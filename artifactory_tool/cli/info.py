"""
Commands for inspecting artifacts: info and exists.
"""

import click

from .common import client_session, echo_model, repo_options


@click.command()
@repo_options
@click.pass_context
def info(ctx: click.Context, repo_key: str, path: str) -> None:
    """Show the metadata of an artifact as JSON."""
    with client_session(ctx, "get file info") as client:
        echo_model(client.get_file_info(repo_key, path))


@click.command()
@repo_options
@click.pass_context
def exists(ctx: click.Context, repo_key: str, path: str) -> None:
    """Print true if the artifact exists, false otherwise."""
    with client_session(ctx, "check file existence") as client:
        click.echo("true" if client.file_exists(repo_key, path) else "false")


__all__ = ["info", "exists"]
