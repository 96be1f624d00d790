"""
Download command for Artifactory Tool CLI.
"""

import click

from .common import client_session, repo_options


@click.command()
@repo_options
@click.option("--dest", required=True, type=click.Path(dir_okay=False), help="Destination file path")
@click.option("--check-integrity", is_flag=True, help="Verify the MD5 of the downloaded file")
@click.pass_context
def download(ctx: click.Context, repo_key: str, path: str, dest: str, check_integrity: bool) -> None:
    """Download an artifact to a local file."""
    with client_session(ctx, "download operation") as client:
        result = client.download_file(repo_key, path, dest, check_integrity=check_integrity)
        click.echo(result.message)


__all__ = ["download"]
