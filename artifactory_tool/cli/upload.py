"""
Upload command for Artifactory Tool CLI.
"""

from typing import Optional

import click

from ..models.artifactory_api import Checksums
from .common import client_session, echo_model, repo_options


@click.command()
@repo_options
@click.option("--file", "local_file", required=True, type=click.Path(exists=True, dir_okay=False), help="File to upload")
@click.option("--force", is_flag=True, help="Overwrite the artifact if it already exists")
@click.option("--md5", help="MD5 checksum sent to the server for verification")
@click.option("--sha1", help="SHA1 checksum sent to the server for verification (takes priority over --md5)")
@click.pass_context
def upload(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    ctx: click.Context,
    repo_key: str,
    path: str,
    local_file: str,
    force: bool,
    md5: Optional[str],
    sha1: Optional[str],
) -> None:
    """Upload a file to an Artifactory repository."""
    checksums = Checksums(md5=md5, sha1=sha1) if md5 or sha1 else None

    with client_session(ctx, "upload operation") as client:
        echo_model(client.upload_file(repo_key, path, local_file, force_upload=force, checksums=checksums))


__all__ = ["upload"]
