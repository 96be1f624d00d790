"""
Build info publishing command for Artifactory Tool CLI.
"""

import click

from ..utils.error_handling import try_parse_json
from .common import client_session


@click.command(name="publish-build")
@click.option(
    "--build-info",
    "build_info_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a build info JSON file",
)
@click.pass_context
def publish_build(ctx: click.Context, build_info_path: str) -> None:
    """Publish build info from a JSON file."""
    with client_session(ctx, "publish build") as client:
        with open(build_info_path, "r", encoding="utf-8") as f:
            build_info = try_parse_json(f.read(), "read build info")
        client.upload_build(build_info)
        click.echo(f"Published build {build_info.get('name')} #{build_info.get('number')}")


__all__ = ["publish_build"]
