"""
Delete command for Artifactory Tool CLI.
"""

import click

from .common import client_session, repo_options


@click.command()
@repo_options
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete(ctx: click.Context, repo_key: str, path: str, yes: bool) -> None:
    """Delete an artifact from a repository."""
    if not yes:
        click.confirm(f"Delete {repo_key}{path}?", abort=True)

    with client_session(ctx, "delete operation") as client:
        result = client.delete_file(repo_key, path)
        if result.details:
            click.echo(result.details)
        click.echo(f"Deleted {repo_key}{path}")


__all__ = ["delete"]
