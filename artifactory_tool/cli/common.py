"""
Helpers shared by the CLI commands.
"""

import json
import logging
import sys
from contextlib import contextmanager
from typing import Iterator

import click
import httpx
from pydantic import BaseModel

from ..api import ArtifactoryClient, ArtifactoryError
from ..utils import setup_logging
from ..utils.error_handling import handle_generic_error, handle_http_error


def repo_options(func):
    """Shared --repo and --path options."""
    func = click.option("--path", "path", required=True, help="Path of the file inside the repository")(func)
    func = click.option("--repo", "repo_key", required=True, help="Repository key")(func)
    return func


def echo_model(model: BaseModel) -> None:
    """Print a response model as indented JSON using the server's field names."""
    click.echo(json.dumps(model.model_dump(mode="json", by_alias=True, exclude_none=True), indent=2))


@contextmanager
def client_session(ctx: click.Context, operation: str) -> Iterator[ArtifactoryClient]:
    """
    Create a client from the group's --config, report errors and exit 1 on failure.
    """
    setup_logging(ctx.obj["debug"], use_wrapping=True)

    client = None
    try:
        client = ArtifactoryClient.create_from_config_file(path=ctx.obj["config"])
        yield client
    except httpx.HTTPError as e:
        handle_http_error(e, operation)
        sys.exit(1)
    except (ArtifactoryError, OSError, ValueError) as e:
        handle_generic_error(e, operation)
        sys.exit(1)
    finally:
        if client:
            client.close()
            logging.debug("Client session closed")


__all__ = ["repo_options", "echo_model", "client_session"]
