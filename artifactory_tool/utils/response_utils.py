"""
Response utilities for parsing and validating Artifactory responses.
"""

import logging
from typing import Any, Dict, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .constants import MAX_LOGGED_BODY_LENGTH

M = TypeVar("M", bound=BaseModel)


def parse_json_response(response: httpx.Response, operation: str) -> Dict[str, Any]:
    """
    Parse a JSON object from a response body.

    Raises:
        ValueError: If the body is not a JSON object
    """
    try:
        data = response.json()
    except ValueError as e:
        logging.error("Failed to parse JSON response for %s: %s", operation, e)
        logging.error("Response content: %s", response.text[:MAX_LOGGED_BODY_LENGTH])
        raise ValueError(f"Invalid JSON response from Artifactory during {operation}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object from Artifactory during {operation}, got {type(data).__name__}")
    return data


def parse_model_response(response: httpx.Response, model: Type[M], operation: str) -> M:
    """
    Parse a response body into a pydantic model.

    Raises:
        ValueError: If the body is not JSON or does not fit the model
    """
    data = parse_json_response(response, operation)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logging.error("Unexpected response shape for %s: %s", operation, e)
        raise ValueError(f"Unexpected response from Artifactory during {operation}: {e}") from e


__all__ = ["parse_json_response", "parse_model_response"]
