"""Descriptor parsing and required-field checks."""

import json

from pydantic import ValidationError

from regcheck.exceptions import SchemaError
from regcheck.models.descriptor import REQUIRED_FIELDS, ProfileDescriptor


def parse_descriptor(body: bytes, username: str) -> ProfileDescriptor:
    """
    Parse a page.json body.

    Args:
        body: Raw response body
        username: Registry key, used in error messages

    Returns:
        ProfileDescriptor

    Raises:
        SchemaError: If the body is not a JSON object or a required field is missing or empty
    """
    try:
        data = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SchemaError(f'Invalid page.json format for user "{username}": {e}', username) from e

    if not isinstance(data, dict):
        raise SchemaError(
            f'Invalid page.json format for user "{username}": expected a JSON object.',
            username,
        )

    for field in REQUIRED_FIELDS:
        if not data.get(field):
            raise SchemaError(
                f'Invalid page.json format for user "{username}": missing "{field}".',
                username,
                field,
            )

    try:
        return ProfileDescriptor.model_validate(data)
    except ValidationError as e:
        field = str(e.errors()[0]["loc"][0]) if e.errors() else None
        raise SchemaError(
            f'Invalid page.json format for user "{username}": bad "{field}".',
            username,
            field,
        ) from e
