"""Structural and policy validation of the registry document."""

from typing import Any

from regcheck.exceptions import PolicyError, RegistryViolations, SchemaError
from regcheck.models.registry import Registry, UserEntry


def normalize_github_username(value: Any) -> str | None:
    """
    Return the usable GitHub login from a registry value, or None.

    YAML loads numeric logins (`github_username: 12345`) as ints; those are
    accepted as their string form. Surrounding whitespace is dropped.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        value = str(value)
    if not isinstance(value, str):
        return None
    return value.strip() or None


def _check_entry(
    username: str,
    entry: Any,
    restricted: frozenset[str],
) -> SchemaError | PolicyError | None:
    if not isinstance(entry, dict):
        return SchemaError(
            f'Invalid registry format. The user "{username}" must be a mapping.',
            username,
        )

    github_username = normalize_github_username(entry.get("github_username"))
    if github_username is None:
        return SchemaError(
            f'Invalid registry format. The user "{username}" is missing the "github_username" field.',
            username,
            "github_username",
        )

    if github_username.lower() in restricted:
        return PolicyError(f'The user "{username}" has a restricted username.', username)

    return None


def validate_registry(document: dict[str, Any], restricted: frozenset[str]) -> Registry:
    """
    Check the registry's shape and every entry against the blocklist.

    All entries are checked before anything is reported, so one run surfaces
    every structural problem at once.

    Args:
        document: Parsed registry.yaml
        restricted: Blocklisted GitHub usernames

    Returns:
        Validated Registry preserving declaration order

    Raises:
        SchemaError: If the `users` key is missing or empty
        RegistryViolations: If any entry is invalid
    """
    users = document.get("users") if isinstance(document, dict) else None
    if users is None:
        raise SchemaError('Invalid registry format. The "users" key is missing.')
    if not isinstance(users, dict):
        raise SchemaError('Invalid registry format. The "users" key must be a mapping.')
    if not users:
        raise SchemaError('Invalid registry format. The "users" mapping is empty.')

    blocked = frozenset(name.lower() for name in restricted)
    errors: list[SchemaError | PolicyError] = []
    owners: dict[str, str] = {}
    entries: dict[str, UserEntry] = {}

    for username, entry in users.items():
        username = str(username)
        error = _check_entry(username, entry, blocked)
        if error is not None:
            errors.append(error)
            continue

        github_username = normalize_github_username(entry["github_username"])
        key = github_username.lower()
        if key in owners:
            errors.append(PolicyError(
                f'The user "{username}" uses the same github_username as "{owners[key]}".',
                username,
            ))
            continue
        owners[key] = username
        entries[username] = UserEntry.model_validate({**entry, "github_username": github_username})

    if errors:
        raise RegistryViolations(errors)

    return Registry(users=entries)
