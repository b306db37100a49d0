"""Load the registry and restricted-username documents from disk."""

from pathlib import Path
from typing import Any

import yaml

from regcheck.config import RegistryPaths
from regcheck.exceptions import LoadError


def _read_yaml(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LoadError(f"Cannot read {path}: {e}") from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise LoadError(f"{path} is not valid YAML: {e}") from e


def load_registry(path: str | Path) -> dict[str, Any]:
    """
    Read the registry document.

    Args:
        path: Location of registry.yaml

    Returns:
        The parsed top-level mapping (an empty file yields an empty dict)

    Raises:
        LoadError: If the file is missing, unreadable or not a YAML mapping
    """
    path = Path(path)
    document = _read_yaml(path)
    if document is None:
        return {}
    if not isinstance(document, dict):
        raise LoadError(f"{path} must contain a mapping at the top level")
    return document


def load_restricted_usernames(path: str | Path) -> frozenset[str]:
    """
    Read the restricted-username blocklist.

    Raises:
        LoadError: If the file is unreadable or `restricted_usernames` is not a list of strings
    """
    path = Path(path)
    document = _read_yaml(path)
    if not isinstance(document, dict) or "restricted_usernames" not in document:
        raise LoadError(f'{path} is missing the "restricted_usernames" key')

    names = document["restricted_usernames"] or []
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        raise LoadError(f'"restricted_usernames" in {path} must be a list of strings')
    return frozenset(names)


def load_documents(paths: RegistryPaths) -> tuple[dict[str, Any], frozenset[str]]:
    """Load both input documents."""
    return load_registry(paths.registry_path), load_restricted_usernames(paths.restricted_path)
