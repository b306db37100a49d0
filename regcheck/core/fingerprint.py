"""Content fingerprints for duplicate descriptor detection."""

import hashlib

from regcheck.exceptions import DuplicateContentError


def fingerprint(body: bytes) -> str:
    """SHA-256 of the raw body, hex-encoded."""
    return hashlib.sha256(body).hexdigest()


class FingerprintSet:
    """
    Fingerprints seen during one run.

    Example:
        seen = FingerprintSet()
        seen.add("alice", fingerprint(body))
    """

    def __init__(self):
        self._owners: dict[str, str] = {}

    def __contains__(self, digest: str) -> bool:
        return digest in self._owners

    def __len__(self) -> int:
        return len(self._owners)

    def owner(self, digest: str) -> str | None:
        return self._owners.get(digest)

    def add(self, username: str, digest: str) -> None:
        """
        Record a fingerprint for a user.

        Raises:
            DuplicateContentError: If another user already produced this fingerprint
        """
        first = self._owners.get(digest)
        if first is not None:
            raise DuplicateContentError(username, first, digest)
        self._owners[digest] = username
