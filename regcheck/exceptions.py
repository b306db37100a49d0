"""Custom exception hierarchy for regcheck."""


class RegistryCheckError(Exception):
    """Base exception for all regcheck errors."""


class LoadError(RegistryCheckError):
    """Failed to read or parse an input document."""


class SchemaError(RegistryCheckError):
    """A registry entry or descriptor is missing a required field."""

    def __init__(self, message: str, username: str | None = None, field: str | None = None):
        super().__init__(message)
        self.username = username
        self.field = field


class PolicyError(RegistryCheckError):
    """A registry entry violates a registration policy."""

    def __init__(self, message: str, username: str | None = None):
        super().__init__(message)
        self.username = username


class RegistryViolations(RegistryCheckError):
    """One or more structural violations found in the registry."""

    def __init__(self, errors: list[SchemaError | PolicyError]):
        self.errors = errors
        super().__init__("\n".join(str(e) for e in errors))


class FetchError(RegistryCheckError):
    """Failed to fetch a user's descriptor."""

    def __init__(self, username: str, status_code: int | None, message: str | None = None):
        if message is None:
            message = (
                f'Failed to fetch page.json for user "{username}". '
                f"HTTP status code: {status_code}"
            )
        super().__init__(message)
        self.username = username
        self.status_code = status_code


class DuplicateContentError(RegistryCheckError):
    """Two users serve byte-identical descriptors."""

    def __init__(self, username: str, first_username: str, fingerprint: str):
        super().__init__(
            f'page.json for user "{username}" is identical to the one of "{first_username}"'
        )
        self.username = username
        self.first_username = first_username
        self.fingerprint = fingerprint
