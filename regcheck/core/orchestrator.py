"""Pipeline orchestrator - load, validate, fetch, fingerprint, check images."""

from datetime import datetime

import httpx

from regcheck.config import CheckerConfig, RegistryPaths
from regcheck.core.fetcher import fetch_descriptor
from regcheck.core.fingerprint import FingerprintSet, fingerprint
from regcheck.core.http import build_async_client
from regcheck.core.images import check_image
from regcheck.core.loader import load_documents
from regcheck.core.parser import parse_descriptor
from regcheck.core.validator import validate_registry
from regcheck.logging import bind_run_context, clear_run_context, configure_logging, get_logger
from regcheck.models.registry import Registry, UserEntry
from regcheck.models.result import CheckReport, UserCheck


class RegistryChecker:
    """
    High-level registry check with a shared HTTP client.

    Example:
        async with RegistryChecker() as checker:
            report = await checker.run()
            print(len(report.users))
    """

    def __init__(
        self,
        config: CheckerConfig | None = None,
        paths: RegistryPaths | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize checker with optional configuration.

        Args:
            config: CheckerConfig instance, uses defaults if None
            paths: Input document locations, resolved from config if None
            transport: Optional httpx transport override
        """
        self.config = config or CheckerConfig()
        self.paths = paths or self.config.paths()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._log = None

    async def __aenter__(self) -> "RegistryChecker":
        """Async context manager entry - initialize resources."""
        configure_logging(self.config)
        bind_run_context(self.config, self.paths)
        self._log = get_logger("checker")
        self._client = build_async_client(self.config, transport=self._transport)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - cleanup resources."""
        if self._client:
            await self._client.aclose()
            self._client = None
        clear_run_context()

    def load(self) -> Registry:
        """
        Load both documents and validate the registry structure.

        No network access happens here.
        """
        self._log.info(
            "load_documents",
            restricted=str(self.paths.restricted_path),
        )
        document, restricted = load_documents(self.paths)
        registry = validate_registry(document, restricted)
        self._log.info("registry_valid", users_count=len(registry.users))
        return registry

    async def check_user(
        self,
        username: str,
        entry: UserEntry,
        seen: FingerprintSet,
    ) -> UserCheck:
        """
        Run the remote checks for one user.

        Args:
            username: Registry key
            entry: Validated registry entry
            seen: Fingerprints recorded so far in this run

        Returns:
            UserCheck with the descriptor fingerprint and any image warning
        """
        fetched = await fetch_descriptor(
            self._client,
            username,
            entry.github_username,
            template=self.config.descriptor_url_template,
            max_retries=self.config.max_retries,
            backoff_seconds=self.config.retry_backoff_seconds,
        )

        digest = fingerprint(fetched.body)
        seen.add(username, digest)

        descriptor = parse_descriptor(fetched.body, username)

        image_warning = None
        if self.config.check_images:
            image_warning = await check_image(self._client, username, descriptor.image_url)

        return UserCheck(
            username=username,
            github_username=entry.github_username,
            descriptor_url=fetched.url,
            fingerprint=digest,
            image_warning=image_warning,
        )

    async def run(self) -> CheckReport:
        """
        Check the whole registry, one user at a time in declared order.

        Returns:
            CheckReport for a fully valid registry

        Raises:
            RegistryCheckError: On the first load, structural, fetch, schema or duplicate failure
        """
        if self._client is None:
            raise RuntimeError("RegistryChecker must be used as an async context manager")

        start = datetime.now()
        registry = self.load()

        seen = FingerprintSet()
        users = []
        for username, entry in registry.users.items():
            users.append(await self.check_user(username, entry, seen))

        duration_ms = (datetime.now() - start).total_seconds() * 1000
        report = CheckReport(
            success=True,
            users=users,
            checked_at=datetime.now(),
            duration_ms=duration_ms,
        )
        self._log.info(
            "check_complete",
            users_count=len(users),
            image_warnings=len(report.image_warnings),
            duration_ms=duration_ms,
        )
        return report
