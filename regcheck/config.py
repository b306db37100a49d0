"""Configuration management using Pydantic Settings."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_DESCRIPTOR_URL = (
    "https://raw.githubusercontent.com/{github_username}/my-links/main/page.json"
)


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


@dataclass(frozen=True)
class RegistryPaths:
    """Locations of the two input documents."""

    registry_path: Path
    restricted_path: Path


class CheckerConfig(BaseSettings):
    """Configuration for the registry checker."""

    # Execution context
    ci: bool = Field(False, validation_alias=AliasChoices("ci", "REGCHECK_CI", "CI"))
    ci_root: Path = Path(".")
    local_root: Path = Path("..")

    # Input documents
    registry_filename: str = "registry.yaml"
    restricted_filename: str = "restricted-usernames.yaml"
    registry_path: Path | None = None
    restricted_path: Path | None = None

    # HTTP settings
    descriptor_url_template: str = DEFAULT_DESCRIPTOR_URL
    http_timeout_seconds: float = 10.0
    user_agent: str = "regcheck/0.1.0"

    # Retry settings
    max_retries: int = 0
    retry_backoff_seconds: float = 0.5

    # Image reachability
    check_images: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = {
        "env_prefix": "REGCHECK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def base_dir(self) -> Path:
        """Directory the input documents are resolved against."""
        return self.ci_root if self.ci else self.local_root

    def paths(self) -> RegistryPaths:
        """Resolve the registry and restricted-list locations."""
        return RegistryPaths(
            registry_path=self.registry_path or self.base_dir / self.registry_filename,
            restricted_path=self.restricted_path or self.base_dir / self.restricted_filename,
        )

    @field_validator("ci", mode="before")
    @classmethod
    def ci_indicator(cls, value):
        # CI systems set arbitrary values (CI=true, CI=woodpecker); any non-empty one counts.
        if isinstance(value, str):
            return bool(value.strip())
        return value
