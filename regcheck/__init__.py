"""regcheck - validate the my-links user registry."""

from regcheck.models.registry import Registry, UserEntry
from regcheck.models.descriptor import ProfileDescriptor
from regcheck.models.result import CheckReport, ImageWarning, UserCheck
from regcheck.config import CheckerConfig, RegistryPaths
from regcheck.core.orchestrator import RegistryChecker
from regcheck.core.exporter import to_json, to_dict, save_json

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "RegistryChecker",
    "CheckerConfig",
    "RegistryPaths",
    # Models
    "Registry",
    "UserEntry",
    "ProfileDescriptor",
    "CheckReport",
    "ImageWarning",
    "UserCheck",
    # Export utilities
    "to_json",
    "to_dict",
    "save_json",
    "__version__",
]
