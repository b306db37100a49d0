"""Pydantic models for regcheck."""

from regcheck.models.registry import Registry, UserEntry
from regcheck.models.descriptor import ProfileDescriptor, REQUIRED_FIELDS
from regcheck.models.result import CheckReport, ImageWarning, UserCheck

__all__ = [
    "Registry",
    "UserEntry",
    "ProfileDescriptor",
    "REQUIRED_FIELDS",
    "CheckReport",
    "ImageWarning",
    "UserCheck",
]
