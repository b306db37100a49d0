"""Check result models."""

from datetime import datetime

from pydantic import BaseModel


class ImageWarning(BaseModel):
    """An image_url that could not be confirmed reachable."""

    username: str
    image_url: str
    reason: str
    status_code: int | None = None


class UserCheck(BaseModel):
    """Outcome of the remote checks for one user."""

    username: str
    github_username: str
    descriptor_url: str
    fingerprint: str
    image_warning: ImageWarning | None = None


class CheckReport(BaseModel):
    """Wrapper for a complete, successful registry check."""

    success: bool
    users: list[UserCheck] = []
    checked_at: datetime
    duration_ms: float

    @property
    def image_warnings(self) -> list[ImageWarning]:
        return [u.image_warning for u in self.users if u.image_warning is not None]
