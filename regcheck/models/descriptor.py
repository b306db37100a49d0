"""Profile descriptor (page.json) model."""

from typing import Any

from pydantic import BaseModel, ConfigDict

REQUIRED_FIELDS = ("name", "description", "image_url", "links")


class ProfileDescriptor(BaseModel):
    """A user's self-hosted page.json document."""

    model_config = ConfigDict(extra="allow")

    name: str
    description: str
    image_url: str
    links: list[Any]
