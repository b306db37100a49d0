"""Registry data models."""

from pydantic import BaseModel, ConfigDict, field_validator


class UserEntry(BaseModel):
    """A single registered user. Unknown keys are kept as-is."""

    model_config = ConfigDict(extra="allow")

    github_username: str

    @field_validator("github_username", mode="before")
    @classmethod
    def login_as_text(cls, value):
        # numeric logins arrive from YAML as ints
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if isinstance(value, str):
            value = value.strip()
        return value


class Registry(BaseModel):
    """Validated registry: username -> entry, in declared order."""

    users: dict[str, UserEntry]
