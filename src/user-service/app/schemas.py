"""Request and response schemas for the user API."""

from pydantic import Field

from reqlog.models import ReqlogBaseModel


class UserCreate(ReqlogBaseModel):
    """Payload for registering a user."""

    name: str = Field(min_length=1, max_length=100, description="Display name")
    email: str | None = Field(default=None, description="Contact address")


class UserResponse(ReqlogBaseModel):
    """Stored user."""

    id: int
    name: str
    email: str | None = None
