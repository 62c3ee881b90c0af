"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Every response is wrapped in the same {status, message, data} envelope.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models import RegistrationRequest, UserRecord


class CreateUserRequest(BaseModel):
    """
    Request model for user creation.

    Fields are optional and nullable so that missing or null values
    reach the domain validator, which reports all of them together.
    """

    name: str | None = None
    email: str | None = None
    password: str | None = None
    role: str | None = None
    company: str | None = Field(
        None,
        description="Company name, or an existing company id when invitation is true",
    )
    invitation: bool | None = False

    def to_domain(self) -> RegistrationRequest:
        return RegistrationRequest(
            name=self.name or "",
            email=self.email or "",
            password=self.password or "",
            role=self.role or "",
            company=self.company or "",
            invitation=bool(self.invitation),
        )


class UserResponse(BaseModel):
    """Serialized user record."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str
    email: str
    password: str
    role: str
    company: str

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserResponse":
        return cls(
            id=record.id or "",
            name=record.name,
            email=record.email,
            password=record.password,
            role=record.role,
            company=str(record.company),
        )


class UserEnvelope(BaseModel):
    """Envelope carrying a single user under data.user."""

    status: int
    message: str
    data: dict[str, UserResponse]


class UserListEnvelope(BaseModel):
    """Envelope carrying a user list under data.users."""

    status: int
    message: str
    data: dict[str, list[UserResponse]]


class ErrorEnvelope(BaseModel):
    """Standard error envelope; data.data holds the error string when present."""

    status: int
    message: str
    data: dict[str, Any] | None = None
