"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Optional
from pydantic import BaseModel, Field, computed_field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This model is populated from JWT claims and made available
    to route handlers via dependency injection.
    """

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="User's email address")
    first_name: str = Field(default="", description="Given name claim")
    last_name: str = Field(default="", description="Family name claim")
    token_id: Optional[str] = Field(None, description="Unique token identifier (jti)")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",  # Ignore extra fields from JWT
    }


class PublicProfile(BaseModel):
    """
    The subset of an identity that is safe to show to other users.

    Never carries the email address or the password hash.
    """

    id: str = Field(..., description="User ID")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    headline: Optional[str] = Field(None, description="Professional headline")
    avatar_url: Optional[str] = Field(None, description="Avatar URL")

    @computed_field
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class ActionResult(BaseModel):
    """
    Outcome of a state-changing operation whose business rules can fail.

    Services return this instead of raising, so callers can branch on
    `success` and show `message` as-is.
    """

    success: bool = Field(..., description="Whether the operation was applied")
    message: str = Field(..., description="Human-readable outcome")
    resource_id: Optional[str] = Field(
        None,
        description="ID of the created or affected record, when there is one",
    )

    @classmethod
    def ok(cls, message: str, resource_id: Optional[str] = None) -> "ActionResult":
        return cls(success=True, message=message, resource_id=resource_id)

    @classmethod
    def fail(cls, message: str) -> "ActionResult":
        return cls(success=False, message=message)
