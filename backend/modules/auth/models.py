"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, EmailStr, field_validator, model_validator, computed_field

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class JWTPayload(BaseModel):
    """
    Decoded access token claims.

    Tokens are issued by AuthService.create_token.
    """

    sub: str = Field(..., description="Subject (user ID)")
    email: str = Field(..., description="User's email")
    given_name: str = Field(default="", description="First name")
    family_name: str = Field(default="", description="Last name")
    jti: Optional[str] = Field(None, description="Unique token identifier")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")
    iss: str = Field(..., description="Issuer")
    aud: str = Field(..., description="Audience")


class RegisterRequest(BaseModel):
    """Request to create an account."""

    email: EmailStr = Field(..., description="Email address (case-insensitive)")
    password: str = Field(..., min_length=6, description="At least 6 characters")
    confirm_password: str = Field(..., description="Must match password")
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    headline: Optional[str] = Field(None, max_length=255)

    @field_validator("password")
    @classmethod
    def password_fits_hash(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v

    @model_validator(mode="after")
    def passwords_match(self) -> "RegisterRequest":
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class LoginRequest(BaseModel):
    """Request to sign in."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class UserInfo(BaseModel):
    """Public account info returned alongside a token."""

    id: str
    email: str
    first_name: str
    last_name: str
    headline: Optional[str] = None
    avatar_url: Optional[str] = None

    @computed_field
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class AuthResponse(BaseModel):
    """
    Outcome of register or login.

    On failure only `success` and `message` are set.
    """

    success: bool
    message: str
    token: Optional[str] = None
    expires_at: Optional[datetime] = None
    user: Optional[UserInfo] = None
