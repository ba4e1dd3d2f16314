"""Auth Schemas — signup/login bodies and the token envelope.

Invariants:
    - email is stripped before it reaches the credential store (case preserved)
    - password is never echoed back in any response
"""

from pydantic import BaseModel, Field, field_validator

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class SignupRequest(BaseModel):
    """Body of POST /signup."""
    username: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=320, pattern=_EMAIL_PATTERN)
    password: str = Field(min_length=1, max_length=72)

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, v: str) -> str:
        # bcrypt only accepts 72 bytes of input
        if len(v.encode("utf-8")) > 72:
            raise ValueError("password longer than 72 bytes")
        return v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip()


class LoginRequest(BaseModel):
    """Body of POST /login."""
    email: str = Field(min_length=1, max_length=320)
    password: str = Field(min_length=1, max_length=72)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip()


class TokenResponse(BaseModel):
    success: bool = True
    token: str
