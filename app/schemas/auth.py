import re
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from app.schemas.common import CamelModel

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")

# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


class LoginForm(BaseModel):
    """Credentials accepted by both signup and login"""

    username: str = Field(..., min_length=3, max_length=32)
    password: str = Field(..., min_length=6, max_length=255)

    @field_validator("username")
    @classmethod
    def validate_username(cls, v):
        if not USERNAME_PATTERN.match(v):
            raise ValueError("Username may only contain letters, digits and underscores")
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v):
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v


class ProfileResponse(CamelModel):
    created_at: datetime
    updated_at: datetime
    total_quizzes_taken: int
    highest_score: int


class UserResponse(CamelModel):
    username: str
    profile: ProfileResponse
