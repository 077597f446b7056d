# app/models/auth.py
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from enum import Enum
import re

EMAIL_PATTERN = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$|^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.local$'
BCRYPT_MAX_BYTES = 72


class ActorRole(str, Enum):
    USER = "user"
    CAPTAIN = "captain"


def validate_email_format(v: str) -> str:
    """Custom email validation that allows .local domains"""
    if not v or '@' not in v:
        raise ValueError('Invalid email format')
    if not re.match(EMAIL_PATTERN, v):
        raise ValueError('Invalid email format')
    return v.lower()


def validate_password_length(v: str) -> str:
    if len(v.encode('utf-8')) > BCRYPT_MAX_BYTES:
        raise ValueError(f'Password must be at most {BCRYPT_MAX_BYTES} bytes')
    return v


class FullName(BaseModel):
    """Actor name; last name is optional."""
    firstname: str = Field(..., min_length=3)
    lastname: Optional[str] = Field(None, min_length=3)


class LoginRequest(BaseModel):
    """Login request model."""
    email: str
    password: str = Field(..., min_length=1)

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        return validate_email_format(v)


class TokenPayload(BaseModel):
    """Decoded JWT session token claims."""
    id: str = Field(..., alias="_id")
    email: str
    role: ActorRole
    iat: int
    exp: int
    jti: Optional[str] = None

    class Config:
        populate_by_name = True


class MessageResponse(BaseModel):
    message: str
