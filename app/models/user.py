# app/models/user.py
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from app.models.auth import FullName, validate_email_format, validate_password_length


class UserCreate(BaseModel):
    """Schema for registering a new rider."""
    fullname: FullName
    email: str = Field(..., min_length=5)
    password: str = Field(..., min_length=6)

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        return validate_email_format(v)

    @field_validator('password')
    @classmethod
    def validate_password(cls, v):
        return validate_password_length(v)


class User(BaseModel):
    """Rider as returned by the API. Never carries the password hash."""
    id: str = Field(..., alias="_id")
    fullname: FullName
    email: str
    created_at: datetime = Field(..., alias="createdAt")

    class Config:
        populate_by_name = True


class UserAuthResponse(BaseModel):
    """Response for rider register and login."""
    user: User
    token: str


class UserProfileResponse(BaseModel):
    user: User
