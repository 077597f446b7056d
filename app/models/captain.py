# app/models/captain.py
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field, field_validator

from app.models.auth import FullName, validate_email_format, validate_password_length


class VehicleType(str, Enum):
    CAR = "car"
    MOTORCYCLE = "motorcycle"
    AUTO = "auto"


class Vehicle(BaseModel):
    """Vehicle block; every field is required at registration."""
    color: str = Field(..., min_length=3)
    plate: str = Field(..., min_length=3)
    capacity: int = Field(..., ge=1)
    vehicle_type: VehicleType = Field(..., alias="vehicleType")

    class Config:
        populate_by_name = True


class CaptainCreate(BaseModel):
    """Schema for registering a new captain."""
    fullname: FullName
    email: str = Field(..., min_length=5)
    password: str = Field(..., min_length=6)
    vehicle: Vehicle

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        return validate_email_format(v)

    @field_validator('password')
    @classmethod
    def validate_password(cls, v):
        return validate_password_length(v)


class Captain(BaseModel):
    """Captain as returned by the API. Never carries the password hash."""
    id: str = Field(..., alias="_id")
    fullname: FullName
    email: str
    vehicle: Vehicle
    created_at: datetime = Field(..., alias="createdAt")

    class Config:
        populate_by_name = True


class CaptainAuthResponse(BaseModel):
    """Response for captain register and login."""
    captain: Captain
    token: str


class CaptainProfileResponse(BaseModel):
    captain: Captain
