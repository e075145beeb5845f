from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Any, Optional
from datetime import date as Date, time as Time

from models import EventStatus


# Event schemas
class EventBase(BaseModel):
    title: str
    description: Optional[str] = None
    date: Date  # Format: YYYY-MM-DD
    time: Time  # Format: HH:MM
    location: str

    @field_validator("title", "location")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

class EventCreate(EventBase):
    # Accepted in any shape from clients that send it; always ignored
    status: Optional[Any] = None

class EventUpdate(EventBase):
    status: EventStatus

class Event(EventBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    status: EventStatus
    created_at: Date

class EventCounts(BaseModel):
    approved: int
    pending: int
    rejected: int
    total: int

class Message(BaseModel):
    message: str

# Admin schemas
class AdminBase(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr

class AdminCreate(AdminBase):
    password: str = Field(min_length=1)

class Admin(AdminBase):
    model_config = ConfigDict(from_attributes=True)

    id: int

# Authentication schemas
class AdminLogin(BaseModel):
    email: str
    password: str

class LoginResponse(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    message: str
    access_token: Optional[str] = None
    token_type: Optional[str] = None

class TokenData(BaseModel):
    admin_id: Optional[int] = None
