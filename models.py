import datetime
import enum

from sqlalchemy import Column, Integer, String, Date, Time, Text, Enum
from database import Base


class EventStatus(str, enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class Admin(Base):
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    # Lookup key for login; not unique
    email = Column(String, index=True, nullable=False)
    password = Column(String, nullable=False)  # passlib hash


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    date = Column(Date, nullable=False)
    time = Column(Time, nullable=False)
    location = Column(String, nullable=False)
    status = Column(
        Enum(EventStatus, name="event_status", native_enum=False, length=16),
        nullable=False,
        default=EventStatus.PENDING,
    )
    created_at = Column(Date, nullable=False, default=datetime.date.today)
