import logging
from datetime import date

from exceptions import NotFoundError, ValidationError
from models import Event, EventStatus
from repositories import EventStore
from schemas import EventCreate, EventUpdate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "date", "time", "location")
MUTABLE_FIELDS = ("title", "description", "date", "time", "location", "status")


def validate_event_fields(payload, required=REQUIRED_FIELDS):
    """Reject payloads with missing or blank required fields before they reach the store."""
    missing = []
    for field in required:
        value = getattr(payload, field, None)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(field)
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


class EventLifecycleService:
    """Create, edit and moderate events.

    Status changes are unrestricted: any of PENDING, APPROVED and REJECTED
    may move to any other, including itself.
    """

    def __init__(self, store: EventStore):
        self.store = store

    def create(self, payload: EventCreate) -> Event:
        validate_event_fields(payload)
        event = Event(
            title=payload.title,
            description=payload.description,
            date=payload.date,
            time=payload.time,
            location=payload.location,
            status=EventStatus.PENDING,
            created_at=date.today(),
        )
        event = self.store.save(event)
        logger.info(f"Event {event.id} created as {event.status.value}")
        return event

    def update(self, event_id: int, payload: EventUpdate) -> Event:
        event = self._get_or_raise(event_id)
        validate_event_fields(payload, REQUIRED_FIELDS + ("status",))

        for field in MUTABLE_FIELDS:
            setattr(event, field, getattr(payload, field))

        event = self.store.save(event)
        logger.info(f"Event {event.id} updated, status {event.status.value}")
        return event

    def approve(self, event_id: int) -> Event:
        return self._set_status(event_id, EventStatus.APPROVED)

    def reject(self, event_id: int) -> Event:
        return self._set_status(event_id, EventStatus.REJECTED)

    def delete(self, event_id: int) -> None:
        self.store.delete_by_id(event_id)
        logger.info(f"Event {event_id} deleted")

    def _set_status(self, event_id: int, status: EventStatus) -> Event:
        event = self._get_or_raise(event_id)
        previous = event.status
        event.status = status
        event = self.store.save(event)
        logger.info(f"Event {event.id} moved from {previous.value} to {status.value}")
        return event

    def _get_or_raise(self, event_id: int) -> Event:
        event = self.store.find_by_id(event_id)
        if event is None:
            raise NotFoundError(f"Event {event_id} not found")
        return event
