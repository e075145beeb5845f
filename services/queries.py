from typing import Dict, List

from exceptions import NotFoundError, ValidationError
from models import Event, EventStatus
from repositories import EventStore


class EventQueryService:
    """Read-only views over the event store.

    Nothing is cached; each call reflects the store as it is now. Both
    feeds are ordered by date, then time, ascending.
    """

    def __init__(self, store: EventStore):
        self.store = store

    def get(self, event_id: int) -> Event:
        event = self.store.find_by_id(event_id)
        if event is None:
            raise NotFoundError(f"Event {event_id} not found")
        return event

    def list_all(self) -> List[Event]:
        return self.store.find_all()

    def list_approved(self) -> List[Event]:
        """Public feed."""
        return self.store.find_by_status_ordered(EventStatus.APPROVED)

    def list_recent(self) -> List[Event]:
        """Pending and approved events, for the moderation views."""
        return self.store.find_excluding_status(EventStatus.REJECTED)

    def search(self, keyword: str = "") -> List[Event]:
        """Case-insensitive match on title or location, rejected events excluded.

        An empty keyword matches every non-rejected event.
        """
        return self.store.search_title_or_location(keyword or "", EventStatus.REJECTED)

    def count_by_status(self, status: EventStatus) -> int:
        try:
            status = EventStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown event status: {status}")
        return self.store.count_by_status(status)

    def total(self) -> int:
        return self.store.count_all()

    def counts(self) -> Dict[str, int]:
        return {
            "approved": self.count_by_status(EventStatus.APPROVED),
            "pending": self.count_by_status(EventStatus.PENDING),
            "rejected": self.count_by_status(EventStatus.REJECTED),
            "total": self.total(),
        }
