from typing import List, Optional

from sqlalchemy import String, func, or_
from sqlalchemy.orm import Session

from models import Admin, Event, EventStatus


class EventStore:
    """Access to the ``events`` table through a request-scoped session.

    Every mutating call commits on its own; no operation spans more than
    one row.
    """

    def __init__(self, db: Session):
        self.db = db

    def save(self, event: Event) -> Event:
        self.db.add(event)
        self.db.commit()
        self.db.refresh(event)
        return event

    def find_by_id(self, event_id: int) -> Optional[Event]:
        return self.db.get(Event, event_id)

    def find_all(self) -> List[Event]:
        return self.db.query(Event).all()

    def delete_by_id(self, event_id: int) -> None:
        event = self.find_by_id(event_id)
        if event is None:
            return
        self.db.delete(event)
        self.db.commit()

    def find_by_status(self, status: EventStatus) -> List[Event]:
        return self.db.query(Event).filter(Event.status == status).all()

    def find_by_status_ordered(self, status: EventStatus) -> List[Event]:
        return (
            self.db.query(Event)
            .filter(Event.status == status)
            .order_by(Event.date.asc(), Event.time.asc(), Event.id.asc())
            .all()
        )

    def find_excluding_status(self, status: EventStatus) -> List[Event]:
        return (
            self.db.query(Event)
            .filter(Event.status != status)
            .order_by(Event.date.asc(), Event.time.asc(), Event.id.asc())
            .all()
        )

    def search_title_or_location(self, keyword: str, excluded_status: EventStatus) -> List[Event]:
        needle = keyword.lower()
        return (
            self.db.query(Event)
            .filter(Event.status != excluded_status)
            .filter(
                or_(
                    func.lower(Event.title, type_=String).contains(needle, autoescape=True),
                    func.lower(Event.location, type_=String).contains(needle, autoescape=True),
                )
            )
            .all()
        )

    def count_by_status(self, status: EventStatus) -> int:
        return self.db.query(Event).filter(Event.status == status).count()

    def count_all(self) -> int:
        return self.db.query(Event).count()


class AdminStore:
    def __init__(self, db: Session):
        self.db = db

    def save(self, admin: Admin) -> Admin:
        self.db.add(admin)
        self.db.commit()
        self.db.refresh(admin)
        return admin

    def find_by_id(self, admin_id: int) -> Optional[Admin]:
        return self.db.get(Admin, admin_id)

    def find_by_email(self, email: str) -> List[Admin]:
        return self.db.query(Admin).filter(Admin.email == email).order_by(Admin.id.asc()).all()
