from services.admins import AdminService
from services.events import EventLifecycleService
from services.queries import EventQueryService

__all__ = ["AdminService", "EventLifecycleService", "EventQueryService"]
