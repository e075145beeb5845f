from fastapi import APIRouter, Depends, status
from typing import List
import logging

from schemas import Event as EventSchema, EventCounts, EventCreate, EventUpdate, Message
from dependencies import get_event_service, get_query_service, require_moderator
from services import EventLifecycleService, EventQueryService

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=List[EventSchema])
async def get_events(queries: EventQueryService = Depends(get_query_service)):
    """Get every event, whatever its status"""
    return queries.list_all()

@router.get("/approved", response_model=List[EventSchema])
async def get_approved_events(queries: EventQueryService = Depends(get_query_service)):
    """Approved events sorted by date and time (public feed)"""
    return queries.list_approved()

@router.get("/recent", response_model=List[EventSchema])
async def get_recent_events(queries: EventQueryService = Depends(get_query_service)):
    """Pending and approved events sorted by date and time"""
    return queries.list_recent()

@router.get("/search", response_model=List[EventSchema])
async def search_events(
    keyword: str = "",
    queries: EventQueryService = Depends(get_query_service)
):
    """
    Search non-rejected events
    - keyword: case-insensitive text matched against title or location
    """
    return queries.search(keyword)

@router.get("/count", response_model=EventCounts)
async def get_event_counts(queries: EventQueryService = Depends(get_query_service)):
    return queries.counts()

@router.get("/{event_id}", response_model=EventSchema)
async def get_event(
    event_id: int,
    queries: EventQueryService = Depends(get_query_service)
):
    return queries.get(event_id)

@router.post("", response_model=EventSchema, status_code=status.HTTP_201_CREATED)
async def create_event(
    event: EventCreate,
    events: EventLifecycleService = Depends(get_event_service)
):
    """Submit a new event; it always starts as PENDING"""
    if event.status is not None:
        logger.info(f"Ignoring submitted status {event.status!r} on create")
    return events.create(event)

@router.put("/{event_id}", response_model=EventSchema)
async def update_event(
    event_id: int,
    event: EventUpdate,
    events: EventLifecycleService = Depends(get_event_service),
    moderator = Depends(require_moderator)
):
    """Replace every editable field of an event, status included"""
    return events.update(event_id, event)

@router.delete("/{event_id}", response_model=Message)
async def delete_event(
    event_id: int,
    events: EventLifecycleService = Depends(get_event_service),
    moderator = Depends(require_moderator)
):
    """Delete an event; deleting a missing event still succeeds"""
    events.delete(event_id)
    return {"message": "Event deleted successfully"}

@router.put("/{event_id}/approve", response_model=EventSchema)
async def approve_event(
    event_id: int,
    events: EventLifecycleService = Depends(get_event_service),
    moderator = Depends(require_moderator)
):
    return events.approve(event_id)

@router.put("/{event_id}/reject", response_model=EventSchema)
async def reject_event(
    event_id: int,
    events: EventLifecycleService = Depends(get_event_service),
    moderator = Depends(require_moderator)
):
    return events.reject(event_id)
