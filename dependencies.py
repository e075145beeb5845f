from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from database import get_db, settings
from models import Admin
from repositories import AdminStore, EventStore
from services import AdminService, EventLifecycleService, EventQueryService

security = HTTPBearer(auto_error=False)


def get_event_service(db: Session = Depends(get_db)) -> EventLifecycleService:
    return EventLifecycleService(EventStore(db))

def get_query_service(db: Session = Depends(get_db)) -> EventQueryService:
    return EventQueryService(EventStore(db))

def get_admin_service(db: Session = Depends(get_db)) -> AdminService:
    return AdminService(AdminStore(db))


async def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    admin_service: AdminService = Depends(get_admin_service)
) -> Admin:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid authentication credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    admin = admin_service.current_admin(credentials.credentials)
    if admin is None:
        raise credentials_exception
    return admin

async def require_moderator(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    admin_service: AdminService = Depends(get_admin_service)
) -> Optional[Admin]:
    """Guard for moderation routes; open unless MODERATION_REQUIRES_AUTH is set."""
    if not settings.MODERATION_REQUIRES_AUTH:
        return None
    return await get_current_admin(credentials, admin_service)
