from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from schemas import Admin as AdminSchema, AdminCreate, AdminLogin, LoginResponse
from dependencies import get_admin_service, get_current_admin
from services import AdminService

router = APIRouter()

@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: AdminLogin,
    admin_service: AdminService = Depends(get_admin_service)
):
    response = admin_service.login(credentials.email, credentials.password)
    if response.id is None:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=response.model_dump(),
        )
    return response

@router.post("/register", response_model=AdminSchema, status_code=status.HTTP_201_CREATED)
async def register(
    admin: AdminCreate,
    admin_service: AdminService = Depends(get_admin_service)
):
    return admin_service.register(admin)

@router.get("/me", response_model=AdminSchema)
async def read_admin_me(current_admin = Depends(get_current_admin)):
    """Get the admin identified by the bearer token"""
    return current_admin

@router.get("/{admin_id}", response_model=AdminSchema)
async def get_admin(
    admin_id: int,
    admin_service: AdminService = Depends(get_admin_service)
):
    return admin_service.get(admin_id)
