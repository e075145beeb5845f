import logging
from typing import Optional

from exceptions import NotFoundError, ValidationError
from models import Admin
from repositories import AdminStore
from schemas import AdminCreate, LoginResponse
from security import create_access_token, decode_token, get_password_hash, verify_password

logger = logging.getLogger(__name__)

LOGIN_SUCCESS = "Login successful"
INVALID_CREDENTIALS = "Invalid credentials"


class AdminService:
    def __init__(self, store: AdminStore):
        self.store = store

    def login(self, email: str, password: str) -> LoginResponse:
        """Check credentials against the stored hashes.

        A failed login is not an error: the response carries no identity and
        the message "Invalid credentials", and the caller decides the status
        code from the missing id.
        """
        for admin in self.store.find_by_email(email):
            if verify_password(password, admin.password):
                logger.info(f"Admin {admin.id} logged in")
                return LoginResponse(
                    id=admin.id,
                    name=admin.name,
                    email=admin.email,
                    message=LOGIN_SUCCESS,
                    access_token=create_access_token(data={"sub": str(admin.id)}),
                    token_type="bearer",
                )

        logger.warning(f"Failed login attempt for {email}")
        return LoginResponse(message=INVALID_CREDENTIALS)

    def register(self, payload: AdminCreate) -> Admin:
        missing = [
            field for field in ("name", "email", "password")
            if not (getattr(payload, field, None) or "").strip()
        ]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        admin = Admin(
            name=payload.name,
            email=payload.email,
            password=get_password_hash(payload.password),
        )
        admin = self.store.save(admin)
        logger.info(f"Admin {admin.id} registered")
        return admin

    def get(self, admin_id: int) -> Admin:
        admin = self.store.find_by_id(admin_id)
        if admin is None:
            raise NotFoundError(f"Admin {admin_id} not found")
        return admin

    def current_admin(self, token: str) -> Optional[Admin]:
        token_data = decode_token(token)
        if token_data is None:
            return None
        return self.store.find_by_id(token_data.admin_id)
