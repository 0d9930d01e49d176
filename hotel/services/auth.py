from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from hotel.core.errors import AuthorizationError, ForbiddenError
from hotel.core.logging_config import get_logger
from hotel.core.security import AdminCredentials, default_admin_credentials
from hotel.db import slots
from hotel.db.slots import SlotStorage
from hotel.models.enums import UserRole
from hotel.schemas.user import User

logger = get_logger()

ADMIN_USER_ID = "1"


class AuthGate:
    """Anonymous/authenticated session for the single admin identity.

    The session survives restarts through the ``currentUser`` slot.
    """

    def __init__(self, storage: SlotStorage, credentials: Optional[AdminCredentials] = None):
        self.storage = storage
        self.credentials = credentials or default_admin_credentials()
        self.current_user: Optional[User] = self._restore()

    def _restore(self) -> Optional[User]:
        saved = self.storage.load(slots.SESSION)
        if saved is None:
            return None
        try:
            user = User.model_validate(saved)
        except PydanticValidationError:
            logger.bind(log_type="admin").warning("Discarding unreadable saved session")
            self.storage.delete(slots.SESSION)
            return None
        if user.email != self.credentials.email:
            logger.bind(log_type="admin").warning(f"Discarding session for unknown admin {user.email}")
            self.storage.delete(slots.SESSION)
            return None
        return user

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def login(self, email: str, password: str) -> bool:
        if not self.credentials.matches(email, password):
            logger.bind(log_type="admin").warning("Admin login rejected")
            return False

        user = User(
            id=ADMIN_USER_ID,
            email=self.credentials.email,
            name=self.credentials.name,
            role=UserRole.ADMIN,
        )
        self.storage.save(slots.SESSION, user.to_slot())
        self.current_user = user

        logger.bind(log_type="admin").info(f"Admin logged in | {user.email}")
        return True

    def logout(self) -> None:
        self.current_user = None
        self.storage.delete(slots.SESSION)
        logger.bind(log_type="admin").info("Admin logged out")

    def register(self, email: str, password: str, name: str) -> bool:
        # No accounts are created; only the fixed admin may "register"
        if email != self.credentials.email:
            return False
        return self.login(email, password)

    def require_admin(self, caller: Optional[User]) -> User:
        if caller is None or self.current_user is None:
            raise AuthorizationError("Admin login required")
        if caller.role != UserRole.ADMIN or caller.id != self.current_user.id:
            raise ForbiddenError("Admins only")
        return caller
