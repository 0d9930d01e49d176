from functools import lru_cache

from passlib.context import CryptContext
from pydantic import BaseModel

from hotel.core.config import ADMIN_EMAIL, ADMIN_PASSWORD, ADMIN_NAME

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


# ---------- PASSWORD ENCRYPTION ----------
def hash_password(password: str):
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str):
    return pwd_context.verify(password, hashed)


# ---------- FIXED ADMIN CREDENTIAL ----------
class AdminCredentials(BaseModel):
    """The one admin identity the back-office accepts."""

    email: str
    name: str
    password_hash: str

    def matches(self, email: str, password: str) -> bool:
        # Exact email comparison, no case folding
        if email != self.email:
            return False
        return verify_password(password, self.password_hash)


def build_admin_credentials(email: str, password: str, name: str) -> AdminCredentials:
    return AdminCredentials(email=email, name=name, password_hash=hash_password(password))


@lru_cache
def default_admin_credentials() -> AdminCredentials:
    return build_admin_credentials(ADMIN_EMAIL, ADMIN_PASSWORD, ADMIN_NAME)
