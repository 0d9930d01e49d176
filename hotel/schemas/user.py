from pydantic import BaseModel

from hotel.models.enums import UserRole
from hotel.schemas.common import HotelModel


class User(HotelModel):
    id: str
    email: str
    name: str
    role: UserRole = UserRole.ADMIN


class AdminLogin(BaseModel):
    # Plain str: the credential check is exact, no email normalisation
    email: str
    password: str


class AdminRegister(AdminLogin):
    name: str


class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
    role: str = UserRole.ADMIN.value
    user: User
