from typing import Optional
from pydantic import EmailStr
from app.db.models.user import UserRole
from app.schemas.base import CamelModel

class UserSummary(CamelModel):
    """Name/email projection used for lawyers and task assignees."""
    name: Optional[str] = None
    email: str

class User(UserSummary):
    id: str
    role: UserRole

class UserCreate(CamelModel):
    id: Optional[str] = None
    email: EmailStr
    password: str
    name: Optional[str] = None
    role: UserRole = UserRole.LAWYER

class UserLogin(CamelModel):
    email: str
    password: str

class Token(CamelModel):
    access_token: str
    token_type: str = "bearer"
