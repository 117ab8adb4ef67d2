from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class UserRole(str, Enum):
    user = "user"
    admin = "admin"


class UserPublic(BaseModel):
    """Utilisateur tel que renvoyé par l'API (jamais de mot de passe)."""

    id: str
    name: str
    email: str
    role: UserRole
    createdAt: str
    updatedAt: str


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)
    role: Optional[str] = None  # tout ce qui n'est pas "admin" devient "user"


class UserUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, min_length=3)
    password: Optional[str] = Field(default=None, min_length=1)
    role: Optional[UserRole] = None


class RoleUpdate(BaseModel):
    role: UserRole


class LoginIn(BaseModel):
    email: str
    password: str
