from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class SessionStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


def parse_requested_date(value) -> date:
    """
    "2026-10-19" ou "2026-10-19T09:30:00.000Z" -> date calendaire.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        raise ValueError(f"Invalid requestedDate: {value!r}")


class SessionCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = ""
    userId: str = Field(..., min_length=1)
    userName: str = Field(..., min_length=1)
    userEmail: str = Field(..., min_length=1)
    pdfPath: str = Field(..., min_length=1, description="Nom du fichier renvoyé par /upload")
    originalFileName: str = Field(..., min_length=1)
    fileSize: Optional[int] = Field(None, ge=0)
    requestedDate: str = Field(..., min_length=1, description="Date ISO (YYYY-MM-DD)")
    requestedTime: str = Field(..., min_length=1, description="Créneau libre, ex: '14:00 - 15:00'")

    @field_validator("requestedDate")
    @classmethod
    def _check_date(cls, v: str) -> str:
        parse_requested_date(v)
        return v


class SessionRequest(BaseModel):
    id: str
    title: str
    description: str = ""
    userId: str
    userName: str
    userEmail: str
    pdfPath: str
    originalFileName: str
    fileSize: Optional[int] = None
    requestedDate: str
    requestedTime: str
    status: SessionStatus
    adminNotes: Optional[str] = None
    createdAt: str
    updatedAt: str


class StatusUpdate(BaseModel):
    status: SessionStatus
    adminNotes: Optional[str] = None


class SessionStats(BaseModel):
    total: int = 0
    pending: int = 0
    approved: int = 0
    rejected: int = 0
    upcoming: int = 0


class UserStats(BaseModel):
    total: int = 0


class StatsResponse(BaseModel):
    sessions: SessionStats
    users: UserStats
