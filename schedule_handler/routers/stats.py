from typing import Optional

from fastapi import APIRouter, Depends, Query

from schedule_handler.core.deps import get_session_service, get_user_service
from schedule_handler.models.sessions import StatsResponse, UserStats
from schedule_handler.services.sessions import SessionService
from schedule_handler.services.users import UserService

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=StatsResponse)
def dashboard_stats(
    userId: Optional[str] = Query(default=None),
    sessions: SessionService = Depends(get_session_service),
    users: UserService = Depends(get_user_service),
):
    return StatsResponse(
        sessions=sessions.stats(userId or None),
        users=UserStats(total=users.count()),
    )
