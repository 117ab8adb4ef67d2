from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from starlette.status import HTTP_201_CREATED

from schedule_handler.core.deps import get_session_service
from schedule_handler.models.files import DeleteResponse, DownloadResponse
from schedule_handler.models.sessions import SessionCreate, SessionRequest, StatusUpdate
from schedule_handler.services.sessions import SessionService

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("", response_model=List[SessionRequest])
def list_sessions(
    userId: Optional[str] = Query(default=None),
    sessions: SessionService = Depends(get_session_service),
):
    if userId:
        return sessions.list_by_user(userId)
    return sessions.list_all()


@router.post("", response_model=SessionRequest, status_code=HTTP_201_CREATED)
def create_session(body: SessionCreate, sessions: SessionService = Depends(get_session_service)):
    return sessions.create(body.model_dump())


@router.get("/{session_id}", response_model=SessionRequest)
def get_session(session_id: str, sessions: SessionService = Depends(get_session_service)):
    return sessions.get(session_id)


@router.patch("/{session_id}", response_model=SessionRequest)
def update_status(
    session_id: str,
    body: StatusUpdate,
    sessions: SessionService = Depends(get_session_service),
):
    """
    Approuve / rejette une demande. `adminNotes` absent = note conservée.
    """
    return sessions.set_status(session_id, body.status.value, body.adminNotes)


@router.delete("/{session_id}", response_model=DeleteResponse)
def delete_session(session_id: str, sessions: SessionService = Depends(get_session_service)):
    sessions.delete(session_id)
    return DeleteResponse()


@router.get("/{session_id}/download", response_model=DownloadResponse)
def download_file(session_id: str, sessions: SessionService = Depends(get_session_service)):
    return sessions.read_file(session_id)
