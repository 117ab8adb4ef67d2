from fastapi import APIRouter, Depends

from schedule_handler.core.deps import get_user_service
from schedule_handler.models.users import LoginIn, UserPublic
from schedule_handler.services.users import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("", response_model=UserPublic)
def login(payload: LoginIn, users: UserService = Depends(get_user_service)):
    # Pas de token : le client garde l'utilisateur renvoyé
    return users.authenticate(payload.email, payload.password)
