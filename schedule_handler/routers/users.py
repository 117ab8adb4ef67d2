from typing import List

from fastapi import APIRouter, Depends
from starlette.status import HTTP_201_CREATED

from schedule_handler.core.deps import get_user_service
from schedule_handler.models.files import DeleteResponse
from schedule_handler.models.users import RoleUpdate, UserCreate, UserPublic, UserUpdate
from schedule_handler.services.users import UserService, without_password

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserPublic])
def list_users(users: UserService = Depends(get_user_service)):
    return [without_password(u) for u in users.list_all()]


@router.post("", response_model=UserPublic, status_code=HTTP_201_CREATED)
def create_user(payload: UserCreate, users: UserService = Depends(get_user_service)):
    return without_password(
        users.create(payload.name, payload.email, payload.password, payload.role)
    )


@router.get("/{user_id}", response_model=UserPublic)
def get_user(user_id: str, users: UserService = Depends(get_user_service)):
    return without_password(users.get(user_id))


@router.patch("/{user_id}", response_model=UserPublic)
def update_user(user_id: str, payload: UserUpdate, users: UserService = Depends(get_user_service)):
    return without_password(users.update(user_id, **payload.model_dump(exclude_unset=True)))


@router.put("/{user_id}", response_model=UserPublic)
def change_role(user_id: str, payload: RoleUpdate, users: UserService = Depends(get_user_service)):
    # PUT ne sert qu'au changement de rôle (écran admin)
    return without_password(users.change_role(user_id, payload.role.value))


@router.delete("/{user_id}", response_model=DeleteResponse)
def delete_user(user_id: str, users: UserService = Depends(get_user_service)):
    users.delete(user_id)
    return DeleteResponse()
