from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.dependencies import get_db, get_current_user_id, require_admin
from app.core.exceptions import NotFound
from app.schemas import user_schema
from app.services import user_service

router = APIRouter(
    prefix="/api/users",
    tags=["Usuários"],
)


@router.get("/me", response_model=user_schema.UserOut)
def read_users_me(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    user = user_service.get_user_by_id(db, user_id)
    if user is None:
        raise NotFound("User not found")
    return user

@router.get("", response_model=List[user_schema.UserOut])
def list_users(
    db: Session = Depends(get_db),
    _: int = Depends(require_admin),
):
    return user_service.list_users(db)

@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)]
)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
):
    if not user_service.delete_user(db, user_id):
        raise NotFound("User not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
