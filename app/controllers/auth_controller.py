from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from app.core.dependencies import get_db
from app.core.rate_limit import auth_rate_limit
from app.schemas import user_schema
from app.services import auth_service

router = APIRouter(
    prefix="/api/auth",
    tags=["Autenticação"],
)


@router.post(
    "/register",
    response_model=user_schema.AuthResponse,
    status_code=status.HTTP_201_CREATED
)
@auth_rate_limit
def register(
    request: Request,
    payload: user_schema.RegisterRequest,
    db: Session = Depends(get_db)
):
    return auth_service.register_user(db, payload.username, payload.email, payload.password)


@router.post("/login", response_model=user_schema.AuthResponse)
@auth_rate_limit
def login(
    request: Request,
    payload: user_schema.LoginRequest,
    db: Session = Depends(get_db)
):
    return auth_service.login_user(db, payload.email, payload.password)
