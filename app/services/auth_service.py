"""
Cadastro e login de usuários

Os dois fluxos terminam emitindo um token de sessão assinado com o segredo
atual (ver `app.core.security`).
"""
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import InvalidCredentials, RegistrationDisabled, UserExists, ValidationError
from app.core.security import create_access_token, verify_password
from app.models import user_model
from app.models.setting_model import ALLOW_REGISTRATION_KEY
from app.services import setting_service, user_service

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def registration_allowed(db: Session) -> bool:
    setting = setting_service.get_setting(db, ALLOW_REGISTRATION_KEY)
    # Só o texto exato "false" desliga o cadastro
    return not (setting is not None and setting.value == "false")


def _auth_payload(db: Session, user: user_model.User, message: str) -> dict:
    return {
        "message": message,
        "token": create_access_token(db, user.id),
        "user": user,
    }


def register_user(
    db: Session,
    username: Optional[str],
    email: Optional[str],
    password: Optional[str]
) -> dict:
    if not username or not email or not password:
        raise ValidationError("All fields are required")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if not registration_allowed(db):
        raise RegistrationDisabled()
    if user_service.user_exists(db, username, email):
        raise UserExists()

    try:
        user = user_service.create_user(db, username, email, password)
    except IntegrityError:
        # Outro cadastro com o mesmo username/email venceu a corrida
        db.rollback()
        raise UserExists()

    logger.info(f"Usuário {user.id} cadastrado (admin={user.is_admin})")
    return _auth_payload(db, user, "User registered successfully")


def login_user(db: Session, email: Optional[str], password: Optional[str]) -> dict:
    if not email or not password:
        raise ValidationError("Email and password are required")

    user = user_service.get_user_by_email(db, email)
    if not user or not verify_password(password, user.password):
        logger.info("Tentativa de login com credenciais inválidas")
        raise InvalidCredentials()

    return _auth_payload(db, user, "Login successful")
