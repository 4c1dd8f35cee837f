# Dependências compartilhadas: sessão do banco, autenticação e admin
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.core import database
from app.core.config import settings
from app.core.exceptions import Forbidden, InvalidOrExpiredToken, Unauthenticated
from app.core.security import InvalidToken, verify_access_token
from app.services import user_service

logger = logging.getLogger(__name__)

# auto_error=False: a ausência do token vira Unauthenticated no formato da API
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


# Lifespan handler para startup (tabelas e configurações padrão)
@asynccontextmanager
async def lifespan(app: FastAPI):
    url = database.engine.url.render_as_string(hide_password=True)
    logger.info(f"Iniciando API (ambiente={settings.ENVIRONMENT}, banco={url})")
    try:
        database.init_db()
    except Exception as e:
        logger.error(f"Erro no startup: {e}", exc_info=True)
        raise
    yield
    database.engine.dispose()
    logger.info("API encerrada")


def get_db():
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user_id(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> int:
    if not token:
        raise Unauthenticated()
    try:
        user_id = verify_access_token(db, token)
    except InvalidToken as e:
        # O motivo real fica só no log
        logger.info(f"Token rejeitado em {request.url.path}: {e}")
        raise InvalidOrExpiredToken()
    request.state.user_id = user_id
    return user_id


def require_admin(
    request: Request,
    _: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
) -> int:
    user_id = getattr(request.state, "user_id", None)
    if user_id is None:
        raise Unauthenticated()
    user = user_service.get_user_by_id(db, user_id)
    if user is None or not user.is_admin:
        logger.info(f"Acesso admin negado para o usuário {user_id} em {request.url.path}")
        raise Forbidden()
    return user_id
