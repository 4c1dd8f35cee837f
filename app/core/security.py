"""
Hash de senhas e serviço de tokens de sessão

O segredo de assinatura é resolvido a cada emissão/verificação a partir da
tabela de configurações, então trocar `jwt_secret` invalida na hora todos os
tokens emitidos antes da troca.
"""
import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.setting_model import JWT_SECRET_KEY, Setting

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

DEV_FALLBACK_SECRET = "fallback-secret-please-change-in-settings"


class InvalidToken(Exception):
    """Token com assinatura inválida, expirado ou malformado."""


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Hash corrompido ou em formato desconhecido
        return False


def resolve_jwt_secret(db: Session) -> str:
    """
    Resolve o segredo atual de assinatura

    Ordem: linha `jwt_secret` em settings, variável de ambiente JWT_SECRET
    e, por último, o segredo fixo de desenvolvimento.
    """
    row = db.query(Setting.value).filter(Setting.key == JWT_SECRET_KEY).first()
    if row is not None and row.value:
        return row.value
    if settings.JWT_SECRET:
        logger.warning("Configuração jwt_secret ausente; usando JWT_SECRET do ambiente")
        return settings.JWT_SECRET
    logger.warning("Nenhum segredo configurado; usando o segredo de desenvolvimento")
    return DEV_FALLBACK_SECRET


def create_access_token(db: Session, user_id: int, now: datetime = None) -> str:
    issued_at = now or datetime.now(timezone.utc)
    expires = issued_at + timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    claims = {
        "sub": str(user_id),
        "userId": user_id,
        "iat": issued_at,
        "exp": expires,
    }
    return jwt.encode(claims, resolve_jwt_secret(db), algorithm=settings.ALGORITHM)


def verify_access_token(db: Session, token: str) -> int:
    """Valida assinatura e expiração e retorna o id do usuário."""
    try:
        payload = jwt.decode(token, resolve_jwt_secret(db), algorithms=[settings.ALGORITHM])
    except JWTError as e:
        raise InvalidToken(str(e)) from e

    user_id = payload.get("userId")
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise InvalidToken("Token sem userId válido")
    return user_id
