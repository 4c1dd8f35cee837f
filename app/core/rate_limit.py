"""
Rate limiting dos endpoints de autenticação
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from fastapi import Request
from app.core.config import settings


def get_rate_limit_key(request: Request) -> str:
    """Gera chave para rate limiting baseada no usuário autenticado ou no IP"""
    user_id = getattr(request.state, "user_id", None)
    if user_id:
        return f"user:{user_id}"
    return get_remote_address(request)


# Desligado por padrão; RATE_LIMIT_ENABLED=true liga para login e cadastro
limiter = Limiter(
    key_func=get_rate_limit_key,
    enabled=settings.RATE_LIMIT_ENABLED,
)

auth_rate_limit = limiter.limit(settings.AUTH_RATE_LIMIT)
