"""
Exceções de domínio da API e seus handlers HTTP

Services levantam estas exceções; os handlers registrados em `app.main`
convertem cada uma em uma resposta `{"error": mensagem}`.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server error"
    headers = None

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class RegistrationDisabled(ValidationError):
    message = "Registration is currently disabled"


class Unauthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentication required"
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidOrExpiredToken(Unauthenticated):
    message = "Invalid or expired token"


class InvalidCredentials(Unauthenticated):
    message = "Invalid credentials"


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Admin access required"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class Conflict(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Already exists"


class UserExists(Conflict):
    message = "User already exists"


class InternalError(AppError):
    pass


def _error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, InternalError):
        logger.error(f"Erro interno em {request.method} {request.url.path}: {exc}")
        return _error_response(exc.status_code, InternalError.message)
    return _error_response(exc.status_code, exc.message, exc.headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = ValidationError.message
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    # Nenhum detalhe do banco vai para o cliente
    logger.error(f"Erro de banco em {request.method} {request.url.path}: {exc}", exc_info=exc)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, InternalError.message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Erro inesperado em {request.method} {request.url.path}: {exc}", exc_info=exc)
    return _error_response(InternalError.status_code, InternalError.message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
