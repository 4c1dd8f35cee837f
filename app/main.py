import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.controllers import (
    auth_controller,
    health_controller,
    setting_controller,
    task_controller,
    user_controller,
)
from app.core.config import settings
from app.core.dependencies import lifespan
from app.core.exceptions import NotFound, register_exception_handlers
from app.core.logging_config import setup_logging
from app.core.rate_limit import limiter

logger = logging.getLogger(__name__)


def mount_frontend(app: FastAPI, static_dir: str) -> None:
    """Serve o build do frontend; rotas fora da API caem no index.html (SPA)."""
    root = os.path.realpath(static_dir)
    index_file = os.path.join(root, "index.html")

    @app.get("/{full_path:path}", include_in_schema=False)
    def serve_frontend(full_path: str):
        if full_path.startswith("api/"):
            raise NotFound("Not found")
        candidate = os.path.realpath(os.path.join(root, full_path))
        # Nada fora do diretório estático
        if candidate.startswith(root + os.sep) and os.path.isfile(candidate):
            return FileResponse(candidate)
        if not os.path.isfile(index_file):
            raise NotFound("Not found")
        return FileResponse(index_file)

    logger.info(f"Servindo frontend de {root}")


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    # Cria a aplicação FastAPI com lifespan
    application = FastAPI(title="Task Manager API", lifespan=lifespan)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)
    application.state.limiter = limiter
    application.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # --- Endpoints ---
    application.include_router(health_controller.router)
    application.include_router(auth_controller.router)
    application.include_router(task_controller.router)
    application.include_router(setting_controller.router)
    application.include_router(user_controller.router)

    if settings.ENVIRONMENT == "production" and os.path.isdir(settings.STATIC_DIR):
        mount_frontend(application, settings.STATIC_DIR)

    return application


app = create_app()
