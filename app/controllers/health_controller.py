"""
Health checks da API
"""
import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from sqlalchemy import text
from app.core.dependencies import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health Check"])


@router.get("/health", status_code=status.HTTP_200_OK, summary="Health Check")
@router.get("/api/health", status_code=status.HTTP_200_OK, include_in_schema=False)
def health_check():
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    summary="Readiness Check",
    description="Verifica se a API está pronta para receber requisições"
)
def readiness_check(db: Session = Depends(get_db)):
    """
    Readiness check - verifica a conexão com o banco de dados
    """
    try:
        db.execute(text("SELECT 1"))
        return {
            "status": "ready",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }
    except Exception as e:
        logger.error(f"API não está pronta: {e}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )


@router.get(
    "/health/live",
    status_code=status.HTTP_200_OK,
    summary="Liveness Check",
    description="Verifica se a API está viva (usado por orquestradores como Kubernetes)"
)
def liveness_check():
    return {
        "status": "alive",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
