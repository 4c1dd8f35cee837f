import logging
import os
import secrets

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.core.config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()

# (key, valor, descrição) inseridos somente se ainda não existirem
DEFAULT_SETTINGS = [
    ("app_name", "Task Manager", "Application name"),
    ("max_tasks_per_user", "1000", "Maximum tasks per user"),
    ("session_timeout", "7", "Session timeout in days"),
    ("allow_registration", "true", "Allow new user registration"),
]


def build_engine(database_url: str) -> Engine:
    url = make_url(database_url)
    connect_args = {}
    if url.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
        if url.database and url.database != ":memory:":
            db_dir = os.path.dirname(url.database)
            if db_dir:
                os.makedirs(db_dir, exist_ok=True)

    new_engine = create_engine(database_url, connect_args=connect_args)

    if url.get_backend_name() == "sqlite":
        # SQLite só aplica ON DELETE CASCADE com foreign_keys ligado
        @event.listens_for(new_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def seed_default_settings(db: Session) -> int:
    """Insere as configurações padrão ausentes e retorna quantas foram criadas."""
    from app.models.setting_model import Setting

    defaults = list(DEFAULT_SETTINGS)
    defaults.append((
        "jwt_secret",
        settings.JWT_SECRET or secrets.token_urlsafe(48),
        "Secret used to sign session tokens",
    ))

    existing = {key for (key,) in db.query(Setting.key).all()}
    created = 0
    for key, value, description in defaults:
        if key in existing:
            continue
        db.add(Setting(key=key, value=value, description=description))
        created += 1
    db.commit()
    return created


def init_db() -> None:
    """Cria as tabelas e as configurações padrão."""
    # Garante que os modelos estejam registrados no metadata
    from app.models import setting_model, task_model, user_model  # noqa: F401

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        created = seed_default_settings(db)
        if created:
            logger.info(f"{created} configurações padrão criadas")
    finally:
        db.close()
