"""
Configuração global para testes

Este arquivo é carregado automaticamente pelo pytest antes de qualquer teste.
Ele configura as variáveis de ambiente necessárias para os testes.
"""
import os
import tempfile

import pytest

TEST_DB_DIR = tempfile.mkdtemp(prefix="task_manager_tests_")

# Configurações padrão para testes - definidas ANTES de qualquer import
TEST_ENV_VARS = {
    "JWT_SECRET": "test_secret_key_for_testing_only",
    "DATABASE_URL": f"sqlite:///{os.path.join(TEST_DB_DIR, 'test.db')}",
    "ALGORITHM": "HS256",
    "ACCESS_TOKEN_EXPIRE_DAYS": "7",
    "ENVIRONMENT": "testing",
    "CORS_ORIGINS": "*",
    "LOG_LEVEL": "WARNING",
    "RATE_LIMIT_ENABLED": "false",
    "AUTH_RATE_LIMIT": "5/minute",
}

# Configura variáveis de ambiente imediatamente quando o módulo é importado
# Isso garante que estejam disponíveis antes de qualquer import que use Settings
for key, value in TEST_ENV_VARS.items():
    os.environ[key] = value

from fastapi.testclient import TestClient  # noqa: E402

from app.core import database  # noqa: E402
from app.core.database import Base  # noqa: E402
from app.main import app  # noqa: E402
from app.models import setting_model, task_model, user_model  # noqa: E402,F401


@pytest.fixture(scope="function", autouse=True)
def reset_db():
    """Recria as tabelas e as configurações padrão para cada teste"""
    Base.metadata.drop_all(bind=database.engine)
    Base.metadata.create_all(bind=database.engine)
    db = database.SessionLocal()
    try:
        database.seed_default_settings(db)
    finally:
        db.close()
    yield


@pytest.fixture(scope="function")
def db_session():
    """Cria uma sessão de banco de dados para cada teste"""
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()


@pytest.fixture(scope="function")
def client():
    """Cria um cliente de teste"""
    with TestClient(app) as test_client:
        yield test_client


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def register(client, username: str, email: str, password: str = "secret1"):
    return client.post(
        "/api/auth/register",
        json={"username": username, "email": email, "password": password},
    )


@pytest.fixture(scope="function")
def admin_token(client):
    """Primeiro usuário cadastrado: vira admin"""
    response = register(client, "alice", "a@x.com", "secret1")
    assert response.status_code == 201
    assert response.json()["user"]["isAdmin"] is True
    return response.json()["token"]


@pytest.fixture(scope="function")
def user_token(client, admin_token):
    """Usuário comum, cadastrado depois do admin"""
    response = register(client, "bob", "b@x.com", "secret2")
    assert response.status_code == 201
    assert response.json()["user"]["isAdmin"] is False
    return response.json()["token"]
