"""
Testes para os handlers de erro da API
"""
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.core.exceptions import InternalError, NotFound, register_exception_handlers


def make_client() -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    def boom():
        raise RuntimeError("detalhe interno")

    @app.get("/db")
    def db_error():
        raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))

    @app.get("/internal")
    def internal():
        raise InternalError("falha ao gravar")

    @app.get("/missing")
    def missing():
        raise NotFound("Task not found")

    # O handler genérico responde, mas o Starlette ainda relança a exceção
    return TestClient(app, raise_server_exceptions=False)


class TestExceptionHandlers:
    """Testes para a conversão de exceções em respostas JSON"""

    def test_unexpected_error_is_generic(self):
        response = make_client().get("/boom")
        assert response.status_code == 500
        assert response.json() == {"error": "Server error"}

    def test_database_error_is_generic(self):
        response = make_client().get("/db")
        assert response.status_code == 500
        assert response.json() == {"error": "Server error"}

    def test_internal_error_hides_message(self):
        response = make_client().get("/internal")
        assert response.status_code == 500
        assert response.json() == {"error": "Server error"}

    def test_domain_error_keeps_message(self):
        response = make_client().get("/missing")
        assert response.status_code == 404
        assert response.json() == {"error": "Task not found"}
