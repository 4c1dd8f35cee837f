# tests/test_main.py
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app import main
from app.main import app


def test_app_instance():
    """
    Verifica que a aplicação FastAPI foi criada corretamente.
    """
    assert isinstance(app, FastAPI)


def test_endpoints_registered():
    """
    Verifica que as rotas principais estão registradas na aplicação.
    """
    paths = set(app.openapi()["paths"])
    expected = {
        "/health",
        "/api/auth/register",
        "/api/auth/login",
        "/api/tasks",
        "/api/tasks/{task_id}",
        "/api/settings",
        "/api/settings/{key}",
        "/api/users",
        "/api/users/me",
        "/api/users/{user_id}",
    }
    for path in expected:
        assert path in paths, f"Rota {path} não registrada"


def test_legacy_health_route(client):
    # fora do schema OpenAPI, então é verificada por requisição
    assert client.get("/api/health").json() == {"status": "healthy"}


def test_frontend_not_served_outside_production(client):
    paths = {getattr(route, "path", None) for route in app.router.routes}
    assert "/{full_path:path}" not in paths
    assert client.get("/tasks/42").status_code == 404


def test_frontend_served_in_production(tmp_path):
    (tmp_path / "index.html").write_text("<html>spa</html>")
    (tmp_path / "app.js").write_text("console.log(1)")

    spa = FastAPI()
    main.mount_frontend(spa, str(tmp_path))
    client = TestClient(spa)

    assert client.get("/app.js").text == "console.log(1)"
    assert client.get("/tasks/42").text == "<html>spa</html>"
    assert client.get("/../secret").text == "<html>spa</html>"
