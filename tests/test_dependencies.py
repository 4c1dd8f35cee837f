"""
Testes para dependencies (autenticação e admin)
"""
import pytest
from starlette.requests import Request

from app.core.dependencies import get_current_user_id, require_admin
from app.core.exceptions import Forbidden, InvalidOrExpiredToken, Unauthenticated
from app.core.security import create_access_token
from app.services import user_service


def make_request(path: str = "/api/tasks") -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "scheme": "http",
        "server": ("testserver", 80),
        "path": path,
        "query_string": b"",
        "headers": [],
    }
    return Request(scope)


class TestGetCurrentUserId:
    """Testes para o middleware de autenticação"""

    def test_missing_token(self, db_session):
        with pytest.raises(Unauthenticated) as exc_info:
            get_current_user_id(make_request(), token=None, db=db_session)
        assert not isinstance(exc_info.value, InvalidOrExpiredToken)
        assert exc_info.value.status_code == 401

    def test_invalid_token(self, db_session):
        with pytest.raises(InvalidOrExpiredToken) as exc_info:
            get_current_user_id(make_request(), token="garbage", db=db_session)
        assert exc_info.value.message == "Invalid or expired token"

    def test_valid_token_sets_request_state(self, db_session):
        request = make_request()
        token = create_access_token(db_session, 12)

        user_id = get_current_user_id(request, token=token, db=db_session)

        assert user_id == 12
        assert request.state.user_id == 12


class TestRequireAdmin:
    """Testes para o middleware de admin"""

    def test_without_authenticated_context(self, db_session):
        with pytest.raises(Unauthenticated):
            require_admin(make_request(), _=None, db=db_session)

    def test_admin_user(self, db_session):
        admin = user_service.create_user(db_session, "alice", "a@x.com", "secret1")
        request = make_request("/api/settings/app_name")
        request.state.user_id = admin.id

        assert require_admin(request, _=admin.id, db=db_session) == admin.id

    def test_non_admin_user(self, db_session):
        user_service.create_user(db_session, "alice", "a@x.com", "secret1")
        bob = user_service.create_user(db_session, "bob", "b@x.com", "secret2")
        request = make_request("/api/settings/app_name")
        request.state.user_id = bob.id

        with pytest.raises(Forbidden) as exc_info:
            require_admin(request, _=bob.id, db=db_session)
        assert exc_info.value.status_code == 403

    def test_deleted_user(self, db_session):
        request = make_request()
        request.state.user_id = 999

        with pytest.raises(Forbidden):
            require_admin(request, _=999, db=db_session)
