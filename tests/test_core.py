"""
Tests for settings, app construction and error mapping.
"""
import logging

from fastapi.testclient import TestClient

from app.core.config import Settings, build_engine
from app.core.exceptions import ConflictError, NotFoundError, ServiceError
from conftest import register_and_login
from main import create_app


def _memory_settings(**overrides) -> Settings:
    return Settings(DATABASE_URL="sqlite://", **overrides)


class TestSettings:

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("APP_NAME", "Dopaminote Test")
        monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "5")

        app_settings = Settings()
        assert app_settings.APP_NAME == "Dopaminote Test"
        assert app_settings.ACCESS_TOKEN_EXPIRE_MINUTES == 5

    def test_sqlite_engine(self):
        engine = build_engine(_memory_settings())
        assert engine.dialect.name == "sqlite"


class TestApp:

    def test_health_and_root(self):
        client = TestClient(create_app(_memory_settings(APP_NAME="Custom")))

        assert client.get("/health").json() == {"status": "healthy"}
        assert client.get("/").json()["message"] == "Welcome to Custom"

    def test_app_uses_its_own_settings(self):
        app_settings = _memory_settings(APP_NAME="Custom")
        app = create_app(app_settings)

        assert app.state.settings is app_settings
        assert str(app.state.engine.url) == "sqlite://"

    def test_each_app_gets_its_own_database(self):
        with TestClient(create_app(_memory_settings())) as first:
            register_and_login(first, "only-here@example.com")

            with TestClient(create_app(_memory_settings())) as second:
                response = second.post(
                    "/auth/login",
                    json={"email": "only-here@example.com", "password": "dopamine123"},
                )
                assert response.status_code == 401


class TestErrorHandlers:

    def test_domain_errors_map_to_status_codes(self):
        app = create_app(_memory_settings())

        @app.get("/missing")
        def missing():
            raise NotFoundError("nothing here")

        @app.get("/clash")
        def clash():
            raise ConflictError("already there")

        client = TestClient(app)
        response = client.get("/missing")
        assert response.status_code == 404
        assert response.json() == {"detail": "nothing here"}
        assert client.get("/clash").status_code == 409

    def test_service_errors_are_500(self):
        app = create_app(_memory_settings())

        @app.get("/boom")
        def boom():
            raise ServiceError("kaboom")

        client = TestClient(app)
        response = client.get("/boom")
        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}

    def test_unexpected_errors_are_logged_with_traceback(self, caplog):
        app = create_app(_memory_settings())

        @app.get("/crash")
        def crash():
            raise TypeError("can't compare offset-naive and offset-aware datetimes")

        # Starlette re-raises after the handler responds; keep the response instead.
        client = TestClient(app, raise_server_exceptions=False)
        with caplog.at_level(logging.ERROR, logger="app.core.exceptions"):
            response = client.get("/crash")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}
        logged = [r for r in caplog.records if r.name == "app.core.exceptions"]
        assert logged and logged[0].exc_info is not None
        assert "/crash" in logged[0].getMessage()
