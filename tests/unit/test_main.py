"""
Unit tests for backend/main.py
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from unittest.mock import patch

from application.exceptions import ContractViolationError, OutcomeNotFoundError
from backend.main import create_app, _init_sentry, _configure_cors
from backend.settings import Settings


@pytest.mark.unit
class TestCreateApp:
    """Test the create_app() factory function."""

    def test_create_app_returns_fastapi_instance(self):
        """create_app() should return a FastAPI application instance."""
        settings = Settings(environment="test", _env_file=None)
        app = create_app(settings=settings)
        assert isinstance(app, FastAPI)

    def test_create_app_uses_default_settings_when_none_provided(self):
        """create_app() should use get_settings() when no settings provided."""
        with patch("backend.main.get_settings") as mock_get_settings:
            mock_get_settings.return_value = Settings(environment="test", _env_file=None)

            app = create_app(settings=None)

            mock_get_settings.assert_called_once()
            assert isinstance(app, FastAPI)

    def test_create_app_configures_app_metadata(self):
        """create_app() should configure app title and version."""
        app = create_app(settings=Settings(environment="test", _env_file=None))

        assert app.title == "Outcome Mapper API"
        assert app.version == "1.0.0"

    def test_create_app_includes_routers(self):
        """Health, courses and areas routes are registered."""
        app = create_app(settings=Settings(environment="test", _env_file=None))
        paths = set(app.openapi()["paths"])

        assert "/health" in paths
        assert "/courses/{course_id}/mappable-outcomes" in paths
        assert "/courses/{course_id}/outcome-sets/mappings" in paths
        assert "/areas/{component}/{area}/{item_id}/outcomes" in paths
        assert "/areas/{component}/{area}/{item_id}" in paths


@pytest.mark.unit
class TestInitSentry:
    """Test Sentry initialization."""

    def test_init_sentry_skipped_when_no_dsn(self):
        """Sentry should not be initialized when DSN is not set."""
        settings = Settings(sentry_dsn=None, _env_file=None)

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_not_called()

    def test_init_sentry_called_when_dsn_provided(self):
        """Sentry should be initialized when DSN is provided."""
        settings = Settings(
            sentry_dsn="https://test@sentry.io/123",
            environment="test",
            _env_file=None
        )

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_called_once_with(
                dsn="https://test@sentry.io/123",
                environment="test",
                traces_sample_rate=0.1,
                profiles_sample_rate=0.1,
            )


@pytest.mark.unit
class TestConfigureCors:
    """Test CORS configuration."""

    def test_configure_cors_adds_middleware(self):
        """_configure_cors should add CORS middleware to the app."""
        app = FastAPI()
        initial_middleware_count = len(app.user_middleware)

        _configure_cors(app, Settings(_env_file=None))

        assert len(app.user_middleware) == initial_middleware_count + 1

    def test_configured_origin_allowed(self):
        """Origins from settings receive CORS headers."""
        settings = Settings(
            environment="test",
            cors_allowed_origins="https://lms.example.edu",
            _env_file=None,
        )
        client = TestClient(create_app(settings=settings))

        response = client.get("/health", headers={"Origin": "https://lms.example.edu"})

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "https://lms.example.edu"


@pytest.mark.unit
class TestExceptionHandlers:
    """Test translation of application errors into HTTP responses."""

    def test_not_found_becomes_404(self):
        """NotFoundError subclasses are returned as 404 with a detail message."""
        app = create_app(settings=Settings(environment="test", _env_file=None))

        @app.get("/test-not-found")
        def not_found():
            raise OutcomeNotFoundError([42])

        response = TestClient(app).get("/test-not-found")

        assert response.status_code == 404
        assert response.json() == {"detail": "Outcome(s) not found: 42"}

    def test_contract_violation_propagates(self):
        """Contract violations are programming errors and are not translated."""
        app = create_app(settings=Settings(environment="test", _env_file=None))

        @app.get("/test-contract")
        def contract():
            raise ContractViolationError("bad filters")

        with pytest.raises(ContractViolationError):
            TestClient(app).get("/test-contract")


@pytest.mark.unit
class TestMultipleAppInstances:
    """Test that multiple app instances can be created."""

    def test_create_multiple_independent_apps(self):
        """Should be able to create multiple independent app instances."""
        app1 = create_app(settings=Settings(environment="test", _env_file=None))
        app2 = create_app(settings=Settings(environment="production", _env_file=None))

        assert app1 is not app2
        assert isinstance(app1, FastAPI)
        assert isinstance(app2, FastAPI)
