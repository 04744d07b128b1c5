#!/usr/bin/env python3
"""
Pytest tests for CORS configuration and the JSON error envelope
Tests that the frontend on localhost:3000 can call the API with its session cookie
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.main import app
from app.services.quiz_query import QuizQueryService


class TestCORSConfiguration:
    """Test CORS middleware configuration"""

    def setup_method(self):
        """Set up test fixtures"""
        self.client = TestClient(app)
        self.frontend_origin = "http://localhost:3000"

    def test_cors_preflight_request(self):
        """Test CORS preflight OPTIONS request"""
        response = self.client.options(
            "/api/quiz/sets",
            headers={
                "Origin": self.frontend_origin,
                "Access-Control-Request-Method": "GET",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        # Preflight requests should return 200
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == self.frontend_origin
        assert "access-control-allow-methods" in response.headers
        assert "access-control-allow-headers" in response.headers

    def test_cors_allows_credentials(self):
        """Test that credentials (the session cookie) are allowed"""
        response = self.client.get("/", headers={"Origin": self.frontend_origin})

        assert response.status_code == 200
        assert response.headers["access-control-allow-credentials"] == "true"

    def test_random_origin_not_allowed(self):
        """Test that random origins are not echoed back"""
        response = self.client.get("/", headers={"Origin": "http://evil-site.com"})

        assert response.status_code == 200
        if "access-control-allow-origin" in response.headers:
            assert response.headers["access-control-allow-origin"] != "http://evil-site.com"

    def test_error_responses_carry_cors_headers(self):
        """Test a 401 is still readable by the frontend"""
        response = self.client.get(
            "/api/quiz/sets", headers={"Origin": self.frontend_origin}
        )

        assert response.status_code == 401
        assert response.headers["access-control-allow-origin"] == self.frontend_origin


class TestErrorEnvelope:
    """Test every failure is rendered as {success: false, error, isFormError}"""

    @pytest.fixture(autouse=True)
    def setup(self, client, make_user, login_as):
        self.client = client
        login_as(make_user())

    def test_unknown_route_uses_envelope(self):
        response = self.client.get("/api/does-not-exist")

        assert response.status_code == 404
        assert response.json()["success"] is False
        assert response.json()["error"] == "Not Found"

    def test_unexpected_error_shows_detail_outside_production(self):
        client = TestClient(app, raise_server_exceptions=False)
        client.cookies = self.client.cookies

        with patch.object(
            QuizQueryService, "list_question_sets", side_effect=RuntimeError("boom")
        ):
            response = client.get("/api/quiz/sets")

        body = response.json()
        assert response.status_code == 500
        assert body["success"] is False
        assert "RuntimeError: boom" in body["error"]

    def test_unexpected_error_is_generic_in_production(self, monkeypatch):
        monkeypatch.setattr(settings, "ENVIRONMENT", "production")
        client = TestClient(app, raise_server_exceptions=False)
        client.cookies = self.client.cookies

        with patch.object(
            QuizQueryService, "list_question_sets", side_effect=RuntimeError("boom")
        ):
            response = client.get("/api/quiz/sets")

        assert response.status_code == 500
        assert response.json()["error"] == "Internal Server Error"
        assert "boom" not in response.text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
