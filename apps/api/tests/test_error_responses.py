"""Uniform error responder tests."""

from __future__ import annotations

import os
import unittest

from fastapi.testclient import TestClient
from pydantic import ValidationError as PydanticValidationError

from app.core.config import get_settings
from app.main import create_app
from app.routes.dependencies import get_post_service


class _ExplodingPostService:
    def list_posts(self):
        raise RuntimeError("database connection dropped: mongodb://secret-host")


class ErrorResponseTests(unittest.TestCase):
    def setUp(self) -> None:
        self._old_secret = os.environ.get("BLOG_JWT_SECRET")
        os.environ["BLOG_JWT_SECRET"] = "test-signing-secret"
        get_settings.cache_clear()
        self.app = create_app()

    def tearDown(self) -> None:
        if self._old_secret is None:
            os.environ.pop("BLOG_JWT_SECRET", None)
        else:
            os.environ["BLOG_JWT_SECRET"] = self._old_secret
        get_settings.cache_clear()

    def test_unrouted_path_returns_404_error_payload(self) -> None:
        response = TestClient(self.app).get("/api/nothing-here")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["code"], "RESOURCE_NOT_FOUND")
        self.assertIn("/api/nothing-here", response.json()["message"])

    def test_unsupported_method_returns_405_error_payload(self) -> None:
        response = TestClient(self.app).patch("/api/posts")

        self.assertEqual(response.status_code, 405)
        self.assertEqual(response.json()["code"], "METHOD_NOT_ALLOWED")

    def test_malformed_json_body_returns_422_validation_error(self) -> None:
        response = TestClient(self.app).post(
            "/api/users/register",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json(), {"code": "VALIDATION_ERROR", "message": "Invalid request payload"})

    def test_wrongly_typed_field_returns_422_validation_error(self) -> None:
        response = TestClient(self.app).post("/api/users/login", json={"email": ["a@x.com"], "password": 5})

        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["code"], "VALIDATION_ERROR")

    def test_uncaught_handler_error_returns_generic_500(self) -> None:
        self.app.dependency_overrides[get_post_service] = lambda: _ExplodingPostService()
        client = TestClient(self.app, raise_server_exceptions=False)

        with self.assertLogs("app.main", level="ERROR"):
            response = client.get("/api/posts")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"code": "INTERNAL_ERROR", "message": "An unknown error occurred."})
        self.assertNotIn("secret-host", response.text)

    def test_non_hmac_signing_algorithm_is_refused_at_settings_load(self) -> None:
        old_algorithm = os.environ.get("BLOG_JWT_ALGORITHM")
        os.environ["BLOG_JWT_ALGORITHM"] = "RS256"
        get_settings.cache_clear()
        try:
            with self.assertRaises(PydanticValidationError):
                get_settings()
        finally:
            if old_algorithm is None:
                os.environ.pop("BLOG_JWT_ALGORITHM", None)
            else:
                os.environ["BLOG_JWT_ALGORITHM"] = old_algorithm

    def test_missing_signing_secret_fails_settings_load(self) -> None:
        os.environ.pop("BLOG_JWT_SECRET", None)
        get_settings.cache_clear()

        with self.assertRaises(Exception):
            get_settings()


if __name__ == "__main__":
    unittest.main()
