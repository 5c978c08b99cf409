"""Tests for the health check, root discovery route and the global error handler."""

import unittest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from app.core.database import get_db
from app.main import app


class TestHealth(unittest.TestCase):
    def tearDown(self) -> None:
        app.dependency_overrides.clear()

    def _client_with_db(self, db: MagicMock) -> TestClient:
        def override_get_db():
            yield db

        app.dependency_overrides[get_db] = override_get_db
        return TestClient(app)

    def test_connected(self) -> None:
        db = MagicMock()
        resp = self._client_with_db(db).get("/api/health")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["status"], "ok")
        self.assertEqual(body["database"], "connected")
        self.assertIn(body["environment"], ("dev", "prod"))
        self.assertGreaterEqual(body["uptime_seconds"], 0)
        self.assertIn("timestamp", body)
        db.execute.assert_called_once()

    def test_disconnected(self) -> None:
        db = MagicMock()
        db.execute.side_effect = Exception("Connection refused")
        resp = self._client_with_db(db).get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["database"], "disconnected")


class TestRoot(unittest.TestCase):
    def test_lists_endpoints(self) -> None:
        resp = TestClient(app).get("/")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["endpoints"]["auth"], "/api/auth")
        self.assertEqual(body["status"], "active")
        self.assertEqual(body["endpoints"]["health"], "/api/health")


class TestNotFound(unittest.TestCase):
    def test_unknown_route_lists_available_routes(self) -> None:
        resp = TestClient(app).get("/api/tour")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(
            resp.json(),
            {
                "error": "Route not found",
                "message": "The route /api/tour does not exist",
                "availableRoutes": ["/", "/api/health", "/api/auth"],
            },
        )


class TestUnhandledError(unittest.TestCase):
    """Faults outside the auth boundary still produce a generic 500 body."""

    def tearDown(self) -> None:
        app.dependency_overrides.clear()

    def test_generic_500(self) -> None:
        def broken_db():
            raise RuntimeError("pool exhausted")

        app.dependency_overrides[get_db] = broken_db
        client = TestClient(app, raise_server_exceptions=False)
        with self.assertLogs("app.main", level="ERROR"):
            resp = client.get("/api/health")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json()["message"], "Internal Server Error")
        self.assertNotIn("pool exhausted", resp.text)


if __name__ == "__main__":
    unittest.main()
