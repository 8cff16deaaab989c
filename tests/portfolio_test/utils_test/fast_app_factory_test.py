import unittest
from http import HTTPStatus
from unittest.mock import MagicMock

from fastapi import APIRouter
from fastapi.testclient import TestClient

from portfolio.utils.fast_app_factory import FastAppFactory


class TestFastAppFactory(unittest.TestCase):
    def setUp(self):
        self.resume_controller = MagicMock(router=APIRouter())
        self.project_controller = MagicMock(router=APIRouter())
        self.contact_controller = MagicMock(router=APIRouter())

    def _factory(self, cors_allowed_origins=None):
        return FastAppFactory(
            resume_controller=self.resume_controller,
            project_controller=self.project_controller,
            contact_controller=self.contact_controller,
            cors_allowed_origins=cors_allowed_origins,
        )

    def test_health_check(self):
        client = TestClient(self._factory().create_app())

        response = client.get("/api/health")

        self.assertEqual(response.status_code, HTTPStatus.OK)
        data = response.json()["data"]
        self.assertEqual(data["status"], "ok")
        self.assertTrue(data["timestamp"].endswith("Z"))

    def test_prod_mode_disables_docs(self):
        client = TestClient(self._factory().create_app(is_prod=True))

        self.assertEqual(client.get("/docs").status_code, HTTPStatus.NOT_FOUND)
        self.assertEqual(client.get("/openapi.json").status_code, HTTPStatus.NOT_FOUND)

    def test_dev_mode_serves_openapi(self):
        client = TestClient(self._factory().create_app())

        self.assertEqual(client.get("/openapi.json").status_code, HTTPStatus.OK)

    def test_controller_routes_mounted_under_api(self):
        @self.project_controller.router.get("/portfolio-projects")
        def list_projects():
            return {"ok": True}

        client = TestClient(self._factory().create_app())

        self.assertEqual(
            client.get("/api/portfolio-projects").status_code, HTTPStatus.OK
        )
        self.assertEqual(client.get("/portfolio-projects").status_code, HTTPStatus.NOT_FOUND)

    def test_cors_headers_for_allowed_origin(self):
        client = TestClient(
            self._factory(cors_allowed_origins=["https://me.example.com"]).create_app()
        )

        response = client.get(
            "/api/health", headers={"Origin": "https://me.example.com"}
        )

        self.assertEqual(
            response.headers.get("access-control-allow-origin"),
            "https://me.example.com",
        )

    def test_no_cors_headers_without_configuration(self):
        client = TestClient(self._factory().create_app())

        response = client.get(
            "/api/health", headers={"Origin": "https://me.example.com"}
        )

        self.assertNotIn("access-control-allow-origin", response.headers)


if __name__ == "__main__":
    unittest.main()
