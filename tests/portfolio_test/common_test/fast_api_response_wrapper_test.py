from unittest import TestCase, main
from datetime import datetime, timezone
from http import HTTPStatus
from starlette.applications import Starlette
from starlette.routing import Route
from starlette.testclient import TestClient
from portfolio.common.fast_api_response_wrapper import (
    api_response,
    no_content_response,
)
from portfolio.dto.health_dto import HealthDto
from portfolio.dto.skill_dto import SkillDto


def route_success(request):
    return api_response("OK", True, {"a": 1}, HTTPStatus.OK)


def route_empty(request):
    return api_response("Empty", True)


def route_error(request):
    return api_response("Fail", False, status_code=HTTPStatus.BAD_REQUEST)


def route_dto(request):
    skill = SkillDto(
        id=1,
        name="Python",
        category="technical",
        proficiency_level="expert",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        updated_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    return api_response("DTO", data={"skill": skill}, status_code=HTTPStatus.CREATED)


def route_health(request):
    return api_response("Health", data=HealthDto(status="ok", timestamp="now"))


def route_no_content(request):
    return no_content_response()


class TestApiResponseWrapper(TestCase):
    def setUp(self):
        # Create a minimal Starlette app to test JSONResponse
        self.app = Starlette(
            routes=[
                Route("/test_success", route_success),
                Route("/test_empty", route_empty),
                Route("/test_error", route_error),
                Route("/test_dto", route_dto),
                Route("/test_health", route_health),
                Route("/test_no_content", route_no_content),
            ]
        )
        self.client = TestClient(self.app)

    def test_success_with_data(self):
        res = self.client.get("/test_success")
        self.assertEqual(res.status_code, HTTPStatus.OK)
        payload = res.json()
        self.assertEqual(payload["data"], {"a": 1})
        self.assertEqual(payload["message"], "OK")
        self.assertTrue(payload["success"])

    def test_success_with_empty_data(self):
        res = self.client.get("/test_empty")
        self.assertEqual(res.status_code, HTTPStatus.OK)
        self.assertIsNone(res.json()["data"])

    def test_error_response(self):
        res = self.client.get("/test_error")
        self.assertEqual(res.status_code, HTTPStatus.BAD_REQUEST)
        self.assertFalse(res.json()["success"])

    def test_dto_serialized_with_camel_case_aliases(self):
        res = self.client.get("/test_dto")
        self.assertEqual(res.status_code, HTTPStatus.CREATED)
        skill = res.json()["data"]["skill"]
        self.assertEqual(skill["proficiencyLevel"], "expert")
        self.assertIn("createdAt", skill)
        self.assertNotIn("created_at", skill)

    def test_top_level_dto(self):
        res = self.client.get("/test_health")
        self.assertEqual(res.json()["data"], {"status": "ok", "timestamp": "now"})

    def test_no_content(self):
        res = self.client.get("/test_no_content")
        self.assertEqual(res.status_code, HTTPStatus.NO_CONTENT)
        self.assertEqual(res.content, b"")


if __name__ == "__main__":
    main()
