import unittest
from unittest.mock import MagicMock

from portfolio.common.errors import NotFoundError, ValidationError
from portfolio.projects.project_mapper import ProjectMapper
from portfolio.projects.project_service import PortfolioProjectService
from portfolio.repository.portfolio_project_repository import (
    PortfolioProjectRepository,
)
from tests.portfolio_test.repository_test.base_repository_test_lib import (
    BaseRepositoryTestLib,
)


class TestPortfolioProjectService(BaseRepositoryTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.service = PortfolioProjectService(
            portfolio_project_repository=PortfolioProjectRepository(),
            project_mapper=ProjectMapper(),
            logger=MagicMock(),
        )

    async def test_create_applies_defaults(self):
        result = await self.service.create_portfolio_project(
            self.session, {"title": "Site", "description": "My site"}
        )

        self.assertEqual(result.technologies, [])
        self.assertEqual(result.display_order, 0)
        self.assertFalse(result.is_featured)
        self.assertIsNone(result.demo_url)

    async def test_technologies_survive_a_reload(self):
        created = await self.service.create_portfolio_project(
            self.session,
            {"title": "Compiler", "description": "Toy", "technologies": ["C++", "C#"]},
        )
        self.forget_loaded_entities()

        result = await self.service.get_portfolio_projects(self.session)

        self.assertEqual(result[0].id, created.id)
        self.assertEqual(result[0].technologies, ["C++", "C#"])

    async def test_technologies_whitespace_survives_a_reload(self):
        created = await self.service.create_portfolio_project(
            self.session,
            {
                "title": " Padded ",
                "description": "Line one\n",
                "technologies": [" C++", "C# ", "  "],
            },
        )
        self.forget_loaded_entities()

        result = await self.service.get_portfolio_projects(self.session)

        self.assertEqual(result[0].id, created.id)
        self.assertEqual(result[0].technologies, [" C++", "C# ", "  "])
        self.assertEqual(result[0].title, " Padded ")
        self.assertEqual(result[0].description, "Line one\n")

    async def test_update_replaces_technologies_wholesale(self):
        created = await self.service.create_portfolio_project(
            self.session,
            {"title": "App", "description": "Mobile", "technologies": ["Kotlin", "Swift"]},
        )

        result = await self.service.update_portfolio_project(
            self.session, created.id, {"technologies": ["Dart"]}
        )
        self.assertEqual(result.technologies, ["Dart"])

        result = await self.service.update_portfolio_project(
            self.session, created.id, {"technologies": []}
        )
        self.forget_loaded_entities()
        stored = await self.service.get_portfolio_projects(self.session)
        self.assertEqual(result.technologies, [])
        self.assertEqual(stored[0].technologies, [])

    async def test_update_null_technologies_rejected(self):
        created = await self.service.create_portfolio_project(
            self.session, {"title": "App", "description": "d"}
        )

        with self.assertRaises(ValidationError):
            await self.service.update_portfolio_project(
                self.session, created.id, {"technologies": None}
            )

    async def test_update_feature_flag_moves_project_first(self):
        first = await self.service.create_portfolio_project(
            self.session, {"title": "First", "description": "d", "displayOrder": 1}
        )
        await self.service.create_portfolio_project(
            self.session, {"title": "Second", "description": "d", "displayOrder": 0}
        )

        await self.service.update_portfolio_project(
            self.session, first.id, {"isFeatured": True}
        )

        result = await self.service.get_portfolio_projects(self.session)
        self.assertEqual([p.title for p in result], ["First", "Second"])

    async def test_invalid_demo_url_rejected(self):
        with self.assertRaises(ValidationError):
            await self.service.create_portfolio_project(
                self.session, {"title": "X", "description": "d", "demoUrl": "nope"}
            )

        self.assertEqual(await self.service.get_portfolio_projects(self.session), [])

    async def test_update_unknown_id_raises(self):
        with self.assertRaises(NotFoundError):
            await self.service.update_portfolio_project(
                self.session, 12, {"title": "Missing"}
            )

    async def test_delete_unknown_id_raises(self):
        with self.assertRaises(NotFoundError):
            await self.service.delete_portfolio_project(self.session, 12)

    async def test_delete_portfolio_project(self):
        created = await self.service.create_portfolio_project(
            self.session, {"title": "Old", "description": "d"}
        )

        await self.service.delete_portfolio_project(self.session, created.id)

        self.assertEqual(await self.service.get_portfolio_projects(self.session), [])


if __name__ == "__main__":
    unittest.main()
