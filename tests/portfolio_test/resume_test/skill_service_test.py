import unittest
from unittest.mock import MagicMock

from portfolio.common.errors import NotFoundError, ValidationError
from portfolio.common.portfolio_enums import ProficiencyLevel, SkillCategory
from portfolio.repository.skill_repository import SkillRepository
from portfolio.resume.resume_mapper import ResumeMapper
from portfolio.resume.skill_service import SkillService
from tests.portfolio_test.repository_test.base_repository_test_lib import (
    BaseRepositoryTestLib,
)


class TestSkillService(BaseRepositoryTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.service = SkillService(
            skill_repository=SkillRepository(),
            resume_mapper=ResumeMapper(),
            logger=MagicMock(),
        )

    async def test_get_skills_grouped_and_sorted(self):
        for name, category in [
            ("Zebra", "technical"),
            ("Apple", "soft"),
            ("Mango", "technical"),
        ]:
            await self.service.create_skill(
                self.session, {"name": name, "category": category}
            )

        result = await self.service.get_skills(self.session)

        self.assertEqual([s.name for s in result], ["Mango", "Zebra", "Apple"])

    async def test_create_skill(self):
        result = await self.service.create_skill(
            self.session,
            {"name": "Python", "category": "technical", "proficiencyLevel": "expert"},
        )

        self.assertEqual(result.category, SkillCategory.TECHNICAL)
        self.assertEqual(result.proficiency_level, ProficiencyLevel.EXPERT)

    async def test_create_unknown_category_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            await self.service.create_skill(
                self.session, {"name": "Juggling", "category": "hobby"}
            )

        self.assertEqual(ctx.exception.errors[0]["field"], "category")
        self.assertEqual(await self.service.get_skills(self.session), [])

    async def test_create_unknown_proficiency_rejected(self):
        with self.assertRaises(ValidationError):
            await self.service.create_skill(
                self.session,
                {"name": "Go", "category": "technical", "proficiencyLevel": "guru"},
            )

    async def test_update_clears_proficiency_with_null(self):
        created = await self.service.create_skill(
            self.session,
            {"name": "Rust", "category": "technical", "proficiencyLevel": "beginner"},
        )

        result = await self.service.update_skill(
            self.session, created.id, {"proficiencyLevel": None}
        )

        self.assertIsNone(result.proficiency_level)
        self.assertEqual(result.name, "Rust")

    async def test_update_category_moves_skill(self):
        created = await self.service.create_skill(
            self.session, {"name": "Listening", "category": "technical"}
        )
        await self.service.create_skill(
            self.session, {"name": "Zig", "category": "technical"}
        )

        await self.service.update_skill(self.session, created.id, {"category": "soft"})

        result = await self.service.get_skills(self.session)
        self.assertEqual([s.name for s in result], ["Zig", "Listening"])

    async def test_delete_unknown_id_raises(self):
        with self.assertRaises(NotFoundError):
            await self.service.delete_skill(self.session, 31337)

    async def test_delete_skill(self):
        created = await self.service.create_skill(
            self.session, {"name": "SQL", "category": "technical"}
        )

        await self.service.delete_skill(self.session, created.id)

        with self.assertRaises(NotFoundError):
            await self.service.update_skill(self.session, created.id, {"name": "NoSQL"})


if __name__ == "__main__":
    unittest.main()
