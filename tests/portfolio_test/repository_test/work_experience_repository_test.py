import unittest
from datetime import datetime, timezone

from portfolio.entity.work_experience_entity import WorkExperienceEntity
from portfolio.repository.work_experience_repository import WorkExperienceRepository
from tests.portfolio_test.repository_test.base_repository_test_lib import (
    BaseRepositoryTestLib,
)

NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)


def _entry(company, start_year):
    return WorkExperienceEntity(
        company=company,
        title="Engineer",
        start_date=datetime(start_year, 1, 1, tzinfo=timezone.utc),
        end_date=None,
        responsibilities="Built things.",
        is_current=False,
        created_at=NOW,
        updated_at=NOW,
    )


class TestWorkExperienceRepository(BaseRepositoryTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.repo = WorkExperienceRepository()

        self.entries = [_entry("Old Co", 2015), _entry("New Co", 2022), _entry("Mid Co", 2019)]
        await self.insert_entities(self.entries)

    async def test_get_all_work_experience_newest_start_first(self):
        result = await self.repo.get_all_work_experience(self.session)

        self.assertEqual([e.company for e in result], ["New Co", "Mid Co", "Old Co"])

    async def test_get_work_experience_by_id(self):
        target = self.entries[2]

        result = await self.repo.get_work_experience_by_id(self.session, target.id)

        self.assertEqual(result.company, "Mid Co")

    async def test_get_work_experience_by_id_missing(self):
        self.assertIsNone(await self.repo.get_work_experience_by_id(self.session, 9999))

    async def test_upsert_work_experience_updates_existing(self):
        target = self.entries[0]
        target.title = "Staff Engineer"

        merged = await self.repo.upsert_work_experience(self.session, target)
        await self.session.commit()

        self.forget_loaded_entities()
        stored = await self.repo.get_work_experience_by_id(self.session, merged.id)
        self.assertEqual(stored.title, "Staff Engineer")

    async def test_delete_work_experience(self):
        target_id = self.entries[1].id

        deleted = await self.repo.delete_work_experience(self.session, target_id)
        await self.session.commit()

        self.assertTrue(deleted)
        self.assertIsNone(await self.repo.get_work_experience_by_id(self.session, target_id))

    async def test_delete_work_experience_missing_reports_false(self):
        deleted = await self.repo.delete_work_experience(self.session, 9999)

        self.assertFalse(deleted)
        self.assertEqual(len(await self.repo.get_all_work_experience(self.session)), 3)


if __name__ == "__main__":
    unittest.main()
