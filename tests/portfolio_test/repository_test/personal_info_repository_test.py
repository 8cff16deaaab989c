import asyncio
import os
import tempfile
import unittest
from datetime import datetime, timedelta, timezone

from sqlalchemy import func, select

from portfolio.common.base import Base
from portfolio.common.database import Database
from portfolio.common.environment_constants import TEST_DATABASE_URL
from portfolio.entity.personal_info_entity import PersonalInfoEntity
from portfolio.repository.personal_info_repository import PersonalInfoRepository
from tests.portfolio_test.repository_test.base_repository_test_lib import (
    BaseRepositoryTestLib,
    as_utc,
)

T0 = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def _values(name="Ada Lovelace", **overrides):
    values = {
        "name": name,
        "email": "ada@example.com",
        "phone": None,
        "linkedin_url": None,
        "github_url": "https://github.com/ada",
        "professional_summary": "Analyst.",
        "photo_url": None,
    }
    values.update(overrides)
    return values


class TestPersonalInfoRepository(BaseRepositoryTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.repo = PersonalInfoRepository()

    async def _count_rows(self):
        result = await self.session.execute(
            select(func.count()).select_from(PersonalInfoEntity)
        )
        return result.scalar_one()

    async def test_get_personal_info_returns_none_when_empty(self):
        self.assertIsNone(await self.repo.get_personal_info(self.session))

    async def test_upsert_inserts_first_record(self):
        entity = await self.repo.upsert_personal_info(self.session, _values(), T0)
        await self.session.commit()

        self.assertIsNotNone(entity.id)
        self.assertEqual(entity.name, "Ada Lovelace")
        self.assertEqual(entity.github_url, "https://github.com/ada")
        self.assertEqual(await self._count_rows(), 1)

    async def test_upsert_overwrites_in_place(self):
        first = await self.repo.upsert_personal_info(self.session, _values(), T0)
        await self.session.commit()
        first_id = first.id

        later = T0 + timedelta(minutes=5)
        second = await self.repo.upsert_personal_info(
            self.session, _values(name="Grace Hopper", github_url=None), later
        )
        await self.session.commit()

        self.assertEqual(second.id, first_id)
        self.assertEqual(second.name, "Grace Hopper")
        self.assertIsNone(second.github_url)
        self.assertEqual(as_utc(second.created_at), T0)
        self.assertEqual(as_utc(second.updated_at), later)
        self.assertEqual(await self._count_rows(), 1)

    async def test_repeated_upserts_keep_a_single_row(self):
        for i in range(5):
            await self.repo.upsert_personal_info(
                self.session, _values(name=f"Name {i}"), T0 + timedelta(seconds=i)
            )
            await self.session.commit()

        self.forget_loaded_entities()
        stored = await self.repo.get_personal_info(self.session)

        self.assertEqual(stored.name, "Name 4")
        self.assertEqual(await self._count_rows(), 1)


class TestPersonalInfoConcurrentUpsert(unittest.IsolatedAsyncioTestCase):
    """
    Runs two upserts at the same time on separate connections, so it needs a
    database shared between connections: TEST_DATABASE_URL or a SQLite file.
    """

    async def asyncSetUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        database_url = os.getenv(TEST_DATABASE_URL) or (
            "sqlite+aiosqlite:///" + os.path.join(self.tmp_dir.name, "portfolio.db")
        )
        self.db = Database(database_url)
        self.repo = PersonalInfoRepository()

        async with self.db.get_engine().begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)

    async def asyncTearDown(self):
        async with self.db.get_engine().begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await self.db.close()
        self.tmp_dir.cleanup()

    async def _upsert_in_own_session(self, name, timestamp):
        async with self.db.session() as session:
            entity = await self.repo.upsert_personal_info(
                session, _values(name=name), timestamp
            )
            await session.commit()
            return entity.id

    async def test_concurrent_upserts_share_one_row(self):
        first_id, second_id = await asyncio.gather(
            self._upsert_in_own_session("First writer", T0),
            self._upsert_in_own_session("Second writer", T0 + timedelta(seconds=1)),
        )

        self.assertEqual(first_id, second_id)

        async with self.db.session() as session:
            result = await session.execute(
                select(func.count()).select_from(PersonalInfoEntity)
            )
            self.assertEqual(result.scalar_one(), 1)

            stored = await self.repo.get_personal_info(session)
            self.assertEqual(stored.id, first_id)
            self.assertIn(stored.name, {"First writer", "Second writer"})


if __name__ == "__main__":
    unittest.main()
