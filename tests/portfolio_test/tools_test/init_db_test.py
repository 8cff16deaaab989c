import os
import tempfile
import unittest

from sqlalchemy import inspect

from portfolio.common.database import Database
from tools.init_db import init_database, load_all_entities
from portfolio.common.base import Base

EXPECTED_TABLES = {
    "personal_info",
    "work_experience",
    "education",
    "skills",
    "awards_certifications",
    "portfolio_projects",
    "contact_form",
}


class TestInitDb(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.database_url = "sqlite+aiosqlite:///" + os.path.join(
            self.tmp_dir.name, "portfolio.db"
        )

    async def asyncTearDown(self):
        self.tmp_dir.cleanup()

    async def _table_names(self):
        db = Database(self.database_url)
        async with db.get_engine().connect() as conn:
            names = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        await db.close()
        return set(names)

    def test_load_all_entities_registers_tables(self):
        load_all_entities()

        self.assertTrue(EXPECTED_TABLES.issubset(Base.metadata.tables.keys()))

    async def test_init_database_creates_schema(self):
        await init_database(self.database_url)

        self.assertEqual(await self._table_names(), EXPECTED_TABLES)

    async def test_init_database_is_repeatable(self):
        await init_database(self.database_url)
        await init_database(self.database_url, reset=True)

        self.assertEqual(await self._table_names(), EXPECTED_TABLES)


if __name__ == "__main__":
    unittest.main()
