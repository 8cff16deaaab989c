import unittest
from datetime import datetime, timedelta, timezone

from portfolio.entity.contact_form_entity import ContactFormEntity
from portfolio.repository.contact_form_repository import ContactFormRepository
from tests.portfolio_test.repository_test.base_repository_test_lib import (
    BaseRepositoryTestLib,
)

T0 = datetime(2024, 3, 1, tzinfo=timezone.utc)


class TestContactFormRepository(BaseRepositoryTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.repo = ContactFormRepository()

    async def test_insert_contact_form_assigns_id(self):
        entity = await self.repo.insert_contact_form(
            self.session,
            ContactFormEntity(
                name="Visitor",
                email="visitor@example.com",
                subject=None,
                message="Hello!",
                submitted_at=T0,
            ),
        )

        self.assertIsNotNone(entity.id)

    async def test_get_all_contact_forms_most_recent_first(self):
        for i, name in enumerate(["first", "second", "third"]):
            await self.repo.insert_contact_form(
                self.session,
                ContactFormEntity(
                    name=name,
                    email=f"{name}@example.com",
                    message="Hi",
                    submitted_at=T0 + timedelta(hours=i),
                ),
            )
        await self.session.commit()

        result = await self.repo.get_all_contact_forms(self.session)

        self.assertEqual([c.name for c in result], ["third", "second", "first"])


if __name__ == "__main__":
    unittest.main()
