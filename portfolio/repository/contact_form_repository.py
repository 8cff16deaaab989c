from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.entity.contact_form_entity import ContactFormEntity


class ContactFormRepository:
    """
    Repository for contact form submissions. Submissions are append-only.
    """

    async def get_all_contact_forms(
        self, session: AsyncSession
    ) -> list[ContactFormEntity]:
        """
        Fetch all submissions, most recent first.
        """
        result = await session.execute(
            select(ContactFormEntity).order_by(
                ContactFormEntity.submitted_at.desc(),
                ContactFormEntity.id.desc(),
            )
        )
        return list(result.scalars().all())

    async def insert_contact_form(
        self, session: AsyncSession, entity: ContactFormEntity
    ) -> ContactFormEntity:
        session.add(entity)
        await session.flush()
        return entity
