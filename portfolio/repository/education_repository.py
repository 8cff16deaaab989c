from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.entity.education_entity import EducationEntity


class EducationRepository:
    async def get_all_education(self, session: AsyncSession) -> list[EducationEntity]:
        """
        Fetch all education entries, most recent start date first.
        """
        result = await session.execute(
            select(EducationEntity).order_by(
                EducationEntity.start_date.desc(),
                EducationEntity.id.asc(),
            )
        )
        return list(result.scalars().all())

    async def get_education_by_id(
        self, session: AsyncSession, education_id: int
    ) -> EducationEntity | None:
        result = await session.execute(
            select(EducationEntity).where(EducationEntity.id == education_id)
        )
        return result.scalars().one_or_none()

    async def upsert_education(
        self, session: AsyncSession, entity: EducationEntity
    ) -> EducationEntity:
        merged_entity = await session.merge(entity)
        await session.flush()
        return merged_entity

    async def delete_education(self, session: AsyncSession, education_id: int) -> bool:
        """
        Delete an education entry. Returns whether a row was removed.
        """
        result = await session.execute(
            delete(EducationEntity).where(EducationEntity.id == education_id)
        )
        return result.rowcount > 0
