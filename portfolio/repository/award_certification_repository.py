from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.entity.award_certification_entity import AwardCertificationEntity


class AwardCertificationRepository:
    async def get_all_awards_certifications(
        self, session: AsyncSession
    ) -> list[AwardCertificationEntity]:
        """
        Fetch all awards and certifications, most recently received first.
        """
        result = await session.execute(
            select(AwardCertificationEntity).order_by(
                AwardCertificationEntity.date_received.desc(),
                AwardCertificationEntity.id.asc(),
            )
        )
        return list(result.scalars().all())

    async def get_award_certification_by_id(
        self, session: AsyncSession, award_certification_id: int
    ) -> AwardCertificationEntity | None:
        result = await session.execute(
            select(AwardCertificationEntity).where(
                AwardCertificationEntity.id == award_certification_id
            )
        )
        return result.scalars().one_or_none()

    async def upsert_award_certification(
        self, session: AsyncSession, entity: AwardCertificationEntity
    ) -> AwardCertificationEntity:
        merged_entity = await session.merge(entity)
        await session.flush()
        return merged_entity

    async def delete_award_certification(
        self, session: AsyncSession, award_certification_id: int
    ) -> bool:
        result = await session.execute(
            delete(AwardCertificationEntity).where(
                AwardCertificationEntity.id == award_certification_id
            )
        )
        return result.rowcount > 0
