from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.entity.work_experience_entity import WorkExperienceEntity


class WorkExperienceRepository:
    """
    Repository for handling database operations related to WorkExperienceEntity.
    """

    async def get_all_work_experience(
        self, session: AsyncSession
    ) -> list[WorkExperienceEntity]:
        """
        Retrieve all work experience entries, most recent start date first.

        Entries sharing a start date keep insertion order.

        Args:
            session (AsyncSession): The active async database session.

        Returns:
            list[WorkExperienceEntity]: All entries; empty if none exist.
        """
        result = await session.execute(
            select(WorkExperienceEntity).order_by(
                WorkExperienceEntity.start_date.desc(),
                WorkExperienceEntity.id.asc(),
            )
        )

        return list(result.scalars().all())

    async def get_work_experience_by_id(
        self, session: AsyncSession, work_experience_id: int
    ) -> WorkExperienceEntity | None:
        """
        Retrieve a work experience entry by its ID.

        Returns:
            WorkExperienceEntity | None: The matching entry if found; otherwise None.
        """
        result = await session.execute(
            select(WorkExperienceEntity).where(
                WorkExperienceEntity.id == work_experience_id
            )
        )

        return result.scalars().one_or_none()

    async def upsert_work_experience(
        self, session: AsyncSession, entity: WorkExperienceEntity
    ) -> WorkExperienceEntity:
        """
        Inserts or updates a WorkExperienceEntity in the database.

        Uses session.merge() to update the record if a matching primary key exists,
        or inserts a new one otherwise.

        Args:
            session (AsyncSession): The active async database session.
            entity (WorkExperienceEntity): The entity to persist.

        Returns:
            WorkExperienceEntity: The merged entity instance synchronized with the session.
        """
        merged_entity = await session.merge(entity)
        await session.flush()

        return merged_entity

    async def delete_work_experience(
        self, session: AsyncSession, work_experience_id: int
    ) -> bool:
        """
        Delete a work experience entry by its ID.

        Returns:
            bool: True if a row was deleted, False if no row had this ID.
        """
        result = await session.execute(
            delete(WorkExperienceEntity).where(
                WorkExperienceEntity.id == work_experience_id
            )
        )

        return result.rowcount > 0
