from sqlalchemy import case, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.common.portfolio_enums import SkillCategory
from portfolio.entity.skill_entity import SkillEntity

# Declared enum order (technical, soft), independent of how the backend
# collates the stored strings.
_CATEGORY_RANK = case(
    *[
        (SkillEntity.category == category, rank)
        for rank, category in enumerate(SkillCategory)
    ],
    else_=len(SkillCategory),
)


class SkillRepository:
    """
    Repository for handling database operations related to SkillEntity.
    """

    async def get_all_skills(self, session: AsyncSession) -> list[SkillEntity]:
        """
        Retrieve all skills grouped by category, then alphabetically by name.

        Categories follow their declared order, so every technical skill
        precedes every soft skill.

        Args:
            session (AsyncSession): The active async database session.

        Returns:
            list[SkillEntity]: All skills; empty if none exist.
        """
        result = await session.execute(
            select(SkillEntity).order_by(
                _CATEGORY_RANK.asc(),
                SkillEntity.name.asc(),
                SkillEntity.id.asc(),
            )
        )

        return list(result.scalars().all())

    async def get_skill_by_id(
        self, session: AsyncSession, skill_id: int
    ) -> SkillEntity | None:
        """
        Retrieve a skill by its ID.

        Returns:
            SkillEntity | None: The matching skill if found; otherwise None.
        """
        result = await session.execute(
            select(SkillEntity).where(SkillEntity.id == skill_id)
        )

        return result.scalars().one_or_none()

    async def upsert_skill(
        self, session: AsyncSession, entity: SkillEntity
    ) -> SkillEntity:
        """
        Inserts or updates a SkillEntity using session.merge().
        """
        merged_entity = await session.merge(entity)
        await session.flush()

        return merged_entity

    async def delete_skill(self, session: AsyncSession, skill_id: int) -> bool:
        """
        Delete a skill by its ID.

        Returns:
            bool: True if a row was deleted, False if no row had this ID.
        """
        result = await session.execute(
            delete(SkillEntity).where(SkillEntity.id == skill_id)
        )

        return result.rowcount > 0
