from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.entity.portfolio_project_entity import PortfolioProjectEntity


class PortfolioProjectRepository:
    """
    Repository for handling database operations related to PortfolioProjectEntity.
    """

    async def get_all_portfolio_projects(
        self, session: AsyncSession
    ) -> list[PortfolioProjectEntity]:
        """
        Retrieve all portfolio projects in display order.

        Ordering:
            1. is_featured descending (featured projects first)
            2. display_order ascending
            3. created_at descending (newest first among equal display_order)

        Args:
            session (AsyncSession): The active async database session.

        Returns:
            list[PortfolioProjectEntity]: All projects; empty if none exist.
        """
        result = await session.execute(
            select(PortfolioProjectEntity).order_by(
                PortfolioProjectEntity.is_featured.desc(),
                PortfolioProjectEntity.display_order.asc(),
                PortfolioProjectEntity.created_at.desc(),
                PortfolioProjectEntity.id.desc(),
            )
        )

        return list(result.scalars().all())

    async def get_portfolio_project_by_id(
        self, session: AsyncSession, project_id: int
    ) -> PortfolioProjectEntity | None:
        """
        Retrieve a portfolio project by its ID.

        Returns:
            PortfolioProjectEntity | None: The matching project if found; otherwise None.
        """
        result = await session.execute(
            select(PortfolioProjectEntity).where(PortfolioProjectEntity.id == project_id)
        )

        return result.scalars().one_or_none()

    async def upsert_portfolio_project(
        self, session: AsyncSession, entity: PortfolioProjectEntity
    ) -> PortfolioProjectEntity:
        """
        Inserts or updates a PortfolioProjectEntity in the database.

        Uses session.merge() to update the record if a matching primary key exists,
        or inserts a new one otherwise.

        Args:
            session (AsyncSession): The active async database session.
            entity (PortfolioProjectEntity): The entity to persist.

        Returns:
            PortfolioProjectEntity: The merged entity instance synchronized with the session.
        """
        merged_entity = await session.merge(entity)
        await session.flush()

        return merged_entity

    async def delete_portfolio_project(
        self, session: AsyncSession, project_id: int
    ) -> bool:
        """
        Delete a portfolio project by its ID.

        Returns:
            bool: True if a row was deleted, False if no row had this ID.
        """
        result = await session.execute(
            delete(PortfolioProjectEntity).where(PortfolioProjectEntity.id == project_id)
        )

        return result.rowcount > 0
