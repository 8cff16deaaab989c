from collections.abc import Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.common.errors import NotFoundError, store_errors
from portfolio.common.validation import validate_payload
from portfolio.dto.portfolio_project_dto import PortfolioProjectDto
from portfolio.dto.portfolio_project_request_dto import (
    PortfolioProjectCreateDto,
    PortfolioProjectUpdateDto,
)
from portfolio.entity.portfolio_project_entity import PortfolioProjectEntity
from portfolio.projects.project_mapper import ProjectMapper
from portfolio.repository.portfolio_project_repository import (
    PortfolioProjectRepository,
)
from portfolio.utils.date_time_util import next_update_timestamp


class PortfolioProjectService:
    """
    Service for managing portfolio projects.

    The technologies list is persisted as JSON text and always read back as
    a list in the order it was written.
    """

    def __init__(
        self,
        portfolio_project_repository: PortfolioProjectRepository,
        project_mapper: ProjectMapper,
        logger,
    ):
        """
        Initializes the PortfolioProjectService with required dependencies.

        Args:
            portfolio_project_repository (PortfolioProjectRepository):
                The repository for accessing portfolio project data.
            project_mapper (ProjectMapper):
                The mapper for converting database entities to DTOs.
            logger: The logger instance for logging messages.
        """
        self.portfolio_project_repository = portfolio_project_repository
        self.project_mapper = project_mapper
        self.logger = logger

    async def get_portfolio_projects(
        self, session: AsyncSession
    ) -> list[PortfolioProjectDto]:
        """
        Retrieve all projects: featured first, then by display order, newest first on ties.
        """
        with store_errors("Listing portfolio projects"):
            entities = await self.portfolio_project_repository.get_all_portfolio_projects(
                session
            )

        return self.project_mapper.map_to_portfolio_project_dtos(entities)

    async def create_portfolio_project(
        self,
        session: AsyncSession,
        payload: PortfolioProjectCreateDto | Mapping,
    ) -> PortfolioProjectDto:
        """
        Create a portfolio project.

        Omitted fields take their defaults: `technologies=[]`,
        `display_order=0`, `is_featured=False`.

        Raises:
            ValidationError: If the payload is malformed; nothing is written.
        """
        values = validate_payload(PortfolioProjectCreateDto, payload).to_db_dict()
        now = next_update_timestamp(None)

        with store_errors("Creating portfolio project"):
            entity = await self.portfolio_project_repository.upsert_portfolio_project(
                session,
                PortfolioProjectEntity(**values, created_at=now, updated_at=now),
            )
            await session.commit()

        self.logger.info(
            "[PortfolioProjectService] project created. ID: %s, title: %s",
            entity.id,
            entity.title,
        )
        return self.project_mapper.map_to_portfolio_project_dto(entity)

    async def update_portfolio_project(
        self,
        session: AsyncSession,
        project_id: int,
        payload: PortfolioProjectUpdateDto | Mapping,
    ) -> PortfolioProjectDto:
        """
        Apply a sparse update to a portfolio project.

        A `technologies` list in the payload replaces the stored list as a
        whole; it is never merged element by element.

        Raises:
            ValidationError: If the payload is malformed.
            NotFoundError: If no project has this ID.
        """
        patch = validate_payload(PortfolioProjectUpdateDto, payload).to_patch()

        with store_errors("Updating portfolio project"):
            entity = await self.portfolio_project_repository.get_portfolio_project_by_id(
                session, project_id
            )
            if entity is None:
                self.logger.warning(
                    "[PortfolioProjectService] update rejected, ID %s not found",
                    project_id,
                )
                raise NotFoundError(f"Portfolio project with ID {project_id} not found")

            for field, value in patch.items():
                if field == "technologies":
                    value = list(value)
                setattr(entity, field, value)
            entity.updated_at = next_update_timestamp(entity.updated_at)

            entity = await self.portfolio_project_repository.upsert_portfolio_project(
                session, entity
            )
            await session.commit()

        self.logger.info(
            "[PortfolioProjectService] project updated. ID: %s, fields: %s",
            entity.id,
            sorted(patch),
        )
        return self.project_mapper.map_to_portfolio_project_dto(entity)

    async def delete_portfolio_project(
        self, session: AsyncSession, project_id: int
    ) -> None:
        """
        Delete a portfolio project.

        Raises:
            NotFoundError: If no project has this ID.
        """
        with store_errors("Deleting portfolio project"):
            deleted = await self.portfolio_project_repository.delete_portfolio_project(
                session, project_id
            )
            if not deleted:
                self.logger.warning(
                    "[PortfolioProjectService] delete rejected, ID %s not found",
                    project_id,
                )
                raise NotFoundError(f"Portfolio project with ID {project_id} not found")
            await session.commit()

        self.logger.info("[PortfolioProjectService] project deleted. ID: %s", project_id)
