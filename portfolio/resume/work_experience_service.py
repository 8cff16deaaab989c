from collections.abc import Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.common.errors import NotFoundError, store_errors
from portfolio.common.validation import validate_payload
from portfolio.dto.work_experience_dto import WorkExperienceDto
from portfolio.dto.work_experience_request_dto import (
    WorkExperienceCreateDto,
    WorkExperienceUpdateDto,
)
from portfolio.entity.work_experience_entity import WorkExperienceEntity
from portfolio.repository.work_experience_repository import WorkExperienceRepository
from portfolio.resume.resume_mapper import ResumeMapper
from portfolio.utils.date_time_util import next_update_timestamp


class WorkExperienceService:
    """Service for managing work experience entries."""

    def __init__(
        self,
        work_experience_repository: WorkExperienceRepository,
        resume_mapper: ResumeMapper,
        logger,
    ):
        """
        Initializes the WorkExperienceService with required dependencies.

        Args:
            work_experience_repository (WorkExperienceRepository):
                The repository for accessing work experience data.
            resume_mapper (ResumeMapper):
                The mapper for converting database entities to DTOs.
            logger: The logger instance for logging messages.
        """
        self.work_experience_repository = work_experience_repository
        self.resume_mapper = resume_mapper
        self.logger = logger

    async def get_work_experience(
        self, session: AsyncSession
    ) -> list[WorkExperienceDto]:
        """
        Retrieve all work experience entries, most recent start date first.
        """
        with store_errors("Listing work experience"):
            entities = await self.work_experience_repository.get_all_work_experience(
                session
            )

        return self.resume_mapper.map_to_work_experience_dtos(entities)

    async def create_work_experience(
        self,
        session: AsyncSession,
        payload: WorkExperienceCreateDto | Mapping,
    ) -> WorkExperienceDto:
        """
        Create a work experience entry.

        Omitted optional fields take their defaults (`is_current=False`,
        `end_date=None`).

        Raises:
            ValidationError: If the payload is malformed; nothing is written.
        """
        values = validate_payload(WorkExperienceCreateDto, payload).to_db_dict()
        now = next_update_timestamp(None)

        with store_errors("Creating work experience"):
            entity = await self.work_experience_repository.upsert_work_experience(
                session,
                WorkExperienceEntity(**values, created_at=now, updated_at=now),
            )
            await session.commit()

        self.logger.info(
            "[WorkExperienceService] work experience created. ID: %s", entity.id
        )
        return self.resume_mapper.map_to_work_experience_dto(entity)

    async def update_work_experience(
        self,
        session: AsyncSession,
        work_experience_id: int,
        payload: WorkExperienceUpdateDto | Mapping,
    ) -> WorkExperienceDto:
        """
        Apply a sparse update to a work experience entry.

        Only fields present in the payload change; an explicit null clears
        `end_date`. `updated_at` is refreshed even when nothing else changes.

        Raises:
            ValidationError: If the payload is malformed.
            NotFoundError: If no entry has this ID; nothing is written.
        """
        patch = validate_payload(WorkExperienceUpdateDto, payload).to_patch()

        with store_errors("Updating work experience"):
            entity = await self.work_experience_repository.get_work_experience_by_id(
                session, work_experience_id
            )
            if entity is None:
                self.logger.warning(
                    "[WorkExperienceService] update rejected, ID %s not found",
                    work_experience_id,
                )
                raise NotFoundError(
                    f"Work experience with ID {work_experience_id} not found"
                )

            for field, value in patch.items():
                setattr(entity, field, value)
            entity.updated_at = next_update_timestamp(entity.updated_at)

            entity = await self.work_experience_repository.upsert_work_experience(
                session, entity
            )
            await session.commit()

        self.logger.info(
            "[WorkExperienceService] work experience updated. ID: %s, fields: %s",
            entity.id,
            sorted(patch),
        )
        return self.resume_mapper.map_to_work_experience_dto(entity)

    async def delete_work_experience(
        self, session: AsyncSession, work_experience_id: int
    ) -> None:
        """
        Delete a work experience entry.

        Raises:
            NotFoundError: If no entry has this ID.
        """
        with store_errors("Deleting work experience"):
            deleted = await self.work_experience_repository.delete_work_experience(
                session, work_experience_id
            )
            if not deleted:
                self.logger.warning(
                    "[WorkExperienceService] delete rejected, ID %s not found",
                    work_experience_id,
                )
                raise NotFoundError(
                    f"Work experience with ID {work_experience_id} not found"
                )
            await session.commit()

        self.logger.info(
            "[WorkExperienceService] work experience deleted. ID: %s",
            work_experience_id,
        )
