from collections.abc import Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.common.errors import NotFoundError, store_errors
from portfolio.common.validation import validate_payload
from portfolio.dto.education_dto import EducationDto
from portfolio.dto.education_request_dto import EducationCreateDto, EducationUpdateDto
from portfolio.entity.education_entity import EducationEntity
from portfolio.repository.education_repository import EducationRepository
from portfolio.resume.resume_mapper import ResumeMapper
from portfolio.utils.date_time_util import next_update_timestamp


class EducationService:
    """Service for managing education entries."""

    def __init__(
        self,
        education_repository: EducationRepository,
        resume_mapper: ResumeMapper,
        logger,
    ):
        self.education_repository = education_repository
        self.resume_mapper = resume_mapper
        self.logger = logger

    async def get_education(self, session: AsyncSession) -> list[EducationDto]:
        with store_errors("Listing education"):
            entities = await self.education_repository.get_all_education(session)

        return self.resume_mapper.map_to_education_dtos(entities)

    async def create_education(
        self,
        session: AsyncSession,
        payload: EducationCreateDto | Mapping,
    ) -> EducationDto:
        values = validate_payload(EducationCreateDto, payload).to_db_dict()
        now = next_update_timestamp(None)

        with store_errors("Creating education"):
            entity = await self.education_repository.upsert_education(
                session, EducationEntity(**values, created_at=now, updated_at=now)
            )
            await session.commit()

        self.logger.info("[EducationService] education created. ID: %s", entity.id)
        return self.resume_mapper.map_to_education_dto(entity)

    async def update_education(
        self,
        session: AsyncSession,
        education_id: int,
        payload: EducationUpdateDto | Mapping,
    ) -> EducationDto:
        """
        Apply a sparse update to an education entry.

        Raises:
            ValidationError: If the payload is malformed.
            NotFoundError: If no entry has this ID.
        """
        patch = validate_payload(EducationUpdateDto, payload).to_patch()

        with store_errors("Updating education"):
            entity = await self.education_repository.get_education_by_id(
                session, education_id
            )
            if entity is None:
                self.logger.warning(
                    "[EducationService] update rejected, ID %s not found", education_id
                )
                raise NotFoundError(f"Education record with ID {education_id} not found")

            for field, value in patch.items():
                setattr(entity, field, value)
            entity.updated_at = next_update_timestamp(entity.updated_at)

            entity = await self.education_repository.upsert_education(session, entity)
            await session.commit()

        self.logger.info("[EducationService] education updated. ID: %s", entity.id)
        return self.resume_mapper.map_to_education_dto(entity)

    async def delete_education(self, session: AsyncSession, education_id: int) -> None:
        """
        Delete an education entry. Deleting an unknown ID is a no-op.
        """
        with store_errors("Deleting education"):
            deleted = await self.education_repository.delete_education(
                session, education_id
            )
            await session.commit()

        if deleted:
            self.logger.info("[EducationService] education deleted. ID: %s", education_id)
        else:
            self.logger.info(
                "[EducationService] no education with ID %s, nothing deleted",
                education_id,
            )
