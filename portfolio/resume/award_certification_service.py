from collections.abc import Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.common.errors import NotFoundError, store_errors
from portfolio.common.validation import validate_payload
from portfolio.dto.award_certification_dto import AwardCertificationDto
from portfolio.dto.award_certification_request_dto import (
    AwardCertificationCreateDto,
    AwardCertificationUpdateDto,
)
from portfolio.entity.award_certification_entity import AwardCertificationEntity
from portfolio.repository.award_certification_repository import (
    AwardCertificationRepository,
)
from portfolio.resume.resume_mapper import ResumeMapper
from portfolio.utils.date_time_util import next_update_timestamp


class AwardCertificationService:
    """Service for managing awards and certifications."""

    def __init__(
        self,
        award_certification_repository: AwardCertificationRepository,
        resume_mapper: ResumeMapper,
        logger,
    ):
        self.award_certification_repository = award_certification_repository
        self.resume_mapper = resume_mapper
        self.logger = logger

    async def get_awards_certifications(
        self, session: AsyncSession
    ) -> list[AwardCertificationDto]:
        with store_errors("Listing awards and certifications"):
            entities = await self.award_certification_repository.get_all_awards_certifications(
                session
            )

        return self.resume_mapper.map_to_award_certification_dtos(entities)

    async def create_award_certification(
        self,
        session: AsyncSession,
        payload: AwardCertificationCreateDto | Mapping,
    ) -> AwardCertificationDto:
        values = validate_payload(AwardCertificationCreateDto, payload).to_db_dict()
        now = next_update_timestamp(None)

        with store_errors("Creating award/certification"):
            entity = await self.award_certification_repository.upsert_award_certification(
                session,
                AwardCertificationEntity(**values, created_at=now, updated_at=now),
            )
            await session.commit()

        self.logger.info(
            "[AwardCertificationService] %s created. ID: %s",
            entity.type.value,
            entity.id,
        )
        return self.resume_mapper.map_to_award_certification_dto(entity)

    async def update_award_certification(
        self,
        session: AsyncSession,
        award_certification_id: int,
        payload: AwardCertificationUpdateDto | Mapping,
    ) -> AwardCertificationDto:
        """
        Apply a sparse update to an award or certification.

        Raises:
            ValidationError: If the payload is malformed.
            NotFoundError: If no record has this ID.
        """
        patch = validate_payload(AwardCertificationUpdateDto, payload).to_patch()

        with store_errors("Updating award/certification"):
            entity = await self.award_certification_repository.get_award_certification_by_id(
                session, award_certification_id
            )
            if entity is None:
                self.logger.warning(
                    "[AwardCertificationService] update rejected, ID %s not found",
                    award_certification_id,
                )
                raise NotFoundError(
                    f"Award/Certification with ID {award_certification_id} not found"
                )

            for field, value in patch.items():
                setattr(entity, field, value)
            entity.updated_at = next_update_timestamp(entity.updated_at)

            entity = await self.award_certification_repository.upsert_award_certification(
                session, entity
            )
            await session.commit()

        self.logger.info(
            "[AwardCertificationService] award/certification updated. ID: %s", entity.id
        )
        return self.resume_mapper.map_to_award_certification_dto(entity)

    async def delete_award_certification(
        self, session: AsyncSession, award_certification_id: int
    ) -> None:
        """
        Delete an award or certification. Deleting an unknown ID is a no-op.
        """
        with store_errors("Deleting award/certification"):
            deleted = await self.award_certification_repository.delete_award_certification(
                session, award_certification_id
            )
            await session.commit()

        self.logger.info(
            "[AwardCertificationService] delete ID %s, removed: %s",
            award_certification_id,
            deleted,
        )
