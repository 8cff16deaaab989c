from collections.abc import Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.common.errors import store_errors
from portfolio.common.validation import validate_payload
from portfolio.dto.personal_info_dto import PersonalInfoDto
from portfolio.dto.personal_info_request_dto import PersonalInfoRequestDto
from portfolio.repository.personal_info_repository import PersonalInfoRepository
from portfolio.resume.resume_mapper import ResumeMapper
from portfolio.utils.date_time_util import next_update_timestamp


class PersonalInfoService:
    """
    Service owning the personal info singleton.

    There is never more than one personal info record. Reads return None
    until the first write; every write replaces all fields of the record
    while keeping its id and creation time.
    """

    def __init__(
        self,
        personal_info_repository: PersonalInfoRepository,
        resume_mapper: ResumeMapper,
        logger,
    ):
        """
        Initialize the PersonalInfoService.

        Args:
            personal_info_repository (PersonalInfoRepository): Repository for the singleton row.
            resume_mapper (ResumeMapper): Mapper converting entities to DTOs.
            logger: The logger instance for logging messages.
        """
        self.personal_info_repository = personal_info_repository
        self.resume_mapper = resume_mapper
        self.logger = logger

    async def get_personal_info(self, session: AsyncSession) -> PersonalInfoDto | None:
        """
        Retrieve the personal info record.

        Returns:
            PersonalInfoDto | None: The record, or None when nothing has been saved yet.
        """
        with store_errors("Reading personal info"):
            entity = await self.personal_info_repository.get_personal_info(session)

        return self.resume_mapper.map_to_personal_info_dto(entity)

    async def upsert_personal_info(
        self,
        session: AsyncSession,
        payload: PersonalInfoRequestDto | Mapping,
    ) -> PersonalInfoDto:
        """
        Create the personal info record, or overwrite every field of the existing one.

        Args:
            session (AsyncSession): Active database session.
            payload (PersonalInfoRequestDto | Mapping): The complete record.

        Returns:
            PersonalInfoDto: The stored record.

        Raises:
            ValidationError: If the payload is malformed; nothing is written.
            ConflictError: If the store reports a singleton constraint violation.
            StoreError: If the store fails.
        """
        values = validate_payload(PersonalInfoRequestDto, payload).to_db_dict()

        with store_errors("Saving personal info", conflict_on_integrity=True):
            existing = await self.personal_info_repository.get_personal_info(session)
            timestamp = next_update_timestamp(existing.updated_at if existing else None)

            entity = await self.personal_info_repository.upsert_personal_info(
                session, values, timestamp
            )
            await session.commit()

        self.logger.info(
            "[PersonalInfoService] personal info %s. ID: %s",
            "updated" if existing else "created",
            entity.id,
        )
        return self.resume_mapper.map_to_personal_info_dto(entity)
