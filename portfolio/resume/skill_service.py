from collections.abc import Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.common.errors import NotFoundError, store_errors
from portfolio.common.validation import validate_payload
from portfolio.dto.skill_dto import SkillDto
from portfolio.dto.skill_request_dto import SkillCreateDto, SkillUpdateDto
from portfolio.entity.skill_entity import SkillEntity
from portfolio.repository.skill_repository import SkillRepository
from portfolio.resume.resume_mapper import ResumeMapper
from portfolio.utils.date_time_util import next_update_timestamp


class SkillService:
    """Service for managing skills."""

    def __init__(
        self,
        skill_repository: SkillRepository,
        resume_mapper: ResumeMapper,
        logger,
    ):
        """
        Initializes the SkillService with required dependencies.

        Args:
            skill_repository (SkillRepository): The repository for accessing skill data.
            resume_mapper (ResumeMapper): The mapper for converting database entities to DTOs.
            logger: The logger instance for logging messages.
        """
        self.skill_repository = skill_repository
        self.resume_mapper = resume_mapper
        self.logger = logger

    async def get_skills(self, session: AsyncSession) -> list[SkillDto]:
        """
        Retrieve all skills, technical before soft, alphabetical within a category.
        """
        with store_errors("Listing skills"):
            entities = await self.skill_repository.get_all_skills(session)

        return self.resume_mapper.map_to_skill_dtos(entities)

    async def create_skill(
        self, session: AsyncSession, payload: SkillCreateDto | Mapping
    ) -> SkillDto:
        """
        Create a skill.

        Raises:
            ValidationError: If the payload is malformed, e.g. an unknown category
                or proficiency level; nothing is written.
        """
        values = validate_payload(SkillCreateDto, payload).to_db_dict()
        now = next_update_timestamp(None)

        with store_errors("Creating skill"):
            entity = await self.skill_repository.upsert_skill(
                session, SkillEntity(**values, created_at=now, updated_at=now)
            )
            await session.commit()

        self.logger.info(
            "[SkillService] skill created. ID: %s, name: %s", entity.id, entity.name
        )
        return self.resume_mapper.map_to_skill_dto(entity)

    async def update_skill(
        self,
        session: AsyncSession,
        skill_id: int,
        payload: SkillUpdateDto | Mapping,
    ) -> SkillDto:
        """
        Apply a sparse update to a skill. An explicit null clears the proficiency level.

        Raises:
            ValidationError: If the payload is malformed.
            NotFoundError: If no skill has this ID.
        """
        patch = validate_payload(SkillUpdateDto, payload).to_patch()

        with store_errors("Updating skill"):
            entity = await self.skill_repository.get_skill_by_id(session, skill_id)
            if entity is None:
                self.logger.warning(
                    "[SkillService] update rejected, ID %s not found", skill_id
                )
                raise NotFoundError(f"Skill with ID {skill_id} not found")

            for field, value in patch.items():
                setattr(entity, field, value)
            entity.updated_at = next_update_timestamp(entity.updated_at)

            entity = await self.skill_repository.upsert_skill(session, entity)
            await session.commit()

        self.logger.info("[SkillService] skill updated. ID: %s", entity.id)
        return self.resume_mapper.map_to_skill_dto(entity)

    async def delete_skill(self, session: AsyncSession, skill_id: int) -> None:
        """
        Delete a skill.

        Raises:
            NotFoundError: If no skill has this ID.
        """
        with store_errors("Deleting skill"):
            deleted = await self.skill_repository.delete_skill(session, skill_id)
            if not deleted:
                self.logger.warning(
                    "[SkillService] delete rejected, ID %s not found", skill_id
                )
                raise NotFoundError(f"Skill with ID {skill_id} not found")
            await session.commit()

        self.logger.info("[SkillService] skill deleted. ID: %s", skill_id)
