from portfolio.dto.award_certification_dto import AwardCertificationDto
from portfolio.dto.education_dto import EducationDto
from portfolio.dto.personal_info_dto import PersonalInfoDto
from portfolio.dto.skill_dto import SkillDto
from portfolio.dto.work_experience_dto import WorkExperienceDto
from portfolio.entity.award_certification_entity import AwardCertificationEntity
from portfolio.entity.education_entity import EducationEntity
from portfolio.entity.personal_info_entity import PersonalInfoEntity
from portfolio.entity.skill_entity import SkillEntity
from portfolio.entity.work_experience_entity import WorkExperienceEntity


class ResumeMapper:
    """
    Mapper for converting resume database entities to DTOs.
    """

    def map_to_personal_info_dto(
        self, entity: PersonalInfoEntity | None
    ) -> PersonalInfoDto | None:
        if entity is None:
            return None
        return PersonalInfoDto.model_validate(entity)

    def map_to_work_experience_dto(
        self, entity: WorkExperienceEntity
    ) -> WorkExperienceDto:
        return WorkExperienceDto.model_validate(entity)

    def map_to_work_experience_dtos(
        self, entities: list[WorkExperienceEntity]
    ) -> list[WorkExperienceDto]:
        return [self.map_to_work_experience_dto(e) for e in entities]

    def map_to_education_dto(self, entity: EducationEntity) -> EducationDto:
        return EducationDto.model_validate(entity)

    def map_to_education_dtos(
        self, entities: list[EducationEntity]
    ) -> list[EducationDto]:
        return [self.map_to_education_dto(e) for e in entities]

    def map_to_skill_dto(self, entity: SkillEntity) -> SkillDto:
        return SkillDto.model_validate(entity)

    def map_to_skill_dtos(self, entities: list[SkillEntity]) -> list[SkillDto]:
        return [self.map_to_skill_dto(e) for e in entities]

    def map_to_award_certification_dto(
        self, entity: AwardCertificationEntity
    ) -> AwardCertificationDto:
        return AwardCertificationDto.model_validate(entity)

    def map_to_award_certification_dtos(
        self, entities: list[AwardCertificationEntity]
    ) -> list[AwardCertificationDto]:
        return [self.map_to_award_certification_dto(e) for e in entities]
