from http import HTTPStatus

from fastapi import APIRouter

from portfolio.common.api_endpoints import (
    AWARDS_CERTIFICATIONS_ENDPOINT,
    AWARDS_CERTIFICATIONS_ITEM_ENDPOINT,
    EDUCATION_ENDPOINT,
    EDUCATION_ITEM_ENDPOINT,
    PERSONAL_INFO_ENDPOINT,
    SKILLS_ENDPOINT,
    SKILLS_ITEM_ENDPOINT,
    WORK_EXPERIENCE_ENDPOINT,
    WORK_EXPERIENCE_ITEM_ENDPOINT,
)
from portfolio.common.fast_api_response_wrapper import (
    api_response,
    no_content_response,
)
from portfolio.dto.award_certification_request_dto import (
    AwardCertificationCreateDto,
    AwardCertificationUpdateDto,
)
from portfolio.dto.education_request_dto import EducationCreateDto, EducationUpdateDto
from portfolio.dto.personal_info_request_dto import PersonalInfoRequestDto
from portfolio.dto.skill_request_dto import SkillCreateDto, SkillUpdateDto
from portfolio.dto.work_experience_request_dto import (
    WorkExperienceCreateDto,
    WorkExperienceUpdateDto,
)


class ResumeController:
    """
    FastAPI controller exposing the resume sections: personal info, work
    experience, education, skills and awards/certifications.

    Handles request parsing and session boundaries, delegating all business
    logic to the per-section services.
    """

    def __init__(
        self,
        personal_info_service,
        work_experience_service,
        education_service,
        skill_service,
        award_certification_service,
        database,
    ):
        """
        Initialize the ResumeController with its dependencies and register routes.

        Args:
            personal_info_service (PersonalInfoService): Service for the personal info singleton.
            work_experience_service (WorkExperienceService): Service for work experience entries.
            education_service (EducationService): Service for education entries.
            skill_service (SkillService): Service for skills.
            award_certification_service (AwardCertificationService): Service for awards and certifications.
            database (Database): Database access object providing async session management.
        """
        self.router = APIRouter(tags=["resume"])
        self.personal_info_service = personal_info_service
        self.work_experience_service = work_experience_service
        self.education_service = education_service
        self.skill_service = skill_service
        self.award_certification_service = award_certification_service
        self.database = database

        routes = [
            (PERSONAL_INFO_ENDPOINT, "GET", self.get_personal_info, "getPersonalInfo"),
            (PERSONAL_INFO_ENDPOINT, "PUT", self.update_personal_info, "updatePersonalInfo"),
            (WORK_EXPERIENCE_ENDPOINT, "GET", self.get_work_experience, "getWorkExperience"),
            (WORK_EXPERIENCE_ENDPOINT, "POST", self.create_work_experience, "createWorkExperience"),
            (WORK_EXPERIENCE_ITEM_ENDPOINT, "PATCH", self.update_work_experience, "updateWorkExperience"),
            (WORK_EXPERIENCE_ITEM_ENDPOINT, "DELETE", self.delete_work_experience, "deleteWorkExperience"),
            (EDUCATION_ENDPOINT, "GET", self.get_education, "getEducation"),
            (EDUCATION_ENDPOINT, "POST", self.create_education, "createEducation"),
            (EDUCATION_ITEM_ENDPOINT, "PATCH", self.update_education, "updateEducation"),
            (EDUCATION_ITEM_ENDPOINT, "DELETE", self.delete_education, "deleteEducation"),
            (SKILLS_ENDPOINT, "GET", self.get_skills, "getSkills"),
            (SKILLS_ENDPOINT, "POST", self.create_skill, "createSkill"),
            (SKILLS_ITEM_ENDPOINT, "PATCH", self.update_skill, "updateSkill"),
            (SKILLS_ITEM_ENDPOINT, "DELETE", self.delete_skill, "deleteSkill"),
            (AWARDS_CERTIFICATIONS_ENDPOINT, "GET", self.get_awards_certifications, "getAwardsCertifications"),
            (AWARDS_CERTIFICATIONS_ENDPOINT, "POST", self.create_award_certification, "createAwardCertification"),
            (AWARDS_CERTIFICATIONS_ITEM_ENDPOINT, "PATCH", self.update_award_certification, "updateAwardCertification"),
            (AWARDS_CERTIFICATIONS_ITEM_ENDPOINT, "DELETE", self.delete_award_certification, "deleteAwardCertification"),
        ]
        for path, method, endpoint, operation_id in routes:
            self.router.add_api_route(
                path,
                endpoint=endpoint,
                methods=[method],
                operation_id=operation_id,
                response_model=None,
            )

    async def get_personal_info(self):
        """
        Retrieve the personal info record.

        Returns:
            A standardized API response whose `personalInfo` is null when no
            record has been saved yet.
        """
        async with self.database.session() as session:
            personal_info = await self.personal_info_service.get_personal_info(session)

        return api_response(
            message="Personal info retrieved successfully",
            data={"personalInfo": personal_info},
        )

    async def update_personal_info(self, body: PersonalInfoRequestDto):
        """
        Create or fully overwrite the personal info record.
        """
        async with self.database.session() as session:
            personal_info = await self.personal_info_service.upsert_personal_info(
                session, body
            )

        return api_response(
            message="Personal info saved successfully",
            data={"personalInfo": personal_info},
        )

    async def get_work_experience(self):
        async with self.database.session() as session:
            entries = await self.work_experience_service.get_work_experience(session)

        return api_response(
            message="Work experience retrieved successfully",
            data={"workExperience": entries},
        )

    async def create_work_experience(self, body: WorkExperienceCreateDto):
        async with self.database.session() as session:
            entry = await self.work_experience_service.create_work_experience(
                session, body
            )

        return api_response(
            message="Work experience created successfully",
            data={"workExperience": entry},
            status_code=HTTPStatus.CREATED,
        )

    async def update_work_experience(self, entry_id: int, body: WorkExperienceUpdateDto):
        """
        Apply a sparse update; fields left out of the body keep their stored value.
        """
        async with self.database.session() as session:
            entry = await self.work_experience_service.update_work_experience(
                session, entry_id, body
            )

        return api_response(
            message="Work experience updated successfully",
            data={"workExperience": entry},
        )

    async def delete_work_experience(self, entry_id: int):
        async with self.database.session() as session:
            await self.work_experience_service.delete_work_experience(session, entry_id)

        return no_content_response()

    async def get_education(self):
        async with self.database.session() as session:
            entries = await self.education_service.get_education(session)

        return api_response(
            message="Education retrieved successfully",
            data={"education": entries},
        )

    async def create_education(self, body: EducationCreateDto):
        async with self.database.session() as session:
            entry = await self.education_service.create_education(session, body)

        return api_response(
            message="Education created successfully",
            data={"education": entry},
            status_code=HTTPStatus.CREATED,
        )

    async def update_education(self, entry_id: int, body: EducationUpdateDto):
        async with self.database.session() as session:
            entry = await self.education_service.update_education(
                session, entry_id, body
            )

        return api_response(
            message="Education updated successfully",
            data={"education": entry},
        )

    async def delete_education(self, entry_id: int):
        async with self.database.session() as session:
            await self.education_service.delete_education(session, entry_id)

        return no_content_response()

    async def get_skills(self):
        async with self.database.session() as session:
            skills = await self.skill_service.get_skills(session)

        return api_response(
            message="Skills retrieved successfully",
            data={"skills": skills},
        )

    async def create_skill(self, body: SkillCreateDto):
        async with self.database.session() as session:
            skill = await self.skill_service.create_skill(session, body)

        return api_response(
            message="Skill created successfully",
            data={"skill": skill},
            status_code=HTTPStatus.CREATED,
        )

    async def update_skill(self, entry_id: int, body: SkillUpdateDto):
        async with self.database.session() as session:
            skill = await self.skill_service.update_skill(session, entry_id, body)

        return api_response(
            message="Skill updated successfully",
            data={"skill": skill},
        )

    async def delete_skill(self, entry_id: int):
        async with self.database.session() as session:
            await self.skill_service.delete_skill(session, entry_id)

        return no_content_response()

    async def get_awards_certifications(self):
        async with self.database.session() as session:
            records = await self.award_certification_service.get_awards_certifications(
                session
            )

        return api_response(
            message="Awards and certifications retrieved successfully",
            data={"awardsCertifications": records},
        )

    async def create_award_certification(self, body: AwardCertificationCreateDto):
        async with self.database.session() as session:
            record = await self.award_certification_service.create_award_certification(
                session, body
            )

        return api_response(
            message="Award/certification created successfully",
            data={"awardCertification": record},
            status_code=HTTPStatus.CREATED,
        )

    async def update_award_certification(
        self, entry_id: int, body: AwardCertificationUpdateDto
    ):
        async with self.database.session() as session:
            record = await self.award_certification_service.update_award_certification(
                session, entry_id, body
            )

        return api_response(
            message="Award/certification updated successfully",
            data={"awardCertification": record},
        )

    async def delete_award_certification(self, entry_id: int):
        async with self.database.session() as session:
            await self.award_certification_service.delete_award_certification(
                session, entry_id
            )

        return no_content_response()
