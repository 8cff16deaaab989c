import os

from portfolio.common.database import Database
from portfolio.common.environment_constants import CORS_ALLOWED_ORIGINS
from portfolio.common.logger import get_logger
from portfolio.contact.contact_controller import ContactController
from portfolio.contact.contact_mapper import ContactMapper
from portfolio.contact.contact_service import ContactFormService
from portfolio.projects.project_controller import ProjectController
from portfolio.projects.project_mapper import ProjectMapper
from portfolio.projects.project_service import PortfolioProjectService
from portfolio.repository.award_certification_repository import (
    AwardCertificationRepository,
)
from portfolio.repository.contact_form_repository import ContactFormRepository
from portfolio.repository.education_repository import EducationRepository
from portfolio.repository.personal_info_repository import PersonalInfoRepository
from portfolio.repository.portfolio_project_repository import (
    PortfolioProjectRepository,
)
from portfolio.repository.skill_repository import SkillRepository
from portfolio.repository.work_experience_repository import WorkExperienceRepository
from portfolio.resume.award_certification_service import AwardCertificationService
from portfolio.resume.education_service import EducationService
from portfolio.resume.personal_info_service import PersonalInfoService
from portfolio.resume.resume_controller import ResumeController
from portfolio.resume.resume_mapper import ResumeMapper
from portfolio.resume.skill_service import SkillService
from portfolio.resume.work_experience_service import WorkExperienceService
from portfolio.utils.fast_app_factory import FastAppFactory


def parse_cors_origins(raw: str | None) -> list[str]:
    """Split a comma-separated origin list, dropping blanks."""
    if not raw:
        return []
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class AppDependencyBuilder:
    """
    A builder class responsible for constructing all service and controller dependencies
    used throughout the application.

    This class acts as a centralized place for wiring together:
    - Logging
    - The database wrapper
    - Repositories, mappers and services for each portfolio section
    - HTTP API controllers and the FastAPI app factory

    Example:
        builder = AppDependencyBuilder()
        app = builder.fast_app_factory.create_app()
    """

    def __init__(self, database: Database | None = None):
        self.logger = get_logger()
        self.database = database or Database()

        self.resume_mapper = ResumeMapper()
        self.project_mapper = ProjectMapper()
        self.contact_mapper = ContactMapper()

        self.personal_info_repository = PersonalInfoRepository()
        self.work_experience_repository = WorkExperienceRepository()
        self.education_repository = EducationRepository()
        self.skill_repository = SkillRepository()
        self.award_certification_repository = AwardCertificationRepository()
        self.portfolio_project_repository = PortfolioProjectRepository()
        self.contact_form_repository = ContactFormRepository()

        self.personal_info_service = PersonalInfoService(
            personal_info_repository=self.personal_info_repository,
            resume_mapper=self.resume_mapper,
            logger=self.logger,
        )
        self.work_experience_service = WorkExperienceService(
            work_experience_repository=self.work_experience_repository,
            resume_mapper=self.resume_mapper,
            logger=self.logger,
        )
        self.education_service = EducationService(
            education_repository=self.education_repository,
            resume_mapper=self.resume_mapper,
            logger=self.logger,
        )
        self.skill_service = SkillService(
            skill_repository=self.skill_repository,
            resume_mapper=self.resume_mapper,
            logger=self.logger,
        )
        self.award_certification_service = AwardCertificationService(
            award_certification_repository=self.award_certification_repository,
            resume_mapper=self.resume_mapper,
            logger=self.logger,
        )
        self.portfolio_project_service = PortfolioProjectService(
            portfolio_project_repository=self.portfolio_project_repository,
            project_mapper=self.project_mapper,
            logger=self.logger,
        )
        self.contact_form_service = ContactFormService(
            contact_form_repository=self.contact_form_repository,
            contact_mapper=self.contact_mapper,
            logger=self.logger,
        )

        self.resume_controller = ResumeController(
            personal_info_service=self.personal_info_service,
            work_experience_service=self.work_experience_service,
            education_service=self.education_service,
            skill_service=self.skill_service,
            award_certification_service=self.award_certification_service,
            database=self.database,
        )
        self.project_controller = ProjectController(
            portfolio_project_service=self.portfolio_project_service,
            database=self.database,
        )
        self.contact_controller = ContactController(
            contact_form_service=self.contact_form_service,
            database=self.database,
        )

        self.fast_app_factory = FastAppFactory(
            resume_controller=self.resume_controller,
            project_controller=self.project_controller,
            contact_controller=self.contact_controller,
            cors_allowed_origins=parse_cors_origins(os.getenv(CORS_ALLOWED_ORIGINS)),
        )
