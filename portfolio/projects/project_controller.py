from http import HTTPStatus

from fastapi import APIRouter

from portfolio.common.api_endpoints import (
    PORTFOLIO_PROJECTS_ENDPOINT,
    PORTFOLIO_PROJECTS_ITEM_ENDPOINT,
)
from portfolio.common.fast_api_response_wrapper import (
    api_response,
    no_content_response,
)
from portfolio.dto.portfolio_project_request_dto import (
    PortfolioProjectCreateDto,
    PortfolioProjectUpdateDto,
)


class ProjectController:
    def __init__(self, portfolio_project_service, database):
        """
        Initialize the ProjectController with required dependencies and register routes.

        Args:
            portfolio_project_service (PortfolioProjectService): Service for portfolio projects.
            database (Database): Database access object providing async session management.
        """
        if not portfolio_project_service:
            raise ValueError("PortfolioProjectService instance is required.")

        self.portfolio_project_service = portfolio_project_service
        self.database = database

        self.router = APIRouter(tags=["projects"])

        self.router.add_api_route(
            PORTFOLIO_PROJECTS_ENDPOINT,
            endpoint=self.get_portfolio_projects,
            methods=["GET"],
            operation_id="getPortfolioProjects",
            response_model=None,
        )
        self.router.add_api_route(
            PORTFOLIO_PROJECTS_ENDPOINT,
            endpoint=self.create_portfolio_project,
            methods=["POST"],
            operation_id="createPortfolioProject",
            response_model=None,
        )
        self.router.add_api_route(
            PORTFOLIO_PROJECTS_ITEM_ENDPOINT,
            endpoint=self.update_portfolio_project,
            methods=["PATCH"],
            operation_id="updatePortfolioProject",
            response_model=None,
        )
        self.router.add_api_route(
            PORTFOLIO_PROJECTS_ITEM_ENDPOINT,
            endpoint=self.delete_portfolio_project,
            methods=["DELETE"],
            operation_id="deletePortfolioProject",
            response_model=None,
        )

    async def get_portfolio_projects(self):
        """
        Retrieve all portfolio projects in display order.

        Return:
            API response containing a list of project DTOs.
        """
        async with self.database.session() as session:
            projects = await self.portfolio_project_service.get_portfolio_projects(
                session
            )

        return api_response(
            message="Successfully fetched all portfolio projects.",
            data={"portfolioProjects": projects},
        )

    async def create_portfolio_project(self, body: PortfolioProjectCreateDto):
        async with self.database.session() as session:
            project = await self.portfolio_project_service.create_portfolio_project(
                session, body
            )

        return api_response(
            message="Portfolio project created successfully",
            data={"portfolioProject": project},
            status_code=HTTPStatus.CREATED,
        )

    async def update_portfolio_project(
        self, entry_id: int, body: PortfolioProjectUpdateDto
    ):
        async with self.database.session() as session:
            project = await self.portfolio_project_service.update_portfolio_project(
                session, entry_id, body
            )

        return api_response(
            message="Portfolio project updated successfully",
            data={"portfolioProject": project},
        )

    async def delete_portfolio_project(self, entry_id: int):
        async with self.database.session() as session:
            await self.portfolio_project_service.delete_portfolio_project(
                session, entry_id
            )

        return no_content_response()
