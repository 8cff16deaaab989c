from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio.common.api_endpoints import HEALTH_ENDPOINT
from portfolio.common.fast_api_error_handler import register_exception_handlers
from portfolio.common.fast_api_response_wrapper import api_response
from portfolio.dto.health_dto import HealthDto
from portfolio.utils.date_time_util import format_datetime_to_iso_utc_z, utc_now

API_PREFIX = "/api"


class FastAppFactory:
    """
    Factory class for creating and configuring a FastAPI application.

    This class encapsulates the setup of the FastAPI app, including
    routing, exception handling and CORS.
    """

    def __init__(
        self,
        resume_controller,
        project_controller,
        contact_controller,
        cors_allowed_origins: list[str] | None = None,
    ):
        """
        Initialize the factory.

        Args:
            resume_controller: Controller exposing personal info, work experience,
                education, skills and awards/certifications routes.
            project_controller: Controller exposing portfolio project routes.
            contact_controller: Controller exposing contact form routes.
            cors_allowed_origins: Origins allowed to call the API from a browser.
        """
        self.resume_controller = resume_controller
        self.project_controller = project_controller
        self.contact_controller = contact_controller
        self.cors_allowed_origins = cors_allowed_origins or []

    def create_app(self, is_prod: bool = False) -> FastAPI:
        """
        Create and configure a FastAPI application instance.

        This method performs the following setup steps:
            1. Initializes the FastAPI application.
                - In production mode (is_prod=True), disables Swagger UI, ReDoc,
                    and the OpenAPI schema endpoints.
            2. Registers global exception handlers.
            3. Adds CORS middleware when allowed origins are configured.
            4. Registers the controller routes under the '/api' prefix.
            5. Adds a health check endpoint at '/api/health'.

        Args:
            is_prod (bool): Whether the application is running in production mode.
                If True, API documentation and schema endpoints are disabled.
                Defaults to False.

        Returns:
            FastAPI: A fully configured FastAPI application instance.
        """
        app = FastAPI(
            title="Portfolio API",
            docs_url=None if is_prod else "/docs",
            redoc_url=None if is_prod else "/redoc",
            openapi_url=None if is_prod else "/openapi.json",
        )

        register_exception_handlers(app)

        if self.cors_allowed_origins:
            app.add_middleware(
                CORSMiddleware,
                allow_origins=self.cors_allowed_origins,
                allow_methods=["*"],
                allow_headers=["*"],
            )

        app.include_router(self.resume_controller.router, prefix=API_PREFIX)
        app.include_router(self.project_controller.router, prefix=API_PREFIX)
        app.include_router(self.contact_controller.router, prefix=API_PREFIX)

        @app.get(API_PREFIX + HEALTH_ENDPOINT, operation_id="healthcheck")
        def health_check():
            """
            Health check endpoint.

            Returns:
                The status token "ok" and the current UTC timestamp.
            """
            return api_response(
                message="Success.",
                data=HealthDto(
                    status="ok",
                    timestamp=format_datetime_to_iso_utc_z(utc_now()),
                ),
            )

        return app
