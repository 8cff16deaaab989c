from http import HTTPStatus

from fastapi import APIRouter

from portfolio.common.api_endpoints import CONTACT_FORMS_ENDPOINT
from portfolio.common.fast_api_response_wrapper import api_response
from portfolio.dto.contact_form_request_dto import ContactFormCreateDto


class ContactController:
    def __init__(self, contact_form_service, database):
        """
        Initialize the ContactController with required dependencies and register routes.

        Args:
            contact_form_service (ContactFormService): Service for contact form submissions.
            database (Database): Database access object providing async session management.
        """
        if not contact_form_service:
            raise ValueError("ContactFormService instance is required.")

        self.contact_form_service = contact_form_service
        self.database = database

        self.router = APIRouter(tags=["contact"])

        self.router.add_api_route(
            CONTACT_FORMS_ENDPOINT,
            endpoint=self.get_contact_forms,
            methods=["GET"],
            operation_id="getContactForms",
            response_model=None,
        )
        self.router.add_api_route(
            CONTACT_FORMS_ENDPOINT,
            endpoint=self.create_contact_form,
            methods=["POST"],
            operation_id="createContactForm",
            response_model=None,
        )

    async def get_contact_forms(self):
        async with self.database.session() as session:
            submissions = await self.contact_form_service.get_contact_forms(session)

        return api_response(
            message="Successfully fetched all contact form submissions.",
            data={"contactForms": submissions},
        )

    async def create_contact_form(self, body: ContactFormCreateDto):
        """
        Submit the public contact form.
        """
        async with self.database.session() as session:
            submission = await self.contact_form_service.create_contact_form(
                session, body
            )

        return api_response(
            message="Thank you for your message.",
            data={"contactForm": submission},
            status_code=HTTPStatus.CREATED,
        )
