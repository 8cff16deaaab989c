from collections.abc import Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.common.errors import store_errors
from portfolio.common.validation import validate_payload
from portfolio.contact.contact_mapper import ContactMapper
from portfolio.dto.contact_form_dto import ContactFormDto
from portfolio.dto.contact_form_request_dto import ContactFormCreateDto
from portfolio.entity.contact_form_entity import ContactFormEntity
from portfolio.repository.contact_form_repository import ContactFormRepository
from portfolio.utils.date_time_util import utc_now


class ContactFormService:
    """
    Service for contact form submissions.

    Submissions are append-only: they can be created and listed, never
    updated or deleted. Storing a submission does not notify anyone.
    """

    def __init__(
        self,
        contact_form_repository: ContactFormRepository,
        contact_mapper: ContactMapper,
        logger,
    ):
        self.contact_form_repository = contact_form_repository
        self.contact_mapper = contact_mapper
        self.logger = logger

    async def get_contact_forms(self, session: AsyncSession) -> list[ContactFormDto]:
        """
        Retrieve all submissions, most recent first.
        """
        with store_errors("Listing contact forms"):
            entities = await self.contact_form_repository.get_all_contact_forms(session)

        return self.contact_mapper.map_to_contact_form_dtos(entities)

    async def create_contact_form(
        self,
        session: AsyncSession,
        payload: ContactFormCreateDto | Mapping,
    ) -> ContactFormDto:
        """
        Store a contact form submission, stamping `submitted_at` with the current time.

        Raises:
            ValidationError: If the payload is malformed (e.g. an invalid email);
                nothing is written.
        """
        values = validate_payload(ContactFormCreateDto, payload).to_db_dict()

        with store_errors("Submitting contact form"):
            entity = await self.contact_form_repository.insert_contact_form(
                session, ContactFormEntity(**values, submitted_at=utc_now())
            )
            await session.commit()

        self.logger.info(
            "[ContactFormService] contact form submitted. ID: %s", entity.id
        )
        return self.contact_mapper.map_to_contact_form_dto(entity)
