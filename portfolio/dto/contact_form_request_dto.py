from portfolio.dto.base_request_dto import BaseRequestDto
from portfolio.dto.field_types import Email


class ContactFormCreateDto(BaseRequestDto):
    name: str
    email: Email
    subject: str | None = None
    message: str
