from portfolio.dto.base_request_dto import BaseRequestDto
from portfolio.dto.field_types import AbsoluteUrl, Email


class PersonalInfoRequestDto(BaseRequestDto):
    """
    Full replacement payload for the personal info singleton.

    Nullable fields must still be sent (as null) so that every write
    overwrites the whole record.
    """

    name: str
    email: Email
    phone: str | None
    linkedin_url: AbsoluteUrl | None
    github_url: AbsoluteUrl | None
    professional_summary: str
    photo_url: AbsoluteUrl | None
