from datetime import datetime
from portfolio.dto.base_dto import BaseDto


class PersonalInfoDto(BaseDto):
    id: int
    name: str
    email: str
    professional_summary: str
    phone: str | None = None
    linkedin_url: str | None = None
    github_url: str | None = None
    photo_url: str | None = None
    created_at: datetime
    updated_at: datetime
