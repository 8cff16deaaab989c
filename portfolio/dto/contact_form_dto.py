from datetime import datetime
from portfolio.dto.base_dto import BaseDto


class ContactFormDto(BaseDto):
    id: int
    name: str
    email: str
    subject: str | None = None
    message: str
    submitted_at: datetime
