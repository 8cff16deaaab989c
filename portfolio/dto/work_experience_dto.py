from datetime import datetime
from portfolio.dto.base_dto import BaseDto


class WorkExperienceDto(BaseDto):
    id: int
    company: str
    title: str
    start_date: datetime
    end_date: datetime | None = None
    responsibilities: str
    is_current: bool
    created_at: datetime
    updated_at: datetime
