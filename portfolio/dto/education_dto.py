from datetime import datetime
from portfolio.dto.base_dto import BaseDto


class EducationDto(BaseDto):
    id: int
    degree: str
    major: str
    institution: str
    start_date: datetime
    end_date: datetime | None = None
    gpa: float | None = None
    is_current: bool
    created_at: datetime
    updated_at: datetime
