from portfolio.dto.base_request_dto import BaseRequestDto, BaseUpdateRequestDto
from portfolio.dto.field_types import Instant


class WorkExperienceCreateDto(BaseRequestDto):
    company: str
    title: str
    start_date: Instant
    end_date: Instant | None = None
    responsibilities: str
    is_current: bool = False


class WorkExperienceUpdateDto(BaseUpdateRequestDto):
    non_nullable_fields = frozenset(
        {"company", "title", "start_date", "responsibilities", "is_current"}
    )

    company: str | None = None
    title: str | None = None
    start_date: Instant | None = None
    end_date: Instant | None = None
    responsibilities: str | None = None
    is_current: bool | None = None
