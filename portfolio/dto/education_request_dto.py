from portfolio.dto.base_request_dto import BaseRequestDto, BaseUpdateRequestDto
from portfolio.dto.field_types import Instant


class EducationCreateDto(BaseRequestDto):
    degree: str
    major: str
    institution: str
    start_date: Instant
    end_date: Instant | None = None
    gpa: float | None = None
    is_current: bool = False


class EducationUpdateDto(BaseUpdateRequestDto):
    non_nullable_fields = frozenset(
        {"degree", "major", "institution", "start_date", "is_current"}
    )

    degree: str | None = None
    major: str | None = None
    institution: str | None = None
    start_date: Instant | None = None
    end_date: Instant | None = None
    gpa: float | None = None
    is_current: bool | None = None
