from portfolio.dto.base_request_dto import BaseRequestDto, BaseUpdateRequestDto
from portfolio.common.portfolio_enums import ProficiencyLevel, SkillCategory


class SkillCreateDto(BaseRequestDto):
    name: str
    category: SkillCategory
    proficiency_level: ProficiencyLevel | None = None


class SkillUpdateDto(BaseUpdateRequestDto):
    non_nullable_fields = frozenset({"name", "category"})

    name: str | None = None
    category: SkillCategory | None = None
    proficiency_level: ProficiencyLevel | None = None
