from datetime import datetime
from portfolio.dto.base_dto import BaseDto
from portfolio.common.portfolio_enums import ProficiencyLevel, SkillCategory


class SkillDto(BaseDto):
    id: int
    name: str
    category: SkillCategory
    proficiency_level: ProficiencyLevel | None = None
    created_at: datetime
    updated_at: datetime
