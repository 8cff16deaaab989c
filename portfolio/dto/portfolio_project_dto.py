from datetime import datetime
from pydantic import Field
from portfolio.dto.base_dto import BaseDto


class PortfolioProjectDto(BaseDto):
    id: int
    title: str
    description: str
    image_url: str | None = None
    demo_url: str | None = None
    github_url: str | None = None
    technologies: list[str] = Field(default_factory=list)
    display_order: int
    is_featured: bool
    created_at: datetime
    updated_at: datetime
