from pydantic import Field
from portfolio.dto.base_request_dto import BaseRequestDto, BaseUpdateRequestDto
from portfolio.dto.field_types import AbsoluteUrl


class PortfolioProjectCreateDto(BaseRequestDto):
    title: str
    description: str
    image_url: AbsoluteUrl | None = None
    demo_url: AbsoluteUrl | None = None
    github_url: AbsoluteUrl | None = None
    technologies: list[str] = Field(default_factory=list)
    display_order: int = 0
    is_featured: bool = False


class PortfolioProjectUpdateDto(BaseUpdateRequestDto):
    non_nullable_fields = frozenset(
        {"title", "description", "technologies", "display_order", "is_featured"}
    )

    title: str | None = None
    description: str | None = None
    image_url: AbsoluteUrl | None = None
    demo_url: AbsoluteUrl | None = None
    github_url: AbsoluteUrl | None = None
    # Replaces the stored list wholesale when present.
    technologies: list[str] | None = None
    display_order: int | None = None
    is_featured: bool | None = None
