from portfolio.dto.portfolio_project_dto import PortfolioProjectDto
from portfolio.entity.portfolio_project_entity import PortfolioProjectEntity


class ProjectMapper:
    """
    Mapper for converting portfolio project entities to DTOs.

    `technologies` is already decoded into a list by the column type, so a
    project without technologies maps to an empty list, never None.
    """

    def map_to_portfolio_project_dto(
        self, entity: PortfolioProjectEntity
    ) -> PortfolioProjectDto:
        return PortfolioProjectDto(
            id=entity.id,
            title=entity.title,
            description=entity.description,
            image_url=entity.image_url,
            demo_url=entity.demo_url,
            github_url=entity.github_url,
            technologies=list(entity.technologies or []),
            display_order=entity.display_order,
            is_featured=entity.is_featured,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def map_to_portfolio_project_dtos(
        self, entities: list[PortfolioProjectEntity]
    ) -> list[PortfolioProjectDto]:
        """Maps a list of PortfolioProjectEntity objects, keeping their order."""
        return [self.map_to_portfolio_project_dto(e) for e in entities]
