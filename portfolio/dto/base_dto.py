from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseDto(BaseModel):
    """
    Base for every portfolio response DTO.

    Responses go over the wire with camelCase keys (`createdAt`,
    `isFeatured`, ...) and are built straight from ORM entities by the
    mappers through `model_validate(entity)`.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
