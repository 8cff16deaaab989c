from collections.abc import Mapping
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from portfolio.common.errors import ValidationError
from portfolio.common.logger import get_logger

logger = get_logger()

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_payload(model_cls: type[ModelT], payload: ModelT | Mapping) -> ModelT:
    """
    Validate a payload against a request DTO class.

    DTO instances are returned as-is because they were validated on
    construction; mappings are validated into a new DTO.

    Args:
        model_cls (type[BaseModel]): The request DTO class.
        payload (BaseModel | Mapping): The DTO instance or raw mapping.

    Returns:
        BaseModel: The validated DTO.

    Raises:
        ValidationError: If the mapping does not satisfy the DTO schema.
    """
    if isinstance(payload, model_cls):
        return payload

    try:
        return model_cls.model_validate(payload)
    except PydanticValidationError as e:
        errors = [
            {
                "field": ".".join(str(part) for part in error["loc"]),
                "message": error["msg"],
            }
            for error in e.errors()
        ]
        logger.warning(
            "Validation failed for %s: %s", model_cls.__name__, errors
        )
        first = errors[0] if errors else {"field": "", "message": "invalid payload"}
        raise ValidationError(
            f"Validation Error: {first['field']} - {first['message']}", errors
        ) from e
