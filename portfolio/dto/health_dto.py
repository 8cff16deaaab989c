from portfolio.dto.base_dto import BaseDto


class HealthDto(BaseDto):
    status: str
    timestamp: str
