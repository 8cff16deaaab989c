from datetime import datetime
from portfolio.dto.base_dto import BaseDto
from portfolio.common.portfolio_enums import AwardCertificationType


class AwardCertificationDto(BaseDto):
    id: int
    title: str
    issuer: str
    date_received: datetime
    description: str | None = None
    type: AwardCertificationType
    expiry_date: datetime | None = None
    credential_url: str | None = None
    created_at: datetime
    updated_at: datetime
