from portfolio.dto.base_request_dto import BaseRequestDto, BaseUpdateRequestDto
from portfolio.dto.field_types import AbsoluteUrl, Instant
from portfolio.common.portfolio_enums import AwardCertificationType


class AwardCertificationCreateDto(BaseRequestDto):
    title: str
    issuer: str
    date_received: Instant
    description: str | None = None
    type: AwardCertificationType
    expiry_date: Instant | None = None
    credential_url: AbsoluteUrl | None = None


class AwardCertificationUpdateDto(BaseUpdateRequestDto):
    non_nullable_fields = frozenset({"title", "issuer", "date_received", "type"})

    title: str | None = None
    issuer: str | None = None
    date_received: Instant | None = None
    description: str | None = None
    type: AwardCertificationType | None = None
    expiry_date: Instant | None = None
    credential_url: AbsoluteUrl | None = None
