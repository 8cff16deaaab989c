from datetime import datetime
from sqlalchemy import DateTime, Integer, String, Text, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column
from portfolio.common.base import Base
from portfolio.common.portfolio_enums import AwardCertificationType


class AwardCertificationEntity(Base):
    __tablename__ = "awards_certifications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String)
    issuer: Mapped[str] = mapped_column(String)
    date_received: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    description: Mapped[str | None] = mapped_column(Text)

    type: Mapped[AwardCertificationType] = mapped_column(
        SAEnum(
            AwardCertificationType,
            name="award_certification_type",
            values_callable=lambda obj: [e.value for e in obj],
        )
    )

    expiry_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    credential_url: Mapped[str | None] = mapped_column(String)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
