from datetime import datetime
from sqlalchemy import CheckConstraint, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from portfolio.common.base import Base

PERSONAL_INFO_SINGLETON_KEY = 1


class PersonalInfoEntity(Base):
    __tablename__ = "personal_info"
    __table_args__ = (
        CheckConstraint(
            f"singleton_key = {PERSONAL_INFO_SINGLETON_KEY}",
            name="ck_personal_info_singleton_key",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Constant key: the UNIQUE constraint allows at most one row.
    singleton_key: Mapped[int] = mapped_column(
        Integer,
        unique=True,
        nullable=False,
        default=PERSONAL_INFO_SINGLETON_KEY,
    )

    name: Mapped[str] = mapped_column(String)
    email: Mapped[str] = mapped_column(String)
    phone: Mapped[str | None] = mapped_column(String)
    linkedin_url: Mapped[str | None] = mapped_column(String)
    github_url: Mapped[str | None] = mapped_column(String)
    professional_summary: Mapped[str] = mapped_column(Text)
    photo_url: Mapped[str | None] = mapped_column(String)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
