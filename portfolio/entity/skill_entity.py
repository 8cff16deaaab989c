from datetime import datetime
from sqlalchemy import DateTime, Integer, String, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column
from portfolio.common.base import Base
from portfolio.common.portfolio_enums import ProficiencyLevel, SkillCategory


class SkillEntity(Base):
    __tablename__ = "skills"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String)

    category: Mapped[SkillCategory] = mapped_column(
        SAEnum(
            SkillCategory,
            name="skill_category",
            values_callable=lambda obj: [e.value for e in obj],
        )
    )

    proficiency_level: Mapped[ProficiencyLevel | None] = mapped_column(
        SAEnum(
            ProficiencyLevel,
            name="proficiency_level",
            values_callable=lambda obj: [e.value for e in obj],
        ),
        nullable=True,
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
