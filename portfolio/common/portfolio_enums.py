from enum import Enum


class SkillCategory(str, Enum):
    TECHNICAL = "technical"
    SOFT = "soft"


class ProficiencyLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class AwardCertificationType(str, Enum):
    AWARD = "award"
    CERTIFICATION = "certification"
