import datetime as dt
from enum import Enum
from pydantic import BaseModel, ConfigDict
from typing import Optional


class AchievementCategory(str, Enum):
    SCORING = "scoring"
    MILESTONES = "milestones"
    COURSES = "courses"
    CONSISTENCY = "consistency"


class AchievementDefinition(BaseModel):
    """Static catalog entry describing an achievement badge."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    icon: str
    category: AchievementCategory


class Achievement(BaseModel):
    """Catalog entry paired with its unlock state for one golfer."""
    id: str
    name: str
    description: str
    icon: str
    category: AchievementCategory
    unlocked: bool = False
    unlocked_date: Optional[dt.date] = None

    @classmethod
    def from_definition(
        cls,
        definition: AchievementDefinition,
        unlocked: bool = False,
        unlocked_date: Optional[dt.date] = None,
    ) -> "Achievement":
        return cls(
            id=definition.id,
            name=definition.name,
            description=definition.description,
            icon=definition.icon,
            category=definition.category,
            unlocked=unlocked,
            unlocked_date=unlocked_date,
        )


class AchievementSummary(BaseModel):
    total: int
    unlocked: int
    percentage: int
