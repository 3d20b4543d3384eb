from enum import Enum
from typing import FrozenSet

from pydantic import Field

from backend.venture_matching.models.records import RecordModel


class Stage(str, Enum):
    CONCEPT = "concept"
    MVP = "mvp"
    EARLY = "early"
    GROWTH = "growth"


class IdeaStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    FUNDED = "funded"
    CANCELLED = "cancelled"


class BusinessIdea(RecordModel):
    id: str = Field(min_length=1)
    creator_id: str = Field(min_length=1)
    title: str = ""
    category: str = Field(min_length=1)
    tags: FrozenSet[str] = frozenset()

    funding_goal: float = Field(gt=0)
    equity_offered: float = Field(ge=0, le=100)

    stage: Stage
    status: IdeaStatus
    created_at: float = 0.0

    @property
    def is_published(self):
        return self.status == IdeaStatus.PUBLISHED
