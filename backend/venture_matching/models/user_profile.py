from enum import Enum
from typing import FrozenSet, Optional

from pydantic import AliasChoices, Field, field_validator

from backend.venture_matching.models.records import Range, RecordModel, none_if_invalid
from backend.venture_matching.models.risk_level import RiskTolerance


class Role(str, Enum):
    CREATOR = "creator"
    INVESTOR = "investor"


CREATOR = Role.CREATOR
INVESTOR = Role.INVESTOR
ROLES = (CREATOR, INVESTOR)


class UserProfile(RecordModel):
    id: str = Field(min_length=1)
    role: Role = Field(validation_alias=AliasChoices("user_type", "userType", "role"))
    name: str = ""
    created_at: float = 0.0

    # creator fields
    industry: str = ""
    experience: str = ""

    # investor fields
    investment_range: Optional[Range] = None
    preferred_industries: FrozenSet[str] = frozenset()
    risk_tolerance: Optional[RiskTolerance] = None

    @field_validator("investment_range", mode="wrap")
    @classmethod
    def _lenient_range(cls, value, handler, info):
        # not scored; a malformed range is dropped and the profile kept
        return none_if_invalid(value, handler, info)

    @property
    def is_creator(self):
        return self.role == Role.CREATOR

    @property
    def is_investor(self):
        return self.role == Role.INVESTOR
