from typing import FrozenSet, Optional

from pydantic import Field, field_validator

from backend.venture_matching.models.business_idea import Stage
from backend.venture_matching.models.records import Range, RecordModel, none_if_invalid


class InvestmentOffer(RecordModel):
    id: str = Field(min_length=1)
    investor_id: str = Field(min_length=1)
    title: str = ""
    amount_range: Range

    # equity bounds are carried for the caller, they are not scored
    preferred_equity: Optional[Range] = None

    preferred_stages: FrozenSet[Stage] = frozenset()
    preferred_industries: FrozenSet[str] = frozenset()

    is_active: bool = False
    created_at: float = 0.0

    @field_validator("preferred_equity", mode="wrap")
    @classmethod
    def _lenient_equity(cls, value, handler, info):
        return none_if_invalid(value, handler, info)
