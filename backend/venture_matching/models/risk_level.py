from enum import Enum

from backend.venture_matching.models.business_idea import Stage


class RiskTolerance(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# ordered from least to most risk; distance in this tuple is the adjacency
RISK_ORDER = (RiskTolerance.LOW, RiskTolerance.MEDIUM, RiskTolerance.HIGH)
DEFAULT_TOLERANCE = RiskTolerance.MEDIUM

STAGE_RISK = {
    Stage.CONCEPT: RiskTolerance.HIGH,
    Stage.MVP: RiskTolerance.HIGH,
    Stage.EARLY: RiskTolerance.MEDIUM,
    Stage.GROWTH: RiskTolerance.LOW,
}

# credit by distance between implied risk and tolerance
RISK_CREDIT = {0: 100, 1: 50, 2: 0}


class RiskLevel:
    def __init__(self, level):
        self.level = RiskTolerance(level)

    @classmethod
    def for_stage(cls, stage):
        """
        Implied risk of backing an idea at the given stage.
        """
        return cls(STAGE_RISK[Stage(stage)])

    def distance(self, other) -> int:
        return abs(RISK_ORDER.index(self.level) - RISK_ORDER.index(other.level))

    def credit(self, tolerance) -> int:
        return RISK_CREDIT[self.distance(tolerance)]
