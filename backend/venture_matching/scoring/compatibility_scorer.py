import math

import numpy as np

from backend.venture_matching.config import DEFAULT_WEIGHTS
from backend.venture_matching.exceptions import InvalidArgumentError
from backend.venture_matching.models.business_idea import BusinessIdea
from backend.venture_matching.models.investment_offer import InvestmentOffer
from backend.venture_matching.models.match_result import FACTORS
from backend.venture_matching.models.risk_level import DEFAULT_TOLERANCE, RiskLevel


def round_half_up(value: float) -> int:
    # weighted sums like 92.49999999999999 must round the same as 92.5
    return int(math.floor(round(value, 6) + 0.5))


def clamp(value: float) -> int:
    return max(0, min(100, round_half_up(value)))


class CompatibilityScorer:
    def __init__(self, weights: dict = None):
        weights = dict(DEFAULT_WEIGHTS if weights is None else weights)
        if set(weights) != set(FACTORS):
            raise InvalidArgumentError(f"weights must cover exactly {FACTORS}")
        self.weights = weights
        self._weight_vector = np.array([weights[f] for f in FACTORS], dtype=float)
        if np.any(self._weight_vector < 0) or not np.isclose(self._weight_vector.sum(), 1.0):
            raise InvalidArgumentError("weights must be non-negative and sum to 1.0")

    def amount_compatibility(self, idea: BusinessIdea, offer: InvestmentOffer) -> int:
        """
        100 inside the offer's amount range, bounds included. Outside it the
        score falls off linearly with the ratio between the goal and the
        nearest bound, reaching 0 at half the minimum or twice the maximum.
        """
        goal = idea.funding_goal
        low, high = offer.amount_range.min, offer.amount_range.max
        if low <= goal <= high:
            return 100
        if goal < low:
            ratio = goal / low
        else:
            ratio = high / goal
        return clamp((ratio - 0.5) * 200)

    def industry_alignment(self, idea: BusinessIdea, offer: InvestmentOffer) -> int:
        if not offer.preferred_industries:
            return 100
        return 100 if idea.category.lower() in offer.preferred_industries else 0

    def stage_preference(self, idea: BusinessIdea, offer: InvestmentOffer) -> int:
        if not offer.preferred_stages:
            return 100
        return 100 if idea.stage in offer.preferred_stages else 0

    def risk_alignment(self, idea: BusinessIdea, investor=None) -> int:
        tolerance = getattr(investor, "risk_tolerance", None) or DEFAULT_TOLERANCE
        return RiskLevel.for_stage(idea.stage).credit(RiskLevel(tolerance))

    def overall(self, factors: dict) -> int:
        values = np.array([factors[f] for f in FACTORS], dtype=float)
        return clamp(float(np.dot(self._weight_vector, values)))

    def score(self, idea: BusinessIdea, offer: InvestmentOffer, investor=None) -> dict:
        """
        Score one pair. investor is the offer owner's profile; only its risk
        tolerance is read, a missing profile counts as medium tolerance.
        """
        factors = {
            "amountCompatibility": self.amount_compatibility(idea, offer),
            "industryAlignment": self.industry_alignment(idea, offer),
            "stagePreference": self.stage_preference(idea, offer),
            "riskAlignment": self.risk_alignment(idea, investor),
        }
        factors["overall"] = self.overall(factors)
        return factors
