SUGGESTED = "suggested"

FACTORS = ("amountCompatibility", "industryAlignment", "stagePreference", "riskAlignment")


class MatchResult:
    """
    A scored (idea, offer) pairing. Engine output only; persisting it is up
    to the caller, see to_record().
    """

    def __init__(self, idea, offer, match_score: int, matching_factors: dict):
        self.idea = idea
        self.offer = offer
        self.match_score = match_score
        self.matching_factors = matching_factors

    @property
    def pair(self):
        return self.idea.id, self.offer.id

    def to_record(self, status=SUGGESTED):
        return {
            "idea_id": self.idea.id,
            "offer_id": self.offer.id,
            "creator_id": self.idea.creator_id,
            "investor_id": self.offer.investor_id,
            "match_score": self.match_score,
            "matching_factors": dict(self.matching_factors),
            "status": status,
        }

    def __eq__(self, other):
        if not isinstance(other, MatchResult):
            return NotImplemented
        return (self.pair == other.pair
                and self.match_score == other.match_score
                and self.matching_factors == other.matching_factors)

    def __hash__(self):
        return hash((self.pair, self.match_score))

    def __repr__(self):
        return f"MatchResult(idea={self.idea.id!r}, offer={self.offer.id!r}, score={self.match_score})"
