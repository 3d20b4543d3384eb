import logging

from backend.venture_matching.analytics.match_statistics import summarize
from backend.venture_matching.config import MIN_MATCH_SCORE
from backend.venture_matching.exceptions import InvalidArgumentError, InvalidRoleError
from backend.venture_matching.match_pool.candidate_pool import CandidatePool
from backend.venture_matching.models.match_result import FACTORS, MatchResult
from backend.venture_matching.models.user_profile import CREATOR, INVESTOR, ROLES
from backend.venture_matching.scoring.compatibility_scorer import CompatibilityScorer

logger = logging.getLogger(__name__)


def _check_limit(limit):
    if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 0):
        raise InvalidArgumentError(f"limit must be a non-negative integer, got {limit!r}")


class MatchMakerEngine:
    """
    Scores and ranks ideas against offers for one snapshot of the data.

    An engine holds no state beyond its pool, so build a new one for every
    refresh instead of reusing an old instance against new data.
    """

    def __init__(self, pool: CandidatePool, scorer: CompatibilityScorer = None, min_score: int = None):
        self.pool = pool
        self.scorer = scorer or CompatibilityScorer()
        self.min_score = MIN_MATCH_SCORE if min_score is None else min_score

    @classmethod
    def from_records(cls, profiles, ideas, offers, existing_pairs=None, **kwargs):
        return cls(CandidatePool(profiles, ideas, offers, existing_pairs), **kwargs)

    def find_matches(self, user_id, role, limit=None):
        """
        Generate ranked matches for a given user
        """
        if role not in ROLES:
            raise InvalidRoleError(role)
        _check_limit(limit)

        user = self.pool.get_user(user_id)
        if user is None:
            logger.warning("No profile for user %s, returning no matches", user_id)
            return []
        if user.role != role:
            logger.warning("User %s is a %s, not a %s", user_id, user.role.value, role)
            return []

        scored = []
        if role == CREATOR:
            for idea in self.pool.ideas_for(user.id):
                scored.extend(self._offers_for(idea))
        else:
            for offer in self.pool.offers_for(user.id):
                scored.extend(self._ideas_for(offer, user))
        return self._rank(scored, limit)

    def find_matches_for_idea(self, idea_id, limit=None):
        """Ranked offers for one published idea."""
        _check_limit(limit)
        idea = self.pool.ideas.get(idea_id)
        if idea is None:
            logger.warning("Idea %s is unknown or not published, returning no matches", idea_id)
            return []
        if self._owner(idea.creator_id, CREATOR, None) is None:
            logger.warning("Idea %s has no creator profile, returning no matches", idea_id)
            return []
        return self._rank(self._offers_for(idea), limit)

    def find_matches_for_offer(self, offer_id, limit=None):
        """Ranked ideas for one active offer."""
        _check_limit(limit)
        offer = self.pool.offers.get(offer_id)
        if offer is None:
            logger.warning("Offer %s is unknown or inactive, returning no matches", offer_id)
            return []
        investor = self._owner(offer.investor_id, INVESTOR, None)
        if investor is None:
            logger.warning("Offer %s has no investor profile, returning no matches", offer_id)
            return []
        return self._rank(self._ideas_for(offer, investor), limit)

    def get_statistics(self, user_id, role):
        return summarize(self.find_matches(user_id, role))

    def _offers_for(self, idea):
        scored = []
        for offer in self.pool.offers.values():
            investor = self._owner(offer.investor_id, INVESTOR, idea.creator_id)
            if investor is None or self.pool.is_matched(idea.id, offer.id):
                continue
            result = self._score(idea, offer, investor)
            if result is not None:
                key = (-result.match_score, -offer.created_at, -idea.created_at, offer.id, idea.id)
                scored.append((key, result))
        return scored

    def _ideas_for(self, offer, investor):
        scored = []
        for idea in self.pool.ideas.values():
            creator = self._owner(idea.creator_id, CREATOR, offer.investor_id)
            if creator is None or self.pool.is_matched(idea.id, offer.id):
                continue
            result = self._score(idea, offer, investor)
            if result is not None:
                key = (-result.match_score, -idea.created_at, -offer.created_at, idea.id, offer.id)
                scored.append((key, result))
        return scored

    def _rank(self, scored, limit):
        scored.sort(key=lambda item: item[0])
        results = [result for _, result in scored]
        logger.debug("%d matches at or above %d", len(results), self.min_score)
        if limit is not None:
            results = results[:limit]
        return results

    def _owner(self, owner_id, role, requester_id):
        # the requester's own records are never candidates
        if owner_id == requester_id:
            return None
        owner = self.pool.get_user(owner_id)
        if owner is None or owner.role != role:
            return None
        return owner

    def _score(self, idea, offer, investor):
        factors = self.scorer.score(idea, offer, investor)
        overall = factors.pop("overall")
        if overall < self.min_score:
            return None
        return MatchResult(idea, offer, overall, {f: factors[f] for f in FACTORS})
