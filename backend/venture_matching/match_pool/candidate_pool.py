import logging
from collections import defaultdict

from pydantic import ValidationError

from backend.venture_matching.models.business_idea import BusinessIdea
from backend.venture_matching.models.investment_offer import InvestmentOffer
from backend.venture_matching.models.records import validation_summary
from backend.venture_matching.models.user_profile import UserProfile

logger = logging.getLogger(__name__)


def _build(cls, records, kind):
    built = []
    for data in records or []:
        if isinstance(data, cls):
            built.append(data)
            continue
        if not isinstance(data, dict):
            logger.warning("Skipping %s record of type %s", kind, type(data).__name__)
            continue
        try:
            built.append(cls.model_validate(data))
        except ValidationError as e:
            logger.warning("Skipping invalid %s record %s: %s",
                           kind, data.get("id") or data.get("_id"), validation_summary(e))
    return built


class CandidatePool:
    """
    In-memory working set for one matching run.

    Takes the three raw collections, turns them into value objects and
    indexes them by id and by owner. Records that fail validation are logged
    and left out. Drafts and inactive offers are dropped here as well.
    """

    def __init__(self, profiles, ideas, offers, existing_pairs=None):
        self.users = {}
        for profile in _build(UserProfile, profiles, "user"):
            if profile.id in self.users:
                logger.warning("Duplicate user %s, keeping the first record", profile.id)
                continue
            self.users[profile.id] = profile

        self.ideas = {}
        self.ideas_by_creator = defaultdict(list)
        for idea in _build(BusinessIdea, ideas, "idea"):
            if not idea.is_published or idea.id in self.ideas:
                continue
            self.ideas[idea.id] = idea
            self.ideas_by_creator[idea.creator_id].append(idea)

        self.offers = {}
        self.offers_by_investor = defaultdict(list)
        for offer in _build(InvestmentOffer, offers, "offer"):
            if not offer.is_active or offer.id in self.offers:
                continue
            self.offers[offer.id] = offer
            self.offers_by_investor[offer.investor_id].append(offer)

        self.existing_pairs = frozenset(existing_pairs or ())

        logger.debug("Loaded pool: %d users, %d ideas, %d offers",
                     len(self.users), len(self.ideas), len(self.offers))

    def get_user(self, user_id):
        return self.users.get(user_id)

    def ideas_for(self, creator_id):
        return list(self.ideas_by_creator.get(creator_id, ()))

    def offers_for(self, investor_id):
        return list(self.offers_by_investor.get(investor_id, ()))

    def is_eligible(self, user_id):
        """
        A creator needs a published idea and an investor an active offer
        before anything can be matched for them.
        """
        user = self.get_user(user_id)
        if user is None:
            return False
        if user.is_creator:
            return bool(self.ideas_by_creator.get(user_id))
        return bool(self.offers_by_investor.get(user_id))

    def is_matched(self, idea_id, offer_id):
        return (idea_id, offer_id) in self.existing_pairs
