# -*- coding: utf-8 -*-


# Handles storing suggested matches and moving them through their statuses.

import logging

from backend.venture_matching.exceptions import InvalidArgumentError, InvalidRoleError
from backend.venture_matching.models.user_profile import ROLES

logger = logging.getLogger(__name__)

MATCH_STATUSES = ("suggested", "viewed", "contacted", "negotiating", "invested", "rejected")


class MatchLifecycleManager:

    def __init__(self, db):
        self.db = db

    def record_suggestions(self, results):
        """
        Store results as suggested matches. Pairs that already have a row are
        left alone. Returns how many rows were inserted.
        """
        stored = 0
        seen = set()
        for result in results:
            if result.pair in seen:
                continue
            seen.add(result.pair)
            if self.db.insert_match(result.to_record()) is not None:
                stored += 1
        logger.debug("Stored %d of %d suggested matches", stored, len(seen))
        return stored

    def update_status(self, match_id, status):
        if status not in MATCH_STATUSES:
            raise InvalidArgumentError(f"unknown match status {status!r}")
        return self.db.update_match_status(match_id, status)

    def top_matches_for_idea(self, idea_id, limit=10):
        """Stored matches for an idea, best score first."""
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise InvalidArgumentError(f"limit must be a non-negative integer, got {limit!r}")
        return self.db.fetch_top_matches_for_idea(idea_id, limit)

    def matches_by_status(self, status):
        if status not in MATCH_STATUSES:
            raise InvalidArgumentError(f"unknown match status {status!r}")
        return self.db.fetch_matches_by_status(status)

    def matches_for_user(self, user_id, role):
        if role not in ROLES:
            raise InvalidRoleError(role)
        return self.db.fetch_matches_for_user(user_id, role)
