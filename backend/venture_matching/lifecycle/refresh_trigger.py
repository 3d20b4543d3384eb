"""
Pull-based refresh of match results.

The engine never watches the data itself. Whoever knows that something changed
(a timer, a database change callback) calls into a RefreshTrigger, which pulls
a fresh snapshot from the feed, builds a new engine and rescores from scratch.
"""
import logging

from pydantic.alias_generators import to_camel

from backend.venture_matching.config import DEFAULT_LIMIT
from backend.venture_matching.matchmaker_engine import MatchMakerEngine
from backend.venture_matching.models.user_profile import CREATOR, INVESTOR

logger = logging.getLogger(__name__)

# table -> (owner column, role of the owner)
OWNED_TABLES = {
    "business_ideas": ("creator_id", CREATOR),
    "investment_offers": ("investor_id", INVESTOR),
}


class RefreshTrigger:
    def __init__(self, feed, engine_factory=MatchMakerEngine.from_records, limit=DEFAULT_LIMIT):
        self.feed = feed
        self.engine_factory = engine_factory
        self.limit = limit
        self._listeners = []

    def subscribe(self, callback):
        """callback(user_id, role, results) runs after every refresh."""
        self._listeners.append(callback)

    def refresh(self, user_id, role, limit=None):
        profiles, ideas, offers = self.feed.load_snapshot()
        engine = self.engine_factory(profiles, ideas, offers)
        results = engine.find_matches(user_id, role, self.limit if limit is None else limit)
        for callback in self._listeners:
            callback(user_id, role, results)
        return results

    def on_change(self, table, record):
        """
        Refresh the owner of a changed idea or offer. Changes to other tables
        don't affect anyone's candidate set and are ignored.
        """
        if table not in OWNED_TABLES:
            logger.debug("Ignoring change on %s", table)
            return None
        owner_column, role = OWNED_TABLES[table]
        record = record or {}
        owner_id = record.get(owner_column) or record.get(to_camel(owner_column))
        if owner_id is None:
            logger.warning("Change on %s without %s, nothing to refresh", table, owner_column)
            return None
        return self.refresh(str(owner_id), role)
