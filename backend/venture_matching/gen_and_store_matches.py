import logging

import psycopg2

from backend.venture_matching import config
from backend.venture_matching.exceptions import MatchingError
from backend.venture_matching.interfaces.db_interface import DatabaseInterface
from backend.venture_matching.interfaces.supabase_feed import SupabaseFeed
from backend.venture_matching.lifecycle.match_lifecycle import MatchLifecycleManager
from backend.venture_matching.match_pool.candidate_pool import CandidatePool
from backend.venture_matching.matchmaker_engine import MatchMakerEngine

logger = logging.getLogger(__name__)


def main(feed=None, db=None, limit=None):
    """
    Match every eligible user against a fresh snapshot and store the new
    suggestions.
    """
    feed = feed or SupabaseFeed()
    owns_db = db is None
    db = db or DatabaseInterface()
    limit = config.DEFAULT_LIMIT if limit is None else limit

    summary = {"users": 0, "stored": 0, "failed": 0}
    try:
        profiles, ideas, offers = feed.load_snapshot()
        pool = CandidatePool(profiles, ideas, offers, db.fetch_existing_pairs())
        engine = MatchMakerEngine(pool)
        lifecycle = MatchLifecycleManager(db)

        for user_id, user in pool.users.items():
            if not pool.is_eligible(user_id):
                continue
            summary["users"] += 1
            try:
                results = engine.find_matches(user_id, user.role, limit)
                summary["stored"] += lifecycle.record_suggestions(results)
            except (MatchingError, ValueError, psycopg2.Error) as e:
                summary["failed"] += 1
                logger.error("Matching user %s failed: %s", user_id, e)
    finally:
        if owns_db:
            db.close()

    logger.info("Matched %(users)d users, stored %(stored)d suggestions, %(failed)d failures", summary)
    return summary


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    main()
