import psycopg2
from psycopg2.extras import Json

from backend.venture_matching import config
from backend.venture_matching.models.user_profile import CREATOR

MATCH_COLUMNS = ("id", "idea_id", "offer_id", "creator_id", "investor_id", "match_score",
                 "matching_factors", "status", "created_at", "updated_at")
_MATCH_SELECT = ", ".join(MATCH_COLUMNS)


class DatabaseInterface:
    def __init__(self, conn=None):
        self.conn = conn or psycopg2.connect(**config.PG_SETTINGS)
        self.conn.autocommit = True
        self.cur = self.conn.cursor()

    def fetch_existing_pairs(self, user_id=None):
        """
        (idea_id, offer_id) pairs already stored, for one user on either side
        or for everyone when user_id is None.
        """
        if user_id is None:
            self.cur.execute("SELECT idea_id, offer_id FROM matches")
        else:
            self.cur.execute("""
                SELECT idea_id, offer_id FROM matches
                WHERE creator_id = %s OR investor_id = %s
            """, (user_id, user_id))
        return {(str(idea_id), str(offer_id)) for idea_id, offer_id in self.cur.fetchall()}

    def insert_match(self, record):
        self.cur.execute("""
            INSERT INTO matches (idea_id, offer_id, creator_id, investor_id,
                                 match_score, matching_factors, status, created_at, updated_at)
            VALUES (%s, %s, %s, %s, %s, %s, %s, NOW(), NOW())
            ON CONFLICT (idea_id, offer_id) DO NOTHING
            RETURNING id
        """, (record["idea_id"], record["offer_id"], record["creator_id"], record["investor_id"],
              record["match_score"], Json(record["matching_factors"]), record["status"]))
        row = self.cur.fetchone()
        return row[0] if row else None

    def fetch_top_matches_for_idea(self, idea_id, limit=10):
        self.cur.execute(f"""
            SELECT {_MATCH_SELECT} FROM matches
            WHERE idea_id = %s
            ORDER BY match_score DESC, created_at DESC
            LIMIT %s
        """, (idea_id, limit))
        return self._rows()

    def fetch_matches_by_status(self, status):
        self.cur.execute(f"""
            SELECT {_MATCH_SELECT} FROM matches
            WHERE status = %s
            ORDER BY match_score DESC, created_at DESC
        """, (status,))
        return self._rows()

    def fetch_matches_for_user(self, user_id, role):
        column = "creator_id" if role == CREATOR else "investor_id"
        self.cur.execute(f"""
            SELECT {_MATCH_SELECT} FROM matches
            WHERE {column} = %s
            ORDER BY created_at DESC
        """, (user_id,))
        return self._rows()

    def _rows(self):
        return [dict(zip(MATCH_COLUMNS, row)) for row in self.cur.fetchall()]

    def update_match_status(self, match_id, status):
        self.cur.execute("""
            UPDATE matches SET status = %s, updated_at = NOW()
            WHERE id = %s
        """, (status, match_id))
        return self.cur.rowcount

    def close(self):
        self.cur.close()
        self.conn.close()
