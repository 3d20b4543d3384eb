import logging

from supabase import create_client, Client

from backend.venture_matching import config

logger = logging.getLogger(__name__)

USERS_TABLE = "users"
IDEAS_TABLE = "business_ideas"
OFFERS_TABLE = "investment_offers"


class SupabaseFeed:
    """
    Reads the three input collections for a matching run. Only published
    ideas and active offers are requested.
    """

    def __init__(self, client: Client = None):
        if client is None:
            if not config.SUPABASE_URL or not config.SUPABASE_KEY:
                raise RuntimeError("SUPABASE_URL and SUPABASE_KEY must be set")
            client = create_client(config.SUPABASE_URL, config.SUPABASE_KEY)
        self.client = client

    def fetch_profiles(self):
        return self.client.table(USERS_TABLE).select("*").execute().data or []

    def fetch_published_ideas(self):
        return (self.client.table(IDEAS_TABLE).select("*")
                .eq("status", "published").execute().data or [])

    def fetch_active_offers(self):
        return (self.client.table(OFFERS_TABLE).select("*")
                .eq("is_active", True).execute().data or [])

    def load_snapshot(self):
        profiles = self.fetch_profiles()
        ideas = self.fetch_published_ideas()
        offers = self.fetch_active_offers()
        logger.info("Fetched snapshot: %d profiles, %d ideas, %d offers",
                    len(profiles), len(ideas), len(offers))
        return profiles, ideas, offers
