import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_KEY")

PG_SETTINGS = {
    "dbname": os.getenv("PG_DB"),
    "user": os.getenv("PG_USER"),
    "password": os.getenv("PG_PASSWORD"),
    "host": os.getenv("PG_HOST"),
}

MIN_MATCH_SCORE = int(os.getenv("MATCH_MIN_SCORE", "40"))
DEFAULT_LIMIT = int(os.getenv("MATCH_DEFAULT_LIMIT", "10"))
LOG_LEVEL = os.getenv("MATCH_LOG_LEVEL", "INFO")

DEFAULT_WEIGHTS = {
    "amountCompatibility": float(os.getenv("MATCH_WEIGHT_AMOUNT", "0.35")),
    "industryAlignment": float(os.getenv("MATCH_WEIGHT_INDUSTRY", "0.30")),
    "stagePreference": float(os.getenv("MATCH_WEIGHT_STAGE", "0.20")),
    "riskAlignment": float(os.getenv("MATCH_WEIGHT_RISK", "0.15")),
}
