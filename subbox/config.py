import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    GOOGLE_CLIENT_ID = os.getenv("GOOGLE_CLIENT_ID")
    GOOGLE_CLIENT_SECRET = os.getenv("GOOGLE_CLIENT_SECRET")
    TOKEN_URI = "https://oauth2.googleapis.com/token"
    # Subscriptions are read on behalf of the user, everything else with the API key
    SCOPES = [
        "https://www.googleapis.com/auth/youtube.readonly"
    ]
    YOUTUBE_API_KEY = os.getenv("YOUTUBE_API_KEY")

    # Upper bound for subscription enumeration (enforced per page, see fetch_all_subscriptions)
    MAX_SUBSCRIPTIONS = int(os.getenv("MAX_SUBSCRIPTIONS", "200"))
    FEED_RESULT_LIMIT = int(os.getenv("FEED_RESULT_LIMIT", "100"))
    FEED_CONCURRENCY = int(os.getenv("FEED_CONCURRENCY", "5"))

    # Socket timeout in seconds for a single upstream call
    UPSTREAM_TIMEOUT = float(os.getenv("UPSTREAM_TIMEOUT", "30"))

    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "3000"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "info")

settings = Settings()
