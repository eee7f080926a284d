import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    # Vercel KV exposes its redis URL as KV_URL.
    REDIS_URL = os.getenv("REDIS_URL") or os.getenv(
        "KV_URL", "redis://localhost:6379/0"
    )

    CORS_ALLOW_ORIGIN = os.getenv("CORS_ALLOW_ORIGIN", "*")
    CORS_ALLOW_METHODS = os.getenv("CORS_ALLOW_METHODS", "GET, POST, OPTIONS")
    CORS_ALLOW_HEADERS = os.getenv("CORS_ALLOW_HEADERS", "Content-Type")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
