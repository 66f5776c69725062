import os

def env(name: str, default: str = "") -> str:
    val = os.getenv(name, default)
    if val == "" and default == "":
        raise RuntimeError(f"Missing env var: {name}")
    return val

HOST = env("HOST", "0.0.0.0")
PORT = int(env("PORT", "3000"))

LEETCODE_GRAPHQL_URL = env("LEETCODE_GRAPHQL_URL", "https://leetcode.com/graphql")
UPSTREAM_TIMEOUT = float(env("UPSTREAM_TIMEOUT", "5.0"))

STATS_CACHE_TTL = int(env("STATS_CACHE_TTL", "3600"))
RECENT_SUBMISSIONS_LIMIT = int(env("RECENT_SUBMISSIONS_LIMIT", "1000"))

CORS_ORIGINS = [o.strip() for o in env("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_DIR = env("LOG_DIR", "logs")
LOG_LEVEL = env("LOG_LEVEL", "INFO").upper()
