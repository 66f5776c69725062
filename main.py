from __future__ import annotations
from dotenv import load_dotenv
load_dotenv()
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lcstats.cache import TTLCache
from lcstats.config import CORS_ORIGINS, HOST, PORT, STATS_CACHE_TTL
from lcstats.core.logging import setup_logging
from lcstats.routes import admin_routes, stats_routes
from lcstats.routes.errors import register_error_handlers
from lcstats.services.stats import StatsService
from lcstats.upstream.client import create_client

logger = logging.getLogger(__name__)


# --- one AsyncClient + one cache per process ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    client = create_client()
    cache = TTLCache(ttl=STATS_CACHE_TTL)
    app.state.http_client = client
    app.state.cache = cache
    app.state.stats_service = StatsService(client, cache)
    logger.info("Server running on http://%s:%s", HOST, PORT)
    try:
        yield
    finally:
        await client.aclose()


app = FastAPI(title="LeetCode Stats API", lifespan=lifespan)

register_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(stats_routes.router)
app.include_router(admin_routes.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=HOST, port=PORT)
