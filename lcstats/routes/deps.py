from fastapi import Request

from lcstats.cache import TTLCache
from lcstats.services.stats import StatsService


def get_stats_service(request: Request) -> StatsService:
    return request.app.state.stats_service


def get_cache(request: Request) -> TTLCache:
    return request.app.state.cache
