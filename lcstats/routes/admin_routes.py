from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from lcstats.cache import TTLCache
from lcstats.routes.deps import get_cache
from lcstats.upstream.metrics import snapshot

router = APIRouter(prefix="/admin")

@router.get("/metrics.json")
async def metrics_json():
    return JSONResponse(await snapshot())

@router.get("/cache.json")
async def cache_json(cache: TTLCache = Depends(get_cache)):
    return await cache.snapshot()
