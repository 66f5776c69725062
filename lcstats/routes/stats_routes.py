from fastapi import APIRouter, Depends

from lcstats.routes.deps import get_stats_service
from lcstats.schemas import ErrorResponse, StatsSummaryResponse
from lcstats.services.stats import StatsService

router = APIRouter()


@router.get(
    "/stats/{username}",
    response_model=StatsSummaryResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_stats(username: str, service: StatsService = Depends(get_stats_service)):
    summary = await service.get_stats(username)
    return summary.to_dict()
