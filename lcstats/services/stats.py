# lcstats/services/stats.py
import logging
from datetime import datetime, timezone
from typing import Callable

import httpx

from lcstats.cache import TTLCache, key
from lcstats.config import RECENT_SUBMISSIONS_LIMIT
from lcstats.errors import UpstreamError
from lcstats.models import StatsSummary
from lcstats.services.windows import count_solved_in_windows
from lcstats.upstream.leetcode import fetch_profile, fetch_recent_submissions
from lcstats.upstream.queries import USER_PROFILE_OPERATION

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StatsService:
    """
    cache -> profil -> ostatnie submissiony -> okna czasowe -> cache.

    Cache, klient HTTP i zegar wstrzykiwane z main.py (startup) albo z testów.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        cache: TTLCache,
        *,
        now: Callable[[], datetime] = _utcnow,
        submissions_limit: int = RECENT_SUBMISSIONS_LIMIT,
    ) -> None:
        self.client = client
        self.cache = cache
        self._now = now
        self.submissions_limit = submissions_limit

    async def get_stats(self, username: str) -> StatsSummary:
        ck = key("stats", username)
        cached = await self.cache.get(ck)
        if cached is not None:
            return cached

        logger.info("CACHE MISS: %s", ck)

        # UserNotFound / UpstreamError lecą dalej, bez zapisu do cache
        profile = await fetch_profile(self.client, username)

        # TODO: upstream ma wiersz "All" w acSubmissionNum; szukać po etykiecie zamiast brać [0]
        if not profile.accepted_counts:
            raise UpstreamError(USER_PROFILE_OPERATION, "empty acSubmissionNum")
        total_solved = profile.accepted_counts[0].count

        submissions = await fetch_recent_submissions(self.client, username, limit=self.submissions_limit)
        windows = count_solved_in_windows(submissions, now=self._now())

        summary = StatsSummary(
            username=username,
            total_solved=total_solved,
            ranking=profile.ranking,
            solved_last_day=windows.daily,
            solved_last_week=windows.weekly,
            solved_last_month=windows.monthly,
        )

        await self.cache.set(ck, summary)
        return summary
