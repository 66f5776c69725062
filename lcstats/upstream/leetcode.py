# lcstats/upstream/leetcode.py
import logging
from typing import Any, Dict, List

import httpx

from lcstats.config import RECENT_SUBMISSIONS_LIMIT
from lcstats.errors import UpstreamError, UserNotFound
from lcstats.models import DifficultyCount, SubmissionRecord, UserProfile
from lcstats.upstream.client import graphql_request
from lcstats.upstream.queries import (
    RECENT_SUBMISSIONS_OPERATION,
    RECENT_SUBMISSIONS_QUERY,
    USER_PROFILE_OPERATION,
    USER_PROFILE_QUERY,
)

logger = logging.getLogger(__name__)


def _difficulty_counts(rows: Any) -> List[DifficultyCount]:
    if not isinstance(rows, list):
        raise TypeError(f"expected a list of difficulty rows, got {type(rows).__name__}")
    return [
        DifficultyCount(
            difficulty=str(row["difficulty"]),
            count=int(row["count"]),
            submissions=int(row.get("submissions") or 0),
        )
        for row in rows
    ]


def parse_profile(username: str, data: Dict[str, Any]) -> UserProfile:
    matched = data.get("matchedUser")
    if not matched:
        raise UserNotFound(username)

    try:
        ranking = (matched.get("profile") or {}).get("ranking")
        return UserProfile(
            username=matched.get("username") or username,
            ranking=int(ranking) if ranking is not None else None,
            accepted_counts=_difficulty_counts(matched["submitStats"]["acSubmissionNum"]),
            all_questions_count=_difficulty_counts(data.get("allQuestionsCount") or []),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise UpstreamError(USER_PROFILE_OPERATION, f"malformed matchedUser: {e!r}") from e


async def fetch_profile(client: httpx.AsyncClient, username: str) -> UserProfile:
    """
    Ranking + liczniki zaakceptowanych zadań.

    UserNotFound gdy matchedUser == null, UpstreamError przy każdym innym problemie.
    """
    data = await graphql_request(
        client,
        USER_PROFILE_OPERATION,
        USER_PROFILE_QUERY,
        {"username": username},
    )
    return parse_profile(username, data)


async def fetch_recent_submissions(
    client: httpx.AsyncClient,
    username: str,
    limit: int = RECENT_SUBMISSIONS_LIMIT,
) -> List[SubmissionRecord]:
    """
    Best effort: przy błędzie upstreamu zwraca [] zamiast wyjątku,
    wtedy statystyki dzień/tydzień/miesiąc wychodzą zerowe.
    """
    try:
        data = await graphql_request(
            client,
            RECENT_SUBMISSIONS_OPERATION,
            RECENT_SUBMISSIONS_QUERY,
            {"username": username, "limit": limit},
        )
    except UpstreamError as e:
        logger.warning("recent submissions unavailable for %s: %s", username, e)
        return []

    items = data.get("recentSubmissionList") or []
    if not isinstance(items, list):
        logger.warning("recent submissions for %s: unexpected payload %r", username, type(items).__name__)
        return []

    return [SubmissionRecord.from_graphql(item) for item in items if isinstance(item, dict)]
