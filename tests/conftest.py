import json
from collections import Counter
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from lcstats.cache import TTLCache
from lcstats.services.stats import StatsService
from lcstats.upstream.client import create_client

# 31 marca: miesiąc wstecz to 28 lutego (przycinanie dnia)
NOW = datetime(2026, 3, 31, 12, 0, tzinfo=timezone.utc)


def ts(dt: datetime) -> str:
    return str(int(dt.timestamp()))


def submission(at: datetime, status: str = "Accepted", title: str = "Two Sum") -> dict:
    return {
        "title": title,
        "titleSlug": title.lower().replace(" ", "-"),
        "timestamp": ts(at),
        "statusDisplay": status,
        "lang": "python3",
    }


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeLeetCode:
    """Udaje https://leetcode.com/graphql dla httpx.MockTransport."""

    def __init__(self) -> None:
        self.calls = Counter()
        self.requests = []
        self.matched_user = {
            "username": "alice",
            "submitStats": {
                "acSubmissionNum": [
                    {"difficulty": "All", "count": 42, "submissions": 80},
                    {"difficulty": "Easy", "count": 30, "submissions": 50},
                    {"difficulty": "Medium", "count": 10, "submissions": 25},
                    {"difficulty": "Hard", "count": 2, "submissions": 5},
                ]
            },
            "profile": {"ranking": 1500},
        }
        self.submissions = [
            submission(NOW - timedelta(minutes=10)),
            submission(NOW - timedelta(days=40), title="Add Two Numbers"),
        ]
        self.profile_status = 200
        self.submissions_status = 200
        self.profile_exc = None
        self.submissions_exc = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        op = body["operationName"]
        self.calls[op] += 1
        self.requests.append(request)

        if op == "getUserProfile":
            if self.profile_exc is not None:
                raise self.profile_exc
            return httpx.Response(
                self.profile_status,
                json={
                    "data": {
                        "allQuestionsCount": [
                            {"difficulty": "All", "count": 3300},
                            {"difficulty": "Easy", "count": 830},
                        ],
                        "matchedUser": self.matched_user,
                    }
                },
            )

        if op == "getRecentSubmissions":
            if self.submissions_exc is not None:
                raise self.submissions_exc
            return httpx.Response(
                self.submissions_status,
                json={"data": {"recentSubmissionList": self.submissions}},
            )

        return httpx.Response(400, json={"errors": [{"message": f"unknown operation {op}"}]})

    @property
    def total_calls(self) -> int:
        return sum(self.calls.values())


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def upstream() -> FakeLeetCode:
    return FakeLeetCode()


@pytest.fixture
async def http_client(upstream: FakeLeetCode):
    client = create_client(transport=httpx.MockTransport(upstream.handler))
    yield client
    await client.aclose()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> TTLCache:
    return TTLCache(ttl=3600, clock=clock)


@pytest.fixture
def service(http_client: httpx.AsyncClient, cache: TTLCache) -> StatsService:
    return StatsService(http_client, cache, now=lambda: NOW)
