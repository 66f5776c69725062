# lcstats/upstream/client.py
import httpx
import time
import logging
from typing import Any, Dict

from lcstats.config import LEETCODE_GRAPHQL_URL, UPSTREAM_TIMEOUT
from lcstats.errors import UpstreamError
from lcstats.upstream.metrics import record

upstream_logger = logging.getLogger("upstream")


def create_client(
    timeout: float = UPSTREAM_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Jeden AsyncClient na proces, tworzony w startup (main.py).
    transport podmieniany w testach (httpx.MockTransport).
    """

    async def on_request(request: httpx.Request):
        request.extensions["t0"] = time.perf_counter()

    async def on_response(response: httpx.Response):
        t0 = response.request.extensions.get("t0")
        if t0 is None:
            return

        ms = (time.perf_counter() - t0) * 1000.0
        operation = response.request.extensions.get("operation", "")
        status = response.status_code

        await record(operation=operation, status=status, ms=ms)
        upstream_logger.info("UPSTREAM | %s | %s | %.1fms", operation, status, ms)

    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
        headers={"Accept": "application/json"},
        event_hooks={"request": [on_request], "response": [on_response]},
        transport=transport,
    )


async def graphql_request(
    client: httpx.AsyncClient,
    operation: str,
    query: str,
    variables: Dict[str, Any],
    *,
    url: str = LEETCODE_GRAPHQL_URL,
) -> Dict[str, Any]:
    """
    POST {query, variables, operationName} i zwraca obiekt "data".

    - sukces: event_hooks zrobi record() + upstream_logger.info(...)
    - wyjątek (timeout/connection): tu logujemy + record() ręcznie
    - non-2xx / brak JSON / brak "data": UpstreamError
    """
    payload = {"operationName": operation, "query": query, "variables": variables}
    t0 = time.perf_counter()

    try:
        resp = await client.post(url, json=payload, extensions={"operation": operation})
    except httpx.HTTPError as e:
        ms = (time.perf_counter() - t0) * 1000.0
        await record(operation=operation, status=0, ms=ms)
        upstream_logger.exception("UPSTREAM ERROR | %s | %.1fms | exc=%r", operation, ms, e)
        raise UpstreamError(operation, f"transport error: {e!r}") from e

    if not resp.is_success:
        # body tylko do logu, nigdy do klienta
        upstream_logger.warning(
            "UPSTREAM ERROR | %s | status=%s | body=%r", operation, resp.status_code, resp.text[:200]
        )
        raise UpstreamError(operation, f"HTTP {resp.status_code}", status=resp.status_code)

    try:
        body = resp.json()
    except ValueError as e:
        raise UpstreamError(operation, "response is not JSON", status=resp.status_code) from e

    data = body.get("data") if isinstance(body, dict) else None
    if not isinstance(data, dict):
        errors = body.get("errors") if isinstance(body, dict) else None
        raise UpstreamError(operation, f"response has no data (errors={errors!r})", status=resp.status_code)

    return data
