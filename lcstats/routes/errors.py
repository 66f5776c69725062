import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status

from lcstats.errors import StatsError, UserNotFound

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """
    Rejestrować przed CORSMiddleware: middleware dodany później jest zewnętrzny,
    więc CORS obejmuje też odpowiedzi 500.
    """

    @app.exception_handler(StatsError)
    async def stats_error(request: Request, exc: StatsError):
        if not isinstance(exc, UserNotFound):
            logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc)
        return JSONResponse({"error": exc.public_message}, status_code=exc.status_code)

    @app.middleware("http")
    async def internal_error(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            error_id = uuid.uuid4().hex[:10]
            logger.exception("500 ERROR [%s] %s %s: %r", error_id, request.method, request.url.path, exc)
            return JSONResponse(
                {"error": "Server error"},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
