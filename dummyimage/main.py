import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from dummyimage.cache import InMemoryResponseCache, ResponseCache
from dummyimage.config import settings
from dummyimage.errors import MethodNotAllowed, PlaceholderError
from dummyimage.handlers import ALLOWED_METHODS
from dummyimage.routes import router

logger = logging.getLogger("dummyimage.main")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    yield
    cache: ResponseCache | None = app.state.cache
    if cache is not None:
        await cache.clear()


async def placeholder_error_handler(request: Request, exc: PlaceholderError) -> PlainTextResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    headers = {"Allow": ", ".join(ALLOWED_METHODS)} if isinstance(exc, MethodNotAllowed) else None
    return PlainTextResponse(str(exc), status_code=exc.status_code, headers=headers)


async def routing_error_handler(request: Request, exc: StarletteHTTPException):
    # Verbs the router never dispatches still get the plain-text 405.
    if exc.status_code == 405:
        return await placeholder_error_handler(request, MethodNotAllowed(request.method))
    return await http_exception_handler(request, exc)


def build_cache() -> ResponseCache | None:
    if not settings.cache_enabled:
        return None
    return InMemoryResponseCache(max_entries=settings.cache_max_entries)


def create_app(cache: ResponseCache | None = None) -> FastAPI:
    """Build the placeholder service. ``cache`` is optional; without it every request renders."""
    app = FastAPI(title="DummyImage", lifespan=lifespan)
    app.state.cache = cache
    app.add_exception_handler(PlaceholderError, placeholder_error_handler)
    app.add_exception_handler(StarletteHTTPException, routing_error_handler)
    app.include_router(router)
    return app


# .env must be loaded before the cache settings are read.
load_dotenv()
app = create_app(cache=build_cache())
