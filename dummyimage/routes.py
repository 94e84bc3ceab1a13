import logging
from urllib.parse import quote

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import Response

from dummyimage.cache import ResponseCache
from dummyimage.handlers import check_method, handle_placeholder
from dummyimage.paths import first_values
from dummyimage.schemas import RenderedImage

# Other verbs are rejected by the router and mapped to the same 405 in main.py.
ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

logger = logging.getLogger("dummyimage.routes")

router = APIRouter()


def get_cache(request: Request) -> ResponseCache | None:
    return getattr(request.app.state, "cache", None)


def raw_request_path(request: Request) -> str:
    """Return the path still percent-encoded, so a `%26` never splits the legacy query."""
    raw = request.scope.get("raw_path")
    if raw is None:
        return quote(request.url.path)
    return raw.decode("latin-1").partition("?")[0]


def to_response(image: RenderedImage) -> Response:
    return Response(
        content=image.markup,
        media_type=image.content_type,
        headers=image.cache_directives,
    )


@router.api_route("/{path:path}", methods=ROUTED_METHODS, include_in_schema=False)
async def placeholder(
    request: Request,
    background_tasks: BackgroundTasks,
    cache: ResponseCache | None = Depends(get_cache),
) -> Response:
    check_method(request.method)

    key = str(request.url)
    if cache is not None:
        cached = await cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return to_response(cached)

    image = handle_placeholder(raw_request_path(request), first_values(request.query_params.multi_items()))
    if cache is not None:
        background_tasks.add_task(cache.put, key, image)
    return to_response(image)
