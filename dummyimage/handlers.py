"""Request handling without FastAPI types; the routes wrap these."""

import logging
from collections.abc import Mapping

from dummyimage.dimensions import resolve_dimensions
from dummyimage.errors import MethodNotAllowed
from dummyimage.paths import decompose_path
from dummyimage.schemas import ImageFormat, RenderedImage
from dummyimage.style import resolve_style
from dummyimage.svg import render_svg

ALLOWED_METHODS = ("GET", "HEAD")

DIMENSION_SEGMENT = 0

logger = logging.getLogger("dummyimage.handlers")


def check_method(method: str) -> None:
    if method.upper() not in ALLOWED_METHODS:
        raise MethodNotAllowed(method)


def handle_placeholder(path: str, query: Mapping[str, str] | None = None) -> RenderedImage:
    """Render the placeholder described by ``path`` and ``query``.

    ``path`` is the request path as sent, still percent-encoded.

    Raises RequestTooLarge / RequestTooSmall for out-of-range dimensions;
    every other malformed input falls back to a default.
    """
    parsed = decompose_path(path, query)
    if parsed.requested_format is not ImageFormat.SVG:
        logger.debug("Serving SVG for requested format %s", parsed.requested_format.value)

    dimensions = resolve_dimensions(parsed.segment(DIMENSION_SEGMENT))
    style = resolve_style(parsed, dimensions)
    return render_svg(dimensions, style)
