"""Resolve the first path segment to a bounded width and height."""

import re

from dummyimage.errors import RequestTooLarge, RequestTooSmall
from dummyimage.keywords import lookup_keyword
from dummyimage.schemas import DimensionSpec
from dummyimage.util import round_half_up

DEFAULT_WIDTH = 300.0
DEFAULT_HEIGHT = 150.0
DEFAULT_SEGMENT = "300x150"

MAX_DIMENSION = 9999
MAX_AREA = 33_177_600
MIN_DIMENSION = 1

_NON_NUMERIC = re.compile(r"[^0-9.]")
_LEADING_NUMBER = re.compile(r"[0-9]+\.?[0-9]*|\.[0-9]+")


def parse_dimension(token: str) -> float | None:
    """Parse the leading number of ``token`` once non-numeric characters are dropped.

    ``"12px"`` gives ``12.0``, ``"1.2.3"`` gives ``1.2`` and a token with no
    digits gives ``None``.
    """
    match = _LEADING_NUMBER.match(_NON_NUMERIC.sub("", token))
    if not match:
        return None
    return float(match.group(0))


def resolve_dimensions(segment: str) -> DimensionSpec:
    spec = segment or DEFAULT_SEGMENT
    spec = lookup_keyword(spec) or spec

    tokens = spec.split("x")
    width, height = DEFAULT_WIDTH, DEFAULT_HEIGHT

    parsed_width = parse_dimension(tokens[0])
    has_width = parsed_width is not None and parsed_width > 0
    if has_width:
        width = parsed_width

    if len(tokens) >= 2:
        # A non-positive height keeps the fallback height rather than going square.
        parsed_height = parse_dimension(tokens[1])
        if parsed_height is not None and parsed_height > 0:
            height = parsed_height
    elif has_width:
        height = width

    if width * height > MAX_AREA or width > MAX_DIMENSION or height > MAX_DIMENSION:
        raise RequestTooLarge(width, height)
    if width < MIN_DIMENSION or height < MIN_DIMENSION:
        raise RequestTooSmall(width, height)

    return DimensionSpec(width=round_half_up(width), height=round_half_up(height))
