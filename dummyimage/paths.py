"""Split a request path into the segments the resolvers consume."""

import re
from collections.abc import Mapping
from urllib.parse import parse_qsl, unquote

from dummyimage.schemas import ImageFormat, ParsedRequest

EXTENSION_PATTERN = re.compile(r"\.(webp|gif|jpe?g|png|svg)", re.IGNORECASE)
TRAILING_EXTENSION = re.compile(r"\.(?:webp|gif|jpe?g|png|svg)\Z", re.IGNORECASE)


def detect_format(path: str) -> ImageFormat:
    match = EXTENSION_PATTERN.search(path)
    if not match:
        return ImageFormat.PNG
    ext = match.group(1).lower()
    if ext == "jpeg":
        ext = "jpg"
    return ImageFormat(ext)


def strip_extension(segment: str) -> str:
    return TRAILING_EXTENSION.sub("", segment)


def first_values(pairs) -> dict[str, str]:
    """Collapse repeated query keys, keeping the first value of each."""
    values: dict[str, str] = {}
    for key, value in pairs:
        values.setdefault(key, value)
    return values


def decompose_path(path: str, query: Mapping[str, str] | None = None) -> ParsedRequest:
    """Decompose a percent-encoded request path.

    A raw `&` starts the legacy rewrite query (`/600x400/ccc/000.png&text=Sample`).
    The path and that query are each decoded exactly once.
    """
    path, _, legacy_query = path.partition("&")
    path = unquote(path)
    merged = first_values(parse_qsl(legacy_query, keep_blank_values=True))
    merged.update(query or {})

    path = path.strip("/")
    segments = tuple(strip_extension(segment) for segment in path.split("/"))
    return ParsedRequest(
        raw_path=path,
        raw_query=merged,
        requested_format=detect_format(path),
        segments=segments,
    )
