"""Resolve colors and display text, letting query parameters override the path."""

from dummyimage.schemas import DimensionSpec, ParsedRequest, StyleSpec
from dummyimage.util import DEFAULT_BACKGROUND, DEFAULT_FOREGROUND, format_number, sanitize_color

BACKGROUND_SEGMENT = 1
FOREGROUND_SEGMENT = 2


def default_text(dimensions: DimensionSpec) -> str:
    return f"{format_number(dimensions.width)} × {format_number(dimensions.height)}"


def resolve_text(raw: str | None, dimensions: DimensionSpec) -> str:
    # Only the empty string counts as absent; "0" is real text.
    if not raw:
        return default_text(dimensions)
    return raw.replace("+", " ").replace("|", "\n")


def pick_color(query_value: str | None, segment_value: str, fallback: str) -> str:
    return sanitize_color(query_value or segment_value, fallback)


def resolve_style(parsed: ParsedRequest, dimensions: DimensionSpec) -> StyleSpec:
    query = parsed.raw_query
    return StyleSpec(
        background_color=pick_color(
            query.get("bg"), parsed.segment(BACKGROUND_SEGMENT), DEFAULT_BACKGROUND
        ),
        foreground_color=pick_color(
            query.get("fg"), parsed.segment(FOREGROUND_SEGMENT), DEFAULT_FOREGROUND
        ),
        display_text=resolve_text(query.get("text"), dimensions),
    )
