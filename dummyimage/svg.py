from dummyimage.schemas import DimensionSpec, RenderedImage, StyleSpec
from dummyimage.util import escape_xml, format_number

SVG_CONTENT_TYPE = "image/svg+xml; charset=utf-8"

CACHE_DIRECTIVES: dict[str, str] = {
    "Cache-Control": "public, max-age=31536000, immutable",
    "Access-Control-Allow-Origin": "*",
}

MIN_FONT_SIZE = 5
MAX_FONT_SIZE = 200
WIDTH_FACTOR = 1.15
HEIGHT_FACTOR = 0.5

FONT_FAMILY = "system-ui, -apple-system, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif"

SVG_TEMPLATE = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
    'viewBox="0 0 {width} {height}" role="img" aria-label="{label}">\n'
    '  <rect width="100%" height="100%" fill="#{background}" />\n'
    '  <text x="50%" y="50%" dominant-baseline="middle" text-anchor="middle"\n'
    '        font-family="{font_family}"\n'
    '        font-size="{font_size}"\n'
    '        fill="#{foreground}">{text}</text>\n'
    "</svg>"
)


def compute_font_size(width: float, height: float, text: str) -> float:
    """Fit the text to the width, capped at half the height, clamped to [5, 200].

    Line breaks do not count toward the text length. Text with nothing left
    to measure gets the minimum size.
    """
    length = len(text.replace("\n", ""))
    if length == 0:
        return MIN_FONT_SIZE
    size = min(width / length * WIDTH_FACTOR, height * HEIGHT_FACTOR)
    return max(MIN_FONT_SIZE, min(MAX_FONT_SIZE, size))


def render_svg(dimensions: DimensionSpec, style: StyleSpec) -> RenderedImage:
    safe_text = escape_xml(style.display_text)
    font_size = compute_font_size(dimensions.width, dimensions.height, style.display_text)
    markup = SVG_TEMPLATE.format(
        width=format_number(dimensions.width),
        height=format_number(dimensions.height),
        label=safe_text,
        background=style.background_color,
        foreground=style.foreground_color,
        font_family=FONT_FAMILY,
        font_size=format_number(font_size),
        text=safe_text,
    )
    return RenderedImage(
        markup=markup,
        content_type=SVG_CONTENT_TYPE,
        cache_directives=dict(CACHE_DIRECTIVES),
    )
