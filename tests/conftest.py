import re

import pytest
from starlette.testclient import TestClient

from dummyimage.cache import InMemoryResponseCache
from dummyimage.main import create_app


SVG_PATTERNS = {
    "width": r'width="([^"]+)"',
    "height": r'height="([^"]+)"',
    "view_box": r'viewBox="([^"]+)"',
    "label": r'aria-label="([^"]*)"',
    "bg_color": r'<rect[^>]*fill="#([^"]+)"',
    "text_color": r'<text[^>]*fill="#([^"]+)"',
    "text_content": r"<text[^>]*>([^<]+)</text>",
    "font_size": r'font-size="([^"]+)"',
}


def parse_svg(svg: str) -> dict[str, str]:
    """Pull the interesting attributes out of rendered markup."""
    parsed = {}
    for name, pattern in SVG_PATTERNS.items():
        match = re.search(pattern, svg)
        parsed[name] = match.group(1) if match else ""
    return parsed


@pytest.fixture
def client():
    return TestClient(create_app())


@pytest.fixture
def cache():
    return InMemoryResponseCache(max_entries=8)


@pytest.fixture
def cached_client(cache):
    return TestClient(create_app(cache=cache))
