import math
import re

_NON_HEX = re.compile(r"[^0-9a-fA-F]")

DEFAULT_BACKGROUND = "cccccc"
DEFAULT_FOREGROUND = "000000"


def sanitize_color(raw: str | None, fallback: str) -> str:
    cleaned = _NON_HEX.sub("", raw or "")
    if len(cleaned) == 3:
        return "".join(ch * 2 for ch in cleaned)
    if len(cleaned) == 6:
        return cleaned
    if len(cleaned) > 6:
        return cleaned[:6]
    return fallback


def escape_xml(text: str) -> str:
    # Ampersand first so entities added below are not escaped twice.
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def round_half_up(value: float, places: int = 3) -> float:
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def format_number(value: float) -> str:
    """Render ``300.0`` as ``300`` and ``100.5`` as ``100.5``."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
