from enum import Enum

from pydantic import BaseModel, ConfigDict


class ImageFormat(str, Enum):
    SVG = "svg"
    PNG = "png"
    JPG = "jpg"
    GIF = "gif"
    WEBP = "webp"


class ParsedRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw_path: str
    raw_query: dict[str, str] = {}
    requested_format: ImageFormat = ImageFormat.PNG
    segments: tuple[str, ...] = ()

    def segment(self, index: int) -> str:
        """Return the segment at ``index`` or an empty string when absent."""
        return self.segments[index] if index < len(self.segments) else ""


class DimensionSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float
    height: float


class StyleSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    background_color: str
    foreground_color: str
    display_text: str


class RenderedImage(BaseModel):
    model_config = ConfigDict(frozen=True)

    markup: str
    content_type: str
    cache_directives: dict[str, str]
