from types import MappingProxyType

DIMENSION_KEYWORDS: MappingProxyType[str, str] = MappingProxyType({
    # IAB ad units
    "mediumrectangle": "300x250", "medrect": "300x250",
    "squarepopup": "250x250", "sqrpop": "250x250",
    "verticalrectangle": "240x400", "vertrec": "240x400",
    "largerectangle": "336x280", "lrgrec": "336x280",
    "rectangle": "180x150", "rec": "180x150",
    "popunder": "720x300", "pop": "720x300",
    "fullbanner": "468x60", "fullban": "468x60",
    "halfbanner": "234x60", "halfban": "234x60",
    "microbar": "88x31", "mibar": "88x31",
    "button1": "120x90", "but1": "120x90",
    "button2": "120x60", "but2": "120x60",
    "verticalbanner": "120x240", "vertban": "120x240",
    "squarebutton": "125x125", "sqrbut": "125x125",
    "leaderboard": "728x90", "leadbrd": "728x90",
    "wideskyscraper": "160x600", "wiskyscrpr": "160x600",
    "skyscraper": "120x600", "skyscrpr": "120x600",
    "halfpage": "300x600", "hpge": "300x600",
    # Display resolutions
    "cga": "320x200", "qvga": "320x240", "vga": "640x480",
    "wvga": "800x480", "svga": "800x600", "wsvga": "1024x600",
    "xga": "1024x768", "wxga": "1280x800", "sxga": "1280x1024",
    "wsxga": "1440x900", "uxga": "1600x1200", "wuxga": "1920x1200",
    "qxga": "2048x1536", "wqxga": "2560x1600", "qsxga": "2560x2048",
    "wqsxga": "3200x2048", "quxga": "3200x2400", "wquxga": "3840x2400",
    # Video standards
    "ntsc": "720x480", "pal": "768x576",
    "hd720": "1280x720", "720p": "1280x720",
    "hd1080": "1920x1080", "1080p": "1920x1080",
    "2k": "2560x1440", "4k": "3840x2160",
})


def lookup_keyword(segment: str) -> str | None:
    """Return the ``WxH`` string for a size keyword, ignoring case."""
    return DIMENSION_KEYWORDS.get(segment.lower())
