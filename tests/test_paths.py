from dummyimage.paths import decompose_path, detect_format, strip_extension
from dummyimage.schemas import ImageFormat


class TestDetectFormat:
    def test_defaults_to_png(self):
        assert detect_format("300x200") is ImageFormat.PNG

    def test_svg(self):
        assert detect_format("300x200.svg") is ImageFormat.SVG

    def test_jpeg_normalized(self):
        assert detect_format("300x200.jpeg") is ImageFormat.JPG

    def test_case_insensitive(self):
        assert detect_format("300x200.PNG") is ImageFormat.PNG
        assert detect_format("300x200.WebP") is ImageFormat.WEBP

    def test_extension_mid_path(self):
        assert detect_format("300x200.gif/ff0000/ffffff") is ImageFormat.GIF

    def test_first_extension_wins(self):
        assert detect_format("300x200.gif/ff0000.jpg") is ImageFormat.GIF


class TestStripExtension:
    def test_trailing_extension_removed(self):
        assert strip_extension("300x200.png") == "300x200"

    def test_mixed_case(self):
        assert strip_extension("fff.JPEG") == "fff"

    def test_unknown_extension_kept(self):
        assert strip_extension("favicon.ico") == "favicon.ico"

    def test_only_last_suffix_removed(self):
        assert strip_extension("a.png.gif") == "a.png"


class TestDecomposePath:
    def test_slashes_stripped(self):
        parsed = decompose_path("//300x200/ff0000//")
        assert parsed.raw_path == "300x200/ff0000"
        assert parsed.segments == ("300x200", "ff0000")

    def test_empty_path(self):
        parsed = decompose_path("/")
        assert parsed.segments == ("",)
        assert parsed.segment(0) == ""
        assert parsed.segment(2) == ""
        assert parsed.requested_format is ImageFormat.PNG

    def test_extension_on_each_segment(self):
        parsed = decompose_path("/300x200.jpg/ff0000.png/ffffff.gif")
        assert parsed.segments == ("300x200", "ff0000", "ffffff")
        assert parsed.requested_format is ImageFormat.JPG

    def test_query_kept(self):
        parsed = decompose_path("/300x200", {"text": "Hi", "bg": "000"})
        assert parsed.raw_query == {"text": "Hi", "bg": "000"}

    def test_legacy_ampersand_query(self):
        parsed = decompose_path("/600x400/ccc/000.png&text=Sample")
        assert parsed.segments == ("600x400", "ccc", "000")
        assert parsed.raw_query == {"text": "Sample"}
        assert parsed.requested_format is ImageFormat.PNG

    def test_legacy_query_loses_to_real_query(self):
        parsed = decompose_path("/600x400&text=old&bg=f00", {"text": "new"})
        assert parsed.raw_query == {"text": "new", "bg": "f00"}

    def test_legacy_query_decodes_plus(self):
        parsed = decompose_path("/600x400&text=Hello+World")
        assert parsed.raw_query["text"] == "Hello World"

    def test_path_percent_decoded(self):
        parsed = decompose_path("/300x200/%23ff0000")
        assert parsed.segments == ("300x200", "#ff0000")

    def test_encoded_ampersand_stays_in_segment(self):
        parsed = decompose_path("/300x200/f00%26text=pwn")
        assert parsed.segments == ("300x200", "f00&text=pwn")
        assert parsed.raw_query == {}

    def test_legacy_query_decoded_once(self):
        parsed = decompose_path("/300x200&text=100%2525")
        assert parsed.raw_query == {"text": "100%25"}
