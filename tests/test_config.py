from unittest.mock import patch

from dummyimage.config import Settings


class TestSettings:
    def test_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings()
            assert s.log_level == "INFO"
            assert s.cache_enabled is True
            assert s.cache_max_entries == 1024
            assert s.host == "0.0.0.0"
            assert s.port == 8080

    def test_env_fallback(self):
        with patch.dict("os.environ", {
            "LOG_LEVEL": "debug",
            "CACHE_ENABLED": "false",
            "CACHE_MAX_ENTRIES": "16",
            "PORT": "9000",
        }, clear=True):
            s = Settings()
            assert s.log_level == "DEBUG"
            assert s.cache_enabled is False
            assert s.cache_max_entries == 16
            assert s.port == 9000

    def test_attribute_overrides_env(self):
        with patch.dict("os.environ", {"CACHE_MAX_ENTRIES": "16", "CACHE_ENABLED": "true"}, clear=True):
            s = Settings()
            s.CACHE_MAX_ENTRIES = 64
            s.CACHE_ENABLED = False
            assert s.cache_max_entries == 64
            assert s.cache_enabled is False
