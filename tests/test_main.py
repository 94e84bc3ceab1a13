import importlib
import os
from unittest.mock import patch

import dummyimage.main


def _load_env_file(*args, **kwargs):
    os.environ["CACHE_ENABLED"] = "true"
    os.environ["CACHE_MAX_ENTRIES"] = "3"
    return True


class TestModuleApp:
    def test_env_file_read_before_cache_is_built(self):
        try:
            with patch.dict("os.environ", {}, clear=True), patch("dotenv.load_dotenv", _load_env_file):
                module = importlib.reload(dummyimage.main)
                assert module.app.state.cache is not None
                assert module.app.state.cache.max_entries == 3
        finally:
            importlib.reload(dummyimage.main)

    def test_cache_disabled_by_env(self):
        with patch.dict("os.environ", {"CACHE_ENABLED": "0"}, clear=True):
            assert dummyimage.main.build_cache() is None
