"""Standalone DummyImage server.

Run with:
    poetry run python -m dummyimage.standalone
or directly through uvicorn:
    poetry run uvicorn dummyimage.main:app --host 0.0.0.0 --port 8080
"""

import uvicorn

from dummyimage.config import settings
from dummyimage.main import app


def main() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
