"""Server Entry Point: runs the gateway under uvicorn.

Invariants:
    - Listens on settings.host:settings.port, nothing else
    - Logging is owned by the app lifespan (uvicorn's log config disabled)
"""

import uvicorn

from app.config import get_settings
from app.main import create_app


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
