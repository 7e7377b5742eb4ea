"""Run the HTTP service with uvicorn: ``python -m shelfmark.api``."""

from __future__ import annotations

import uvicorn

from shelfmark.api.app import create_app
from shelfmark.config import load_settings


def main() -> None:
    """Serve the application on the configured bind address and port."""
    settings = load_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.bind,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
