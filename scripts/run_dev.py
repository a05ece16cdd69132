"""Run the SEIAC live coordination service locally."""
from __future__ import annotations

import uvicorn

from seiac.config import get_settings


def main() -> None:
    """Launch uvicorn with settings-aware defaults.

    The live store is per process, so this always runs a single worker.
    """
    settings = get_settings()
    uvicorn.run(
        "seiac.app:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        workers=1,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
