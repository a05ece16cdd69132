"""FastAPI application entry point for the SEIAC live coordination service."""
from __future__ import annotations

import asyncio
import contextlib
import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from seiac.config import get_settings
from seiac.routes import auth as auth_routes
from seiac.routes import live as live_routes
from seiac.routes import student as student_routes
from seiac.session_store import live_store


logger = logging.getLogger("seiac.web")
logging.basicConfig(level=logging.INFO)

settings = get_settings()

app = FastAPI(title="SEIAC Live Coordination", debug=settings.DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_sweeper: asyncio.Task | None = None


async def _sweep_periodically(interval_seconds: int) -> None:
    while True:
        await asyncio.sleep(interval_seconds)
        try:
            live_store.sweep()
        except Exception:
            logger.exception("Live store sweep failed")


@app.on_event("startup")
async def on_startup() -> None:
    """Start the background sweep of the live store."""
    global _sweeper
    logger.info("SEIAC live coordination starting up")
    interval = settings.LIVE_SWEEP_INTERVAL_SECONDS
    if interval > 0:
        _sweeper = asyncio.create_task(_sweep_periodically(interval))
        logger.info("Live store sweep every %d seconds", interval)


@app.on_event("shutdown")
async def on_shutdown() -> None:
    global _sweeper
    if _sweeper is not None:
        _sweeper.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await _sweeper
        _sweeper = None


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "healthy", "version": "1.0.0"}


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Custom HTTP exception responses."""
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        detail = exc.detail or "Authentication required."
    elif exc.status_code == status.HTTP_404_NOT_FOUND:
        detail = exc.detail or "The requested resource was not found."
    else:
        detail = exc.detail or "An error occurred while processing the request."
    return JSONResponse({"detail": detail}, status_code=exc.status_code, headers=exc.headers)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all handler for unhandled errors."""
    logger.exception("Unhandled exception: %s", exc)
    return JSONResponse(
        {"detail": "Internal server error. Please try again later."},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


app.include_router(auth_routes.router)
app.include_router(live_routes.router, prefix="/live")
app.include_router(student_routes.router, prefix="/student")
