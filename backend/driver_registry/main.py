# driver_registry/main.py
from contextlib import asynccontextmanager

import anyio.to_thread
import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from driver_registry.core.config import settings
from driver_registry.core.logging import setup_logging
from driver_registry.api.v1.routers.drivers import router as drivers_router
from driver_registry.infrastructure.db.migrations import run_migrations
from driver_registry.infrastructure.db.session import SessionLocal, engine, wait_for_database
from driver_registry.infrastructure.repositories.driver_repo_sql import SQLDriverRepository
from driver_registry.services.startup_task import run_startup_task

from driver_registry.middleware.error_handler import http_error_handler
from driver_registry.middleware.request_timing import RequestTimingMiddleware

log = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Any failure before the yield aborts boot; the engine is released either way
    try:
        await wait_for_database()
        await anyio.to_thread.run_sync(run_migrations)
        if settings.run_startup_task:
            async with SessionLocal() as session:
                await run_startup_task(SQLDriverRepository(session))
        log.info("app.ready", app=settings.app_name, environment=settings.environment)
        yield
    finally:
        await engine.dispose()


setup_logging()
app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.cors_origins.split(",")] if settings.cors_origins else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestTimingMiddleware)

app.include_router(drivers_router)

@app.exception_handler(StarletteHTTPException)
async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

@app.exception_handler(RequestValidationError)
async def _validation_exc_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=422, content={"detail": exc.errors()})

@app.exception_handler(Exception)
async def _unhandled_exc_handler(request: Request, exc: Exception):
    return await http_error_handler(request, exc)

@app.get("/healthz")
def healthz():
    return {"ok": True}


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port)
