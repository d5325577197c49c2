
import logging
from fastapi import Request
from fastapi.responses import JSONResponse

log = logging.getLogger("driver_registry.error_handler")

async def http_error_handler(request: Request, exc: Exception):
    log.exception("Unhandled error", extra={"path": request.url.path, "method": request.method})
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal Server Error",
            "error": str(exc),
            "type": type(exc).__name__,
            "path": request.url.path,
        },
    )
