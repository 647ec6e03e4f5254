import time
from fastapi import Request

from hallyu_api.core.logging import requestLogger

SLOW_REQUEST_MS = 500


async def add_process_time_header(request: Request, call_next):
    start_time = time.perf_counter()
    response = await call_next(request)
    elapsedMs = (time.perf_counter() - start_time) * 1000

    response.headers["X-Process-Time"] = f"{elapsedMs:.2f}ms"
    if elapsedMs > SLOW_REQUEST_MS:
        requestLogger.warning(f"Slow request: {request.url.path} took {elapsedMs:.0f}ms")
    return response
