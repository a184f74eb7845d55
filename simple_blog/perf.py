# simple_blog/perf.py
import functools
import logging
import time
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import Request

logger = logging.getLogger(__name__)


@asynccontextmanager
async def async_perf_log(operation: str, logger: logging.Logger = logger):
    """Async context manager that logs how long a block took"""
    start: float = time.perf_counter()
    logger.debug(f"Starting: {operation}")
    try:
        yield
    except Exception as e:
        elapsed: float = time.perf_counter() - start
        logger.error(f"Failed: {operation} after {elapsed:.3f}s - {e}")
        raise
    else:
        elapsed = time.perf_counter() - start
        logger.debug(f"Completed: {operation} in {elapsed:.3f}s")


def time_async_function(func: Callable) -> Callable:
    """Decorator to time async route handlers"""

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        async with async_perf_log(f"Function: {func.__name__}"):
            return await func(*args, **kwargs)

    return wrapper


async def performance_middleware(request: Request, call_next):
    """Logs every request with its status and elapsed time"""
    start_time: float = time.perf_counter()
    route = f"{request.method} {request.url.path}"

    try:
        response = await call_next(request)
    except Exception as e:
        elapsed: float = time.perf_counter() - start_time
        logger.error(f"Request failed: {route} Error: {e} Time: {elapsed:.3f}s")
        raise

    elapsed = time.perf_counter() - start_time
    logger.info(f"{route} -> {response.status_code} in {elapsed:.3f}s")
    response.headers["X-Process-Time"] = f"{elapsed:.3f}"
    return response
