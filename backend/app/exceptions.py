"""
Service exceptions and their HTTP error handlers.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class JobNotFoundError(ServiceException):
    """Raised when no job exists for the given identifier."""

    def __init__(self, job_id: str):
        super().__init__(f"Job not found: {job_id}")
        self.job_id = job_id


class EngineError(ServiceException):
    """Raised when the search engine fails or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ServiceException):
    """Raised when a stored document cannot be turned back into a Job."""
    pass


async def job_not_found_handler(request: Request, exc: JobNotFoundError) -> JSONResponse:
    logger.info("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=404, content={"detail": "Job not found"})


async def engine_error_handler(request: Request, exc: EngineError) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=502, content={"detail": "Search engine error"})
