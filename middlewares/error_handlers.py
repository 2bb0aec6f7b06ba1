import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from utils.errors import DomainError

logger = logging.getLogger("ErrorHandlers")


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.info("%s %s -> %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.to_detail()},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Map every domain error to its 4xx response in one place."""
    app.add_exception_handler(DomainError, domain_error_handler)
