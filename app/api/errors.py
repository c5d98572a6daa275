import logging
from fastapi import Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.responses import JSONResponse
from app.models.error import MessageResponse, ValidationErrorResponse
from app.core.exceptions import MovieError, MovieValidationError, MalformedBodyError

logger = logging.getLogger(__name__)

async def movie_error_handler(request: Request, exc: Exception):
    assert isinstance(exc, MovieError)

    if isinstance(exc, (MovieValidationError, MalformedBodyError)):
        content = ValidationErrorResponse(error=exc.details or []).model_dump()
    else:
        content = MessageResponse(message=exc.message).model_dump()

    return JSONResponse(status_code=exc.status_code, content=content)

async def request_validation_error_handler(request: Request, exc: Exception):
    assert isinstance(exc, RequestValidationError)

    details = []
    for err in exc.errors():
        # drop the leading "body" segment FastAPI adds to every location
        loc = [part for part in err.get("loc", ()) if part != "body"]
        details.append({"path": loc, "message": err.get("msg", "Invalid request body")})

    logger.debug("Rejected malformed body on %s %s", request.method, request.url.path)
    return await movie_error_handler(request, MalformedBodyError(details=details))

async def http_error_handler(request: Request, exc: Exception):
    assert isinstance(exc, StarletteHTTPException)

    # body parse failures that are not JSON syntax errors (bad encoding, oversized ints)
    if exc.status_code == 400 and request.method in ("POST", "PATCH", "PUT"):
        details = [{"path": [], "message": str(exc.detail)}]
        return await movie_error_handler(request, MalformedBodyError(details=details))

    return await http_exception_handler(request, exc)
