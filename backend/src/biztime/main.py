from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from biztime.db.session import shutdown
from biztime.dependencies import DB
from biztime.exceptions import DomainError, NotFoundError
from biztime.logging import get_logger
from biztime.middleware import REQUEST_ID_HEADER, RequestIDMiddleware, current_request_id
from biztime.routers import company, invoice
from biztime.schemas.error import ErrorDetail, ErrorResponse

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Nothing to warm up on startup; close pooled connections on shutdown."""
    yield
    await shutdown()


app = FastAPI(title="BizTime", lifespan=lifespan)
app.add_middleware(RequestIDMiddleware)
app.include_router(company.router)
app.include_router(invoice.router)


def _error_response(message: str, status: int) -> JSONResponse:
    """Build the standard error envelope. Every error response goes through here."""
    body = ErrorResponse(error=ErrorDetail(message=message, status=status))
    return JSONResponse(status_code=status, content=body.model_dump())


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Answer with the status the error carries."""
    logger.warning("domain_error", error=exc.message, status=exc.status, path=request.url.path)
    return _error_response(exc.message, exc.status)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unmatched paths and unsupported methods both answer 404 "Not Found"."""
    if exc.status_code in (404, 405):
        return await domain_error_handler(request, NotFoundError("Not Found"))
    return _error_response(str(exc.detail), exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report the first failing field as "<location>: <reason>"."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"{location}: {first.get('msg', 'invalid')}"
    else:
        message = "Invalid request"
    logger.warning("validation_error", error=message, path=request.url.path)
    return _error_response(message, 422)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Store faults (constraint violations, connectivity, bad SQL) answer 500.

    The driver message can contain SQL and parameters, so it is logged but
    not returned.
    """
    logger.exception("database_error", path=request.url.path, method=request.method)
    return _error_response("Database error", 500)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log anything unclassified and answer a generic 500.

    Runs outside RequestIDMiddleware, so the request id header is added here.
    """
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    response = _error_response("Internal server error", 500)
    request_id = current_request_id()
    if request_id:
        response.headers[REQUEST_ID_HEADER] = request_id
    return response


@app.get("/health")
async def health(db: DB) -> dict[str, str]:
    """Returns 200 only if the database answers a ping query."""
    await db.execute(text("SELECT 1"))
    return {"status": "ok"}
