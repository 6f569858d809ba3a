"""Entry point for the share server."""

import time
import uuid

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from common.logging_config import setup_logging
from share_api.config import SERVER_HOST, SERVER_PORT
from share_api.database import init_database
from share_api.exceptions import (
    QRShareException,
    ValidationError,
    FileTooLargeError,
    UnsupportedFileTypeError,
    UploadError,
    PersistenceError,
    ShareNotFoundError,
    InvalidViewStateError
)
from share_api.routes import artifact_router, blob_router, qr_router, share_router, view_router

logger = setup_logging('share_api')
setup_logging('blobstore')

app = FastAPI(
    title="QR Share",
    description="Share a text message or a file through a QR code, optionally password protected",
    version="1.0.0"
)


def _error_response(request: Request, exc: Exception, status_code: int, code: str) -> JSONResponse:
    request_id = getattr(request.state, 'request_id', 'unknown')
    message = f"{type(exc).__name__}: {exc} [request_id={request_id}] path={request.url.path}"
    if status_code >= 500:
        logger.error(message, exc_info=True)
    else:
        logger.warning(message)
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "code": code}
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Middleware to log all HTTP requests and responses.
    """
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    start_time = time.time()

    logger.info(
        f"Request started: {request.method} {request.url.path} [request_id={request_id}]"
    )

    response = await call_next(request)

    duration = time.time() - start_time

    logger.info(
        f"Request completed: {request.method} {request.url.path} "
        f"status={response.status_code} duration={duration:.3f}s [request_id={request_id}]"
    )

    response.headers["X-Request-ID"] = request_id

    return response


@app.on_event("startup")
async def startup_event():
    """
    Initialize database on application startup.
    """
    logger.info("Share server starting up...")
    init_database()
    logger.info("Database initialized")


@app.exception_handler(FileTooLargeError)
async def file_too_large_handler(request: Request, exc: FileTooLargeError):
    return _error_response(request, exc, status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, "FILE_TOO_LARGE")


@app.exception_handler(UnsupportedFileTypeError)
async def unsupported_type_handler(request: Request, exc: UnsupportedFileTypeError):
    return _error_response(request, exc, status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, "UNSUPPORTED_TYPE")


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return _error_response(request, exc, status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR")


@app.exception_handler(ShareNotFoundError)
async def share_not_found_handler(request: Request, exc: ShareNotFoundError):
    return _error_response(request, exc, status.HTTP_404_NOT_FOUND, "NOT_FOUND")


@app.exception_handler(InvalidViewStateError)
async def invalid_view_state_handler(request: Request, exc: InvalidViewStateError):
    return _error_response(request, exc, status.HTTP_409_CONFLICT, "INVALID_VIEW_STATE")


@app.exception_handler(UploadError)
async def upload_error_handler(request: Request, exc: UploadError):
    return _error_response(request, exc, status.HTTP_502_BAD_GATEWAY, "UPLOAD_ERROR")


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    return _error_response(request, exc, status.HTTP_500_INTERNAL_SERVER_ERROR, "PERSISTENCE_ERROR")


@app.exception_handler(QRShareException)
async def share_exception_handler(request: Request, exc: QRShareException):
    return _error_response(request, exc, status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR")


app.include_router(view_router)
app.include_router(share_router)
app.include_router(qr_router)
app.include_router(artifact_router)
app.include_router(blob_router)


@app.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns 200 if service is alive.
    """
    return {"status": "healthy", "service": "share_api"}


def main():
    """Run the share server with uvicorn."""
    logger.info(f"Starting share server on {SERVER_HOST}:{SERVER_PORT}")
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)


if __name__ == "__main__":
    main()
