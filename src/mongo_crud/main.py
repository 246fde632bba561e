"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

from mongo_crud.config import get_settings
from mongo_crud.errors import UserApiError
from mongo_crud.routes import api_router
from mongo_crud.services.mongo_client import connect_mongo
from mongo_crud.services.user_store import MongoUserStore

# Initialize settings
settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Handle application lifespan events."""
    logger.info(f"{settings.app_name} v{settings.app_version} starting")
    logger.info(f"Environment: {settings.environment}")

    # A failed connect aborts startup
    client = connect_mongo(settings)
    app.state.user_store = MongoUserStore(
        client,
        database_name=settings.database_name,
        collection_name=settings.users_collection,
        operation_timeout=settings.operation_timeout_seconds,
    )
    logger.info(f"Server is running on port {settings.api_port}")

    yield

    logger.info(f"{settings.app_name} shutting down")
    client.close()


app = FastAPI(
    title=settings.app_name,
    description="User CRUD service backed by MongoDB",
    version=settings.app_version,
    lifespan=lifespan,
    redirect_slashes=False,
)


@app.exception_handler(UserApiError)
async def user_api_error_handler(request: Request, exc: UserApiError):
    """Render UserApiError as the JSON envelope, or plain text when requested."""
    if exc.status_code >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    else:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)

    if exc.plain_text:
        return PlainTextResponse(exc.message, status_code=exc.status_code)
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all that never leaks internal details."""
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": "Internal server error"},
    )


app.include_router(api_router)


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "mongo_crud.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
