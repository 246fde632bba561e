"""Health check routes."""

import logging

from fastapi import APIRouter, Depends, Request
from pymongo.errors import PyMongoError

from mongo_crud.config import Settings, get_settings
from mongo_crud.models.health import HealthCheckResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
def health_check(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status, version and database reachability
    """
    database = "unavailable"
    store = getattr(request.app.state, "user_store", None)
    if store is not None:
        try:
            store.ping()
            database = "connected"
        except PyMongoError as e:
            logger.warning("Health check ping failed: %s", e)

    return HealthCheckResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment,
        database=database,
    )
