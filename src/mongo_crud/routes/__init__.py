"""Route initialization module."""

from fastapi import APIRouter

from mongo_crud.routes.health import router as health_router
from mongo_crud.routes.user import router as user_router

api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(user_router)


__all__ = ["api_router"]
