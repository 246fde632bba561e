"""Data models for the user CRUD service."""

from mongo_crud.models.health import HealthCheckResponse
from mongo_crud.models.user import User, UserCreate, parse_user_id, validate_user

__all__ = ["HealthCheckResponse", "User", "UserCreate", "parse_user_id", "validate_user"]
