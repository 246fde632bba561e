"""User API routes."""

import logging

from bson.errors import InvalidId
from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from mongo_crud.config import Settings, get_settings
from mongo_crud.errors import UserApiError, UserValidationError
from mongo_crud.models.user import UserCreate, parse_user_id, validate_user
from mongo_crud.services import get_user_store
from mongo_crud.services.user_store import UserStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user", tags=["users"], redirect_slashes=False)


async def read_json_body(request: Request) -> bytes:
    """Return the raw request body, rejecting anything not declared as JSON."""
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type != "application/json":
        raise UserApiError(
            status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            "Content-Type must be application/json",
            plain_text=True,
        )
    return await request.body()


def parse_user_body(body: bytes = Depends(read_json_body)) -> UserCreate:
    """Decode the JSON body into a UserCreate."""
    try:
        return UserCreate.model_validate_json(body)
    except ValidationError as e:
        raise UserApiError(
            status.HTTP_400_BAD_REQUEST,
            f"Invalid JSON input: {_describe_error(e)}",
            plain_text=True,
        )


def _describe_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error["loc"])
    if location:
        return f"{location}: {error['msg']}"
    return error["msg"]


@router.get("/{user_id}")
def get_user(user_id: str, store: UserStore = Depends(get_user_store)) -> dict:
    """Fetch a user by ID.

    A stored document that does not decode into a User is reported like any
    other store error.
    """
    try:
        object_id = parse_user_id(user_id)
    except InvalidId:
        raise UserApiError(status.HTTP_400_BAD_REQUEST, "Invalid ID format")

    try:
        user = store.get_user(object_id)
    except (PyMongoError, ValidationError) as e:
        raise UserApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))

    if user is None:
        raise UserApiError(status.HTTP_404_NOT_FOUND, "User not found")
    return {"success": True, "user": user.model_dump()}


@router.post("", status_code=status.HTTP_201_CREATED)
@router.post("/", status_code=status.HTTP_201_CREATED)
def create_user(
    user: UserCreate = Depends(parse_user_body),
    store: UserStore = Depends(get_user_store),
) -> dict:
    """Create a user from a JSON body and return its generated ID."""
    try:
        validate_user(user)
    except UserValidationError as e:
        raise UserApiError(status.HTTP_400_BAD_REQUEST, str(e))

    try:
        user_id = store.add_user(user)
    except PyMongoError as e:
        # The driver error stays in the log; the client only sees a generic message.
        logger.error("Failed to create user: %s", e)
        raise UserApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to create user")

    return {"success": True, "data": user_id}


@router.delete("/{user_id}")
def delete_user(
    user_id: str,
    store: UserStore = Depends(get_user_store),
    settings: Settings = Depends(get_settings),
) -> dict:
    """Delete a user by ID.

    A malformed ID answers 400, or 500 when ``legacy_invalid_id_status`` is set.
    """
    try:
        object_id = parse_user_id(user_id)
    except InvalidId:
        invalid_status = (
            status.HTTP_500_INTERNAL_SERVER_ERROR
            if settings.legacy_invalid_id_status
            else status.HTTP_400_BAD_REQUEST
        )
        raise UserApiError(invalid_status, "Invalid Object Id Provided")

    try:
        deleted_count = store.delete_user(object_id)
    except PyMongoError as e:
        raise UserApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))

    if deleted_count == 0:
        raise UserApiError(status.HTTP_404_NOT_FOUND, "User not found")
    return {"success": True, "message": "User deleted successfully"}
