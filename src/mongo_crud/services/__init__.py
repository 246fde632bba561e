"""Service initialization and dependency injection."""

from fastapi import Request

from mongo_crud.services.user_store import MongoUserStore, UserStore


def get_user_store(request: Request) -> UserStore:
    """Get the user store attached to the application at startup.

    Args:
        request: Incoming request

    Returns:
        UserStore instance shared by all handlers
    """
    store = getattr(request.app.state, "user_store", None)
    if store is None:
        raise RuntimeError("User store is not initialized")
    return store


__all__ = ["MongoUserStore", "UserStore", "get_user_store"]
